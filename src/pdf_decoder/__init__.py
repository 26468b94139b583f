"""PDF text extraction through Azure AI Document Intelligence."""

from .config import AuthTypes, DocIntelSettings, get_settings, load_settings
from .decoders import AzureDocIntelPdfDecoder, BaseContentDecoder
from .errors import ConfigurationError, DecoderError, UnsupportedContentError
from .factory import build_decoder, build_pipeline
from .models.entities import FileContent, FileSection, MimeTypes
from .pipeline import DecoderPipeline

__all__ = [
    "AuthTypes",
    "DocIntelSettings",
    "get_settings",
    "load_settings",
    "AzureDocIntelPdfDecoder",
    "BaseContentDecoder",
    "ConfigurationError",
    "DecoderError",
    "UnsupportedContentError",
    "build_decoder",
    "build_pipeline",
    "DecoderPipeline",
    "FileContent",
    "FileSection",
    "MimeTypes",
]
