"""Content decoders turning binary documents into text sections."""

from .base import BaseContentDecoder
from .docintel_decoder import AzureDocIntelPdfDecoder

__all__ = ["BaseContentDecoder", "AzureDocIntelPdfDecoder"]
