"""Factory for constructing fully wired decoders."""

from typing import Optional

from .config import DocIntelSettings, get_settings
from .decoders.docintel_decoder import AzureDocIntelPdfDecoder
from .logging_config import setup_logging
from .pipeline import DecoderPipeline


def build_decoder(
    settings: Optional[DocIntelSettings] = None,
    credential=None,
) -> AzureDocIntelPdfDecoder:
    """Build an AzureDocIntelPdfDecoder from settings (environment by default)."""
    settings = settings or get_settings()
    return AzureDocIntelPdfDecoder(settings, credential=credential)


def build_pipeline(
    settings: Optional[DocIntelSettings] = None,
    credential=None,
    configure_logging: bool = True,
) -> DecoderPipeline:
    """Build a DecoderPipeline wired with the configured decoders.

    configure_logging: apply ``log_level``/``log_format`` from settings.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(log_level=settings.log_level, log_format=settings.log_format)

    return DecoderPipeline(
        decoders=[build_decoder(settings, credential=credential)],
    )
