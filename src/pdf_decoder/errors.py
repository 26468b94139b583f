"""Exceptions raised by the content decoders.

Failures coming from the Azure SDK (``azure.core.exceptions.AzureError`` and
its subclasses) are not wrapped; they reach the caller unchanged. Cancellation
is always ``asyncio.CancelledError``.
"""


class DecoderError(Exception):
    """Base class for decoder errors."""


class ConfigurationError(DecoderError):
    """The decoder configuration is missing or invalid."""


class UnsupportedContentError(DecoderError):
    """No decoder is able to handle the given content."""
