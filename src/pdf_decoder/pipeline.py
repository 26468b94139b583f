"""Dispatches documents to the content decoder that supports their mime type."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Union

import filetype

from .decoders.base import BaseContentDecoder
from .errors import UnsupportedContentError
from .models.entities import FileContent

logger = logging.getLogger(__name__)


class DecoderPipeline:
    """Orchestrates mime detection -> decoder selection -> decode."""

    def __init__(self, decoders: List[BaseContentDecoder]):
        self.decoders = list(decoders)

    def find_decoder(self, mime_type: Optional[str]) -> Optional[BaseContentDecoder]:
        """Return the first registered decoder supporting ``mime_type``."""
        for decoder in self.decoders:
            if decoder.supports_mime_type(mime_type):
                return decoder
        return None

    async def decode_file(
        self,
        file_path: Union[str, Path],
        mime_type: Optional[str] = None,
        cancellation: Optional[asyncio.Event] = None,
    ) -> FileContent:
        """
        Decode a document on disk.

        Args:
            file_path: Path to the document.
            mime_type: Declared mime type. Detected from the file content
                when omitted.
            cancellation: Optional event aborting the decode once set.

        Returns:
            The decoded FileContent.

        Raises:
            UnsupportedContentError: If the type is unknown or no decoder
                handles it.
        """
        label = str(file_path)
        mime_type = mime_type or self._detect_mime_type(label, label)
        decoder = self._require_decoder(mime_type, label)

        logger.info("Decoding %s (%s) with %s...", label, mime_type, type(decoder).__name__)
        content = await decoder.decode_file(file_path, cancellation)
        logger.info("Extracted %d sections from %s", len(content.sections), label)
        return content

    async def decode_bytes(
        self,
        data: bytes,
        mime_type: Optional[str] = None,
        cancellation: Optional[asyncio.Event] = None,
    ) -> FileContent:
        """Decode an in-memory document; see ``decode_file``."""
        label = f"<{len(data)} bytes>"
        mime_type = mime_type or self._detect_mime_type(data, label)
        decoder = self._require_decoder(mime_type, label)

        logger.info("Decoding %s (%s) with %s...", label, mime_type, type(decoder).__name__)
        content = await decoder.decode_bytes(data, cancellation)
        logger.info("Extracted %d sections from %s", len(content.sections), label)
        return content

    async def close(self) -> None:
        """Close every registered decoder."""
        for decoder in self.decoders:
            await decoder.close()

    def _require_decoder(self, mime_type: str, label: str) -> BaseContentDecoder:
        decoder = self.find_decoder(mime_type)
        if decoder is None:
            raise UnsupportedContentError(f"No decoder available for {mime_type}: {label}")
        return decoder

    @staticmethod
    def _detect_mime_type(source, label: str) -> str:
        """Detect a mime type from magic bytes."""
        kind = filetype.guess(source)
        if kind is None:
            raise UnsupportedContentError(f"File type could not be determined: {label}")
        return kind.mime
