"""Abstract base class for content decoders."""

import asyncio
import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..models.entities import FileContent


class BaseContentDecoder(ABC):
    """Interface for decoders turning binary documents into text sections.

    Subclasses implement ``decode_stream``; the file and bytes entry points
    open a stream and delegate to it, closing the stream on every exit path.
    """

    @abstractmethod
    def supports_mime_type(self, mime_type: Optional[str]) -> bool:
        """Return True when this decoder can handle ``mime_type``."""

    @abstractmethod
    async def decode_stream(
        self,
        stream: BinaryIO,
        cancellation: Optional[asyncio.Event] = None,
    ) -> FileContent:
        """
        Decode a binary stream into text sections.

        Args:
            stream: Readable binary stream positioned at the document start.
            cancellation: Optional event; once set, decoding stops with
                ``asyncio.CancelledError``.

        Returns:
            FileContent holding one section per page.
        """

    async def decode_file(
        self,
        file_path: Union[str, Path],
        cancellation: Optional[asyncio.Event] = None,
    ) -> FileContent:
        """Decode the document stored at ``file_path``."""
        with open(file_path, "rb") as stream:
            return await self.decode_stream(stream, cancellation)

    async def decode_bytes(
        self,
        data: Union[bytes, bytearray, memoryview],
        cancellation: Optional[asyncio.Event] = None,
    ) -> FileContent:
        """Decode an in-memory document."""
        with io.BytesIO(data) as stream:
            return await self.decode_stream(stream, cancellation)

    async def close(self) -> None:
        """Release resources held by the decoder."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def raise_if_cancelled(cancellation: Optional[asyncio.Event]) -> None:
    """Raise ``asyncio.CancelledError`` if the cancellation event is set."""
    if cancellation is not None and cancellation.is_set():
        raise asyncio.CancelledError("Decoding cancelled")
