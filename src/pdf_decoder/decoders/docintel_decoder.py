"""PDF text extraction using Azure AI Document Intelligence (prebuilt-read model)."""

import asyncio
import logging
from typing import BinaryIO, Optional

import filetype
from azure.ai.formrecognizer.aio import DocumentAnalysisClient
from azure.core.credentials import AzureKeyCredential
from azure.identity.aio import DefaultAzureCredential

from .base import BaseContentDecoder, raise_if_cancelled
from ..config import AuthTypes, DocIntelSettings
from ..errors import ConfigurationError, UnsupportedContentError
from ..models.entities import LINE_SEPARATOR, FileContent, MimeTypes

logger = logging.getLogger(__name__)

# Header bytes inspected for magic-number detection
_SIGNATURE_BYTES = 8192


class AzureDocIntelPdfDecoder(BaseContentDecoder):
    """Extract text from PDF files with Azure AI Document Intelligence.

    The document is submitted to the remote "read" model and the decoder
    waits for the long-running operation to finish. Each page of the result
    becomes one section whose text is the page lines joined with CRLF. Line
    content is kept exactly as recognized: no trimming, no reflowing.

    The client is built once and shared by concurrent decode calls; every
    call owns its own stream and poller.
    """

    def __init__(
        self,
        config: DocIntelSettings,
        credential=None,
        client: Optional[DocumentAnalysisClient] = None,
    ):
        """
        Initialize the decoder.

        Args:
            config: Endpoint and authentication settings.
            credential: Async token credential used with the AzureIdentity
                mode. Defaults to ``DefaultAzureCredential``.
            client: Pre-built analysis client; skips client construction.
                The caller keeps ownership: ``close`` leaves it open.

        Raises:
            ConfigurationError: If the auth mode is unsupported or the API
                key is missing.
        """
        self.model_id = config.model_id
        self._owned_credential = None
        self._owns_client = client is None

        if not config.endpoint:
            logger.critical("Azure AI Document Intelligence endpoint is empty")
            raise ConfigurationError("Azure AI Document Intelligence endpoint is empty")

        if config.auth == AuthTypes.AZURE_IDENTITY:
            if credential is None and client is None:
                credential = DefaultAzureCredential()
                self._owned_credential = credential
        elif config.auth == AuthTypes.API_KEY:
            if not config.api_key:
                logger.critical("Azure AI Document Intelligence API key is empty")
                raise ConfigurationError("Azure AI Document Intelligence API key is empty")
            credential = AzureKeyCredential(config.api_key)
        else:
            logger.critical(
                "Azure AI Document Intelligence authentication type '%s' undefined or not supported",
                config.auth,
            )
            raise ConfigurationError(
                f"Azure AI Document Intelligence authentication type '{config.auth}' "
                "undefined or not supported"
            )

        self.client = client or DocumentAnalysisClient(config.endpoint, credential)

    def supports_mime_type(self, mime_type: Optional[str]) -> bool:
        return mime_type is not None and mime_type.lower().startswith(MimeTypes.PDF)

    async def decode_stream(
        self,
        stream: BinaryIO,
        cancellation: Optional[asyncio.Event] = None,
    ) -> FileContent:
        """Submit the stream for analysis and build one section per page."""
        logger.debug("Extracting text from PDF file")
        raise_if_cancelled(cancellation)
        self._check_content_type(stream)

        poller = await self.begin_analysis(stream)
        analysis = await self.wait_for_result(poller, cancellation)

        result = FileContent(mime_type=MimeTypes.PLAIN_TEXT)
        for page_number, page in enumerate(analysis.pages or [], start=1):
            page_content = LINE_SEPARATOR.join(line.content for line in page.lines or [])
            result.add_section(page_number, page_content, is_image=False)

        return result

    async def begin_analysis(self, stream: BinaryIO):
        """Submit a document to the read model and return the operation poller."""
        return await self.client.begin_analyze_document(self.model_id, stream)

    async def wait_for_result(self, poller, cancellation: Optional[asyncio.Event] = None):
        """
        Wait for a submitted analysis to complete.

        Args:
            poller: Poller returned by ``begin_analysis``.
            cancellation: Optional event aborting the wait once set.

        Returns:
            The service ``AnalyzeResult``.

        Raises:
            asyncio.CancelledError: If ``cancellation`` is set before the
                operation completes.
        """
        raise_if_cancelled(cancellation)
        if cancellation is None:
            return await poller.result()

        result_task = asyncio.ensure_future(poller.result())
        cancel_task = asyncio.ensure_future(cancellation.wait())
        try:
            await asyncio.wait(
                {result_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            cancel_task.cancel()
            if not result_task.done():
                result_task.cancel()
                await asyncio.gather(result_task, return_exceptions=True)

        # A result arriving in the same step as the cancellation is discarded
        if result_task.cancelled() or cancellation.is_set():
            if not result_task.cancelled():
                result_task.exception()
            raise asyncio.CancelledError("Document analysis cancelled")
        return result_task.result()

    @staticmethod
    def _check_content_type(stream: BinaryIO) -> None:
        """Reject streams whose magic bytes identify a non-PDF type.

        Unrecognized or non-seekable input is passed through to the service.
        """
        if not stream.seekable():
            return
        start = stream.tell()
        header = stream.read(_SIGNATURE_BYTES)
        stream.seek(start)

        kind = filetype.guess(header)
        if kind is not None and kind.mime != MimeTypes.PDF:
            raise UnsupportedContentError(f"Input is not a PDF (detected: {kind.mime})")

    async def close(self) -> None:
        """Close the analysis client and credential if they were created here."""
        if self._owns_client:
            await self.client.close()
        if self._owned_credential is not None:
            await self._owned_credential.close()
