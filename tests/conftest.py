"""Shared pytest fixtures and fakes for the decoder tests.

No test talks to Azure: the analysis client is replaced by
``FakeAnalysisClient``, which records submitted streams and answers with
canned pages of lines.
"""

import asyncio
import logging
from types import SimpleNamespace
from typing import Callable, List, Optional

import pytest
import structlog

from pdf_decoder.config import DocIntelSettings

ENDPOINT = "https://unit-test.cognitiveservices.azure.com/"

# %PDF header followed by filler, enough for magic-byte detection
PDF_BYTES = b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< >>\nendobj\n"


def make_settings(**overrides) -> DocIntelSettings:
    values = {"endpoint": ENDPOINT, "auth": "APIKey", "api_key": "secret-key"}
    values.update(overrides)
    return DocIntelSettings(_env_file=None, **values)


def make_result(pages: Optional[List[List[str]]]):
    """Build an object shaped like an AnalyzeResult from lists of line strings."""
    if pages is None:
        return SimpleNamespace(pages=None)
    return SimpleNamespace(
        pages=[
            SimpleNamespace(
                page_number=i,
                lines=[SimpleNamespace(content=line) for line in lines],
            )
            for i, lines in enumerate(pages, start=1)
        ]
    )


class FakePoller:
    """Stand-in for the SDK's AsyncLROPoller."""

    def __init__(self, result, delay: float = 0.0, before_result: Optional[Callable] = None):
        self._result = result
        self._delay = delay
        self._before_result = before_result
        self.waiting = False
        self.finished = False

    async def result(self):
        self.waiting = True
        if self._before_result is not None:
            await self._before_result()
        if self._delay:
            await asyncio.sleep(self._delay)
        self.finished = True
        if isinstance(self._result, BaseException):
            raise self._result
        return self._result


class FakeAnalysisClient:
    """Records every submission and returns pollers built by ``poller_factory``.

    ``poller_factory`` receives the submitted bytes and returns a FakePoller;
    ``on_submit`` runs after the document has been read.
    """

    def __init__(
        self,
        poller_factory=None,
        submit_error: Optional[Exception] = None,
        on_submit: Optional[Callable] = None,
    ):
        self.poller_factory = poller_factory or (lambda data: FakePoller(make_result([])))
        self.submit_error = submit_error
        self.on_submit = on_submit
        self.submitted = []
        self.streams = []
        self.closed = False

    async def begin_analyze_document(self, model_id, document):
        self.streams.append(document)
        data = document.read()
        self.submitted.append((model_id, data))
        if self.on_submit is not None:
            self.on_submit()
        if self.submit_error is not None:
            raise self.submit_error
        return self.poller_factory(data)

    async def close(self):
        self.closed = True


def run_async(coro):
    return asyncio.run(coro)


@pytest.fixture
def settings() -> DocIntelSettings:
    return make_settings()


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "document.pdf"
    path.write_bytes(PDF_BYTES)
    return path


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    azure_level = logging.getLogger("azure").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("azure").setLevel(azure_level)
    structlog.reset_defaults()
