# src/md_kit/document/store.py

import logging
from dataclasses import replace
from pathlib import Path
from time import monotonic

from md_kit.errors import ParseError
from md_kit.observability import names
from md_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .markdown_parser import MarkdownParser
from .models import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    """Loads Markdown text into immutable Documents.

    The store never mutates a Document after it is returned; callers may
    hold it for the lifetime of a viewing session.
    """

    def __init__(
        self,
        parser: DocumentParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._parser = parser or MarkdownParser()
        self.metrics_hook = metrics_hook

    def load(self, source_text: str) -> Document:
        """Parse Markdown source text.

        Raises:
            ParseError: If a fenced code block is never closed.
        """
        start = monotonic()
        self.metrics_hook.increment(names.DOCUMENT_LOADS_TOTAL)
        try:
            document = self._parser.parse(source_text)
        except ParseError:
            self.metrics_hook.increment(names.DOCUMENT_PARSE_ERRORS_TOTAL)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DOCUMENT_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.DOCUMENT_BLOCKS, len(document.blocks))
        self.metrics_hook.record_gauge(
            names.DOCUMENT_CODE_BLOCKS, len(document.code_blocks)
        )
        logger.info(
            "Loaded document %r: %d blocks, %d headings",
            document.title,
            len(document.blocks),
            len(document.toc),
        )
        return document

    def load_file(self, path: str | Path, encoding: str = "utf-8") -> Document:
        """Read and parse a Markdown file. OSError propagates unchanged."""
        path = Path(path)
        logger.info("Loading Markdown file: %s", path)
        document = self.load(path.read_text(encoding=encoding))
        metadata = {**document.metadata, "source_path": str(path)}
        return replace(document, metadata=metadata)


_default_store = DocumentStore()


def load(source_text: str) -> Document:
    """Parse Markdown source text with the default store."""
    return _default_store.load(source_text)


def load_file(path: str | Path) -> Document:
    """Read and parse a Markdown file with the default store."""
    return _default_store.load_file(path)
