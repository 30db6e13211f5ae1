"""Pytest fixtures for pdf-split tests."""

import threading
import time
from pathlib import Path

import fitz  # PyMuPDF
import pytest

from pdf_split.documents import (
    DocumentEngine,
    DocumentHandle,
    DocumentOpenError,
    ExtractionError,
    Page,
    PageOpenError,
)

# ---------------------------------------------------------------------------
# Fake document engine
# ---------------------------------------------------------------------------


class FakePage(Page):
    def __init__(self, document: "FakeDocument", index: int):
        self.document = document
        self.index = index
        self.closed = False

    def extract_text(self) -> str:
        if self.index in self.document.unreadable_pages:
            raise ExtractionError(f"unreadable page {self.index}", self.index)
        if self.document.delay:
            time.sleep(self.document.delay)
        return self.document.texts[self.index]

    def extract_images(self) -> list[bytes]:
        if self.index in self.document.broken_image_pages:
            raise ExtractionError(f"undecodable image on page {self.index}", self.index)
        return list(self.document.images.get(self.index, []))

    def close(self) -> None:
        self.closed = True
        with self.document._lock:
            self.document.pages_closed += 1


class FakeDocument(DocumentHandle):
    """In-memory document that records which pages were opened.

    Attributes:
        texts: Text of each page, by index
        failing_pages: Indices whose open_page() raises PageOpenError
        unreadable_pages: Indices whose extract_text() raises ExtractionError
        images: PNG payloads per page index
        broken_image_pages: Indices whose extract_images() raises ExtractionError
        delay: Seconds to sleep in extract_text() to encourage interleaving
    """

    def __init__(
        self,
        texts: list[str],
        failing_pages: set[int] | None = None,
        unreadable_pages: set[int] | None = None,
        images: dict[int, list[bytes]] | None = None,
        broken_image_pages: set[int] | None = None,
        delay: float = 0.0,
    ):
        self.texts = texts
        self.failing_pages = failing_pages or set()
        self.unreadable_pages = unreadable_pages or set()
        self.images = images or {}
        self.broken_image_pages = broken_image_pages or set()
        self.delay = delay
        self.opened: list[int] = []
        self.pages_closed = 0
        self.closed = False
        self._lock = threading.Lock()

    @property
    def page_count(self) -> int:
        return len(self.texts)

    def open_page(self, index: int) -> FakePage:
        with self._lock:
            self.opened.append(index)
        if index in self.failing_pages:
            raise PageOpenError(f"cannot open page {index}", index)
        return FakePage(self, index)

    def close(self) -> None:
        self.closed = True


class FakeEngine(DocumentEngine):
    """Engine serving FakeDocuments keyed by file name.

    Files not registered with ``add`` fail to open, as do names listed in
    ``unopenable``.
    """

    def __init__(self):
        self.documents: dict[str, FakeDocument] = {}
        self.unopenable: set[str] = set()
        self.open_order: list[str] = []

    def add(self, name: str, texts: list[str], **kwargs) -> FakeDocument:
        document = FakeDocument(texts, **kwargs)
        self.documents[name] = document
        return document

    def open_document(self, path: Path) -> FakeDocument:
        self.open_order.append(path.name)
        if path.name in self.unopenable or path.name not in self.documents:
            raise DocumentOpenError(f"cannot open {path}", str(path))
        return self.documents[path.name]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_pdf(path: Path, pages: list[str]) -> None:
    """Write a PDF to *path* with one page per string in *pages*."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page(width=595, height=842)
        if text:
            page.insert_text((50, 100), text)
    doc.save(str(path))
    doc.close()


def read_text_layer(output_dir: Path, document_name: str, page_index: int) -> str:
    path = output_dir / document_name / str(page_index) / "text_layer.txt"
    return path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Empty fake document engine."""
    return FakeEngine()


@pytest.fixture
def input_dir(tmp_path) -> Path:
    """Empty input directory."""
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Output directory (not yet created)."""
    return tmp_path / "output"


@pytest.fixture
def pdf_dir(input_dir) -> Path:
    """Input directory holding real PDFs: report.pdf (2 pages) and memo.pdf (1 page)."""
    make_pdf(input_dir / "report.pdf", ["Hello", "World"])
    make_pdf(input_dir / "memo.pdf", ["Memo text"])
    return input_dir
