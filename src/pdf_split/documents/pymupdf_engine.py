"""PyMuPDF-backed document engine.

Opens PDF documents with PyMuPDF and extracts the plain text layer and
embedded images of individual pages.
"""

import logging
import threading
from pathlib import Path

import fitz  # PyMuPDF

from .document import DocumentEngine, DocumentHandle, Page
from .exceptions import DocumentOpenError, ExtractionError, PageOpenError

logger = logging.getLogger(__name__)


class PyMuPDFPage(Page):
    """A page loaded from a PyMuPDF document.

    Attributes:
        index: Zero-based page index
    """

    def __init__(self, handle: "PyMuPDFDocument", page: fitz.Page, index: int):
        self._handle = handle
        self._page = page
        self.index = index

    def extract_text(self) -> str:
        with self._handle.lock:
            try:
                return self._page.get_text()
            except Exception as e:
                raise ExtractionError(
                    f"Failed to extract text from page {self.index}: {e}", self.index
                ) from e

    def extract_images(self) -> list[bytes]:
        """Extract embedded images as PNG payloads.

        CMYK and other non-RGB pixmaps are converted to RGB before encoding,
        since PNG cannot carry them.
        """
        payloads = []
        with self._handle.lock:
            try:
                for image_info in self._page.get_images(full=True):
                    xref = image_info[0]
                    pix = fitz.Pixmap(self._handle.doc, xref)
                    if pix.n - pix.alpha >= 4:
                        pix = fitz.Pixmap(fitz.csRGB, pix)
                    payloads.append(pix.tobytes("png"))
            except Exception as e:
                raise ExtractionError(
                    f"Failed to extract images from page {self.index}: {e}", self.index
                ) from e
        return payloads

    def close(self) -> None:
        self._page = None


class PyMuPDFDocument(DocumentHandle):
    """An open PyMuPDF document.

    PyMuPDF documents must not be used from several threads at once, so
    every page operation is serialized through ``lock``.

    Attributes:
        doc: Underlying PyMuPDF document
        lock: Guards all access to ``doc`` and its pages
    """

    def __init__(self, doc: fitz.Document):
        self.doc = doc
        self.lock = threading.Lock()

    @property
    def page_count(self) -> int:
        with self.lock:
            return self.doc.page_count

    def open_page(self, index: int) -> PyMuPDFPage:
        with self.lock:
            try:
                page = self.doc.load_page(index)
            except Exception as e:
                raise PageOpenError(f"Failed to load page {index}: {e}", index) from e
        return PyMuPDFPage(self, page, index)

    def close(self) -> None:
        with self.lock:
            self.doc.close()


class PyMuPDFEngine(DocumentEngine):
    """Document engine backed by PyMuPDF."""

    def open_document(self, path: Path) -> PyMuPDFDocument:
        try:
            doc = fitz.open(str(path))
        except Exception as e:
            raise DocumentOpenError(f"Failed to open document {path}: {e}", str(path)) from e

        if doc.needs_pass:
            doc.close()
            raise DocumentOpenError(f"Document {path} is encrypted", str(path))

        logger.debug(f"Opened {path} with {doc.page_count} pages")
        return PyMuPDFDocument(doc)
