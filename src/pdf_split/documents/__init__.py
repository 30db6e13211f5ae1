"""Document engines for opening documents and extracting page content."""

from .document import DocumentEngine, DocumentHandle, Page
from .exceptions import DocumentError, DocumentOpenError, ExtractionError, PageOpenError
from .pymupdf_engine import PyMuPDFDocument, PyMuPDFEngine, PyMuPDFPage

__all__ = [
    "DocumentEngine",
    "DocumentHandle",
    "Page",
    "DocumentError",
    "DocumentOpenError",
    "PageOpenError",
    "ExtractionError",
    "PyMuPDFEngine",
    "PyMuPDFDocument",
    "PyMuPDFPage",
]
