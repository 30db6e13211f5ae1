"""Base classes for document engines.

A document engine turns files into handles, handles into pages, and pages
into text and images. The extraction pipeline only talks to these
interfaces:

- DocumentEngine: Opens documents from disk
- DocumentHandle: An open document shared read-only by page workers
- Page: A single loaded page, released as soon as it has been extracted
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Page(ABC):
    """Abstract base class for a loaded page."""

    @abstractmethod
    def extract_text(self) -> str:
        """Extract the text layer of the page.

        Returns:
            Page text (may be empty)

        Raises:
            ExtractionError: If the text layer cannot be read
        """
        pass

    @abstractmethod
    def extract_images(self) -> list[bytes]:
        """Extract embedded images as PNG payloads, in page order.

        Raises:
            ExtractionError: If the images cannot be read
        """
        pass

    def close(self) -> None:
        """Release resources held by the page."""


class DocumentHandle(ABC):
    """Abstract base class for an open document.

    Handles are context managers; leaving the ``with`` block closes the
    document. ``open_page`` must be safe to call concurrently for distinct
    page indices.
    """

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages in the document."""
        pass

    @abstractmethod
    def open_page(self, index: int) -> Page:
        """Load the page at *index*.

        Args:
            index: Zero-based page index

        Returns:
            The loaded page

        Raises:
            PageOpenError: If the page cannot be loaded
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the document."""
        pass

    def __enter__(self) -> "DocumentHandle":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class DocumentEngine(ABC):
    """Abstract base class for document engines."""

    @abstractmethod
    def open_document(self, path: Path) -> DocumentHandle:
        """Open the document at *path*.

        Args:
            path: Path to the document file

        Returns:
            An open DocumentHandle

        Raises:
            DocumentOpenError: If the document cannot be opened
        """
        pass
