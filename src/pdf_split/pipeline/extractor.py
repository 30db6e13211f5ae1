"""Page extractor workers.

Workers share a PageCounter and repeatedly claim the next unprocessed page
index until the document is exhausted. Claims are unique and exhaustive, so
any number of workers can run against any number of pages.
"""

import logging
import threading

from pdf_split.documents import DocumentError, DocumentHandle
from schemas.page_result import PageResult

from .channel import ResultChannel

logger = logging.getLogger(__name__)


class PageCounter:
    """Thread-safe fetch-and-increment counter for page claims.

    One counter is created per document run and shared by its workers.
    """

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"PageCounter(next={self._next})"

    def claim(self) -> int:
        """Return the next page index and advance the counter."""
        with self._lock:
            index = self._next
            self._next += 1
            return index


class PageExtractor:
    """Worker loop that claims pages and pushes their results.

    Pages that cannot be opened or extracted are skipped without surfacing
    an error; the worker simply claims the next index.

    Attributes:
        handle: Open document shared by all workers
        document_name: Name used to namespace results
        counter: Shared page counter
        channel: Channel receiving the results
        extract_images: Whether to extract embedded images
        pages_extracted: Results pushed by this worker
        pages_skipped: Claimed pages that produced no result
    """

    def __init__(
        self,
        handle: DocumentHandle,
        document_name: str,
        counter: PageCounter,
        channel: ResultChannel,
        extract_images: bool = False,
    ):
        self.handle = handle
        self.document_name = document_name
        self.counter = counter
        self.channel = channel
        self.extract_images = extract_images
        self.pages_extracted = 0
        self.pages_skipped = 0

    def run(self) -> None:
        """Process pages until the counter passes the last page."""
        page_count = self.handle.page_count

        while (index := self.counter.claim()) < page_count:
            result = self.extract(index)
            if result is None:
                self.pages_skipped += 1
                continue

            self.channel.push(result)
            self.pages_extracted += 1

    def extract(self, index: int) -> PageResult | None:
        """Extract a single page.

        Args:
            index: Zero-based page index

        Returns:
            The page result, or None if the page could not be opened or read
        """
        try:
            page = self.handle.open_page(index)
        except DocumentError as e:
            logger.debug(f"Skipping page {index} of {self.document_name}: {e.message}")
            return None

        try:
            try:
                text = page.extract_text()
            except DocumentError as e:
                logger.debug(f"Skipping page {index} of {self.document_name}: {e.message}")
                return None

            images = []
            if self.extract_images:
                try:
                    images = list(enumerate(page.extract_images()))
                except DocumentError as e:
                    logger.debug(
                        f"Dropping images of page {index} of {self.document_name}: {e.message}"
                    )
        finally:
            page.close()

        return PageResult(
            document_name=self.document_name,
            page_index=index,
            text=text,
            images=images,
        )
