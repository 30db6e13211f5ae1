"""Document pipeline coordinator.

Runs one document through the extraction pipeline: a pool of page
extractor threads feeding a single page writer thread through a fresh
result channel.
"""

import logging
import threading
from pathlib import Path

from pdf_split.documents import DocumentEngine, DocumentOpenError, PyMuPDFEngine
from schemas.report import DocumentReport

from .channel import ResultChannel
from .extractor import PageCounter, PageExtractor
from .writer import PageWriter

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


class DocumentPipeline:
    """Per-document orchestration of worker and writer lifecycles.

    The DocumentPipeline:
    1. Opens the document (returns a failed report if it cannot)
    2. Creates a fresh ResultChannel and PageCounter
    3. Starts the extractor threads and one writer thread
    4. Joins every extractor, then marks the channel finished
    5. Joins the writer once it has drained the channel
    6. Closes the document

    The channel is only marked finished after every producer has exited,
    and the document is only reported done after the writer has drained
    every result pushed before that point.

    Attributes:
        output_root: Root directory for extracted pages
        workers: Number of extractor threads per document
        engine: Document engine used to open files
        extract_images: Whether embedded images are written alongside text
    """

    def __init__(
        self,
        output_root: Path,
        workers: int = DEFAULT_WORKERS,
        engine: DocumentEngine | None = None,
        extract_images: bool = False,
    ):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.output_root = output_root
        self.workers = workers
        self.engine = engine or PyMuPDFEngine()
        self.extract_images = extract_images

    def __repr__(self) -> str:
        return f"DocumentPipeline('{self.output_root}', workers={self.workers})"

    def process(self, path: Path) -> DocumentReport:
        """Extract every page of a document to the output root.

        Args:
            path: Path to the document file

        Returns:
            DocumentReport describing what was written
        """
        document_name = path.stem

        try:
            handle = self.engine.open_document(path)
        except DocumentOpenError as e:
            logger.error(f"Failed to open document: {path}: {e.message}")
            return DocumentReport(
                document_name=document_name,
                source_path=str(path),
                status="failed",
                error=e.message,
            )

        with handle:
            page_count = handle.page_count
            logger.info(
                f"Extracting {document_name} ({page_count} pages, {self.workers} workers)"
            )

            channel = ResultChannel()
            counter = PageCounter()
            extractors = [
                PageExtractor(handle, document_name, counter, channel, self.extract_images)
                for _ in range(self.workers)
            ]
            writer = PageWriter(channel, self.output_root)

            threads = [
                threading.Thread(
                    target=extractor.run, name=f"{document_name}-extractor-{i}"
                )
                for i, extractor in enumerate(extractors)
            ]
            writer_thread = threading.Thread(target=writer.run, name=f"{document_name}-writer")

            for thread in threads:
                thread.start()
            writer_thread.start()

            for thread in threads:
                thread.join()

            channel.mark_finished()
            writer_thread.join()

        report = DocumentReport(
            document_name=document_name,
            source_path=str(path),
            page_count=page_count,
            pages_written=writer.pages_written,
            pages_skipped=sum(e.pages_skipped for e in extractors),
            images_written=writer.images_written,
            write_failures=writer.failures,
        )

        logger.info(
            f"Finished {document_name}: {report.pages_written}/{page_count} pages written"
        )
        if report.write_failures:
            logger.warning(
                f"  {len(report.write_failures)} pages of {document_name} could not be written"
            )
        return report
