"""Batch driver for extracting every document in a directory.

Documents are processed strictly one after another, so the number of live
threads is bounded by the pipeline's worker count however many documents
the input directory holds.
"""

import logging
from pathlib import Path

from schemas.report import BatchReport

from .coordinator import DocumentPipeline

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".pdf"


class BatchDriver:
    """Enumerate documents in an input directory and extract each one.

    Attributes:
        pipeline: Per-document pipeline used for every document
        extension: File extension of candidate documents (e.g. ".pdf")
    """

    def __init__(self, pipeline: DocumentPipeline, extension: str = DEFAULT_EXTENSION):
        self.pipeline = pipeline
        if not extension.startswith("."):
            extension = f".{extension}"
        self.extension = extension.lower()

    def discover(self, input_dir: Path) -> list[Path]:
        """List candidate documents directly inside *input_dir*.

        Only regular files whose suffix matches the configured extension
        (case-insensitively) are returned; subdirectories are not searched.

        Args:
            input_dir: Directory to scan

        Returns:
            Matching document paths, sorted by name
        """
        return sorted(
            p for p in input_dir.iterdir()
            if p.is_file() and p.suffix.lower() == self.extension
        )

    def run(self, input_dir: Path) -> BatchReport:
        """Extract every candidate document in *input_dir*.

        Args:
            input_dir: Directory containing the documents

        Returns:
            BatchReport with one DocumentReport per document
        """
        documents = self.discover(input_dir)
        logger.info(f"Found {len(documents)} {self.extension} documents in {input_dir}")

        report = BatchReport(
            input_dir=str(input_dir),
            output_dir=str(self.pipeline.output_root),
        )
        for path in documents:
            report.documents.append(self.pipeline.process(path))

        return report
