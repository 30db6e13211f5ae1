"""Extraction report schemas.

Reports summarize what a batch run produced. They are returned to the
caller and logged; nothing is written to the output tree.
"""

from typing import Literal

from pydantic import BaseModel


class WriteFailure(BaseModel):
    """A page result that could not be written to disk.

    Attributes:
        page_index: Zero-based index of the page that failed
        path: Directory or file the writer was materializing
        error: Error message reported by the filesystem
    """

    page_index: int
    path: str
    error: str


class DocumentReport(BaseModel):
    """Outcome of extracting a single document.

    Attributes:
        document_name: Source filename without extension
        source_path: Path of the input document
        status: "completed" when the pipeline ran, "failed" if the document
            could not be opened
        page_count: Number of pages reported by the document engine
        pages_written: Pages materialized to disk
        pages_skipped: Pages that could not be opened or extracted
        images_written: Image files materialized to disk
        write_failures: Results the writer could not persist
        error: Reason the document failed to open
    """

    document_name: str
    source_path: str
    status: Literal["completed", "failed"] = "completed"
    page_count: int = 0
    pages_written: int = 0
    pages_skipped: int = 0
    images_written: int = 0
    write_failures: list[WriteFailure] = []
    error: str | None = None


class BatchReport(BaseModel):
    """Outcome of a batch run over an input directory."""

    input_dir: str
    output_dir: str
    documents: list[DocumentReport] = []

    @property
    def succeeded(self) -> int:
        return sum(1 for d in self.documents if d.status == "completed")

    @property
    def failed(self) -> int:
        return sum(1 for d in self.documents if d.status == "failed")

    @property
    def pages_written(self) -> int:
        return sum(d.pages_written for d in self.documents)
