"""Schema definitions for pdf-split."""

from .page_result import PageResult
from .report import BatchReport, DocumentReport, WriteFailure

__all__ = [
    "BatchReport",
    "DocumentReport",
    "PageResult",
    "WriteFailure",
]
