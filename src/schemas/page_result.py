"""PageResult domain object."""

from dataclasses import dataclass, field


@dataclass
class PageResult:
    """Extracted content for a single page of a document.

    A PageResult is created by a page extractor, handed to the result
    channel, and consumed exactly once by the page writer.

    Attributes:
        document_name: Source document filename without extension
        page_index: Zero-based page position within the document
        text: Extracted text layer (may be empty)
        images: Ordered (image_index, png_bytes) pairs, indexed from 0
    """

    document_name: str
    page_index: int
    text: str = ""
    images: list[tuple[int, bytes]] = field(default_factory=list)
