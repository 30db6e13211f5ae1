"""Page writer: the single consumer of a document's result channel.

All filesystem side effects for one document happen on the writer thread,
so no two threads ever create the same directory or write the same file.

Output layout:
    <output_root>/
    └── {document_name}/
        ├── 0/
        │   ├── text_layer.txt
        │   ├── image_0.png
        │   └── ...
        ├── 1/
        └── ...
"""

import logging
from pathlib import Path

from schemas.page_result import PageResult
from schemas.report import WriteFailure

from .channel import ResultChannel

logger = logging.getLogger(__name__)

TEXT_LAYER_FILENAME = "text_layer.txt"
TEXT_ENCODING = "utf-8"


def page_dir(output_root: Path, document_name: str, page_index: int) -> Path:
    """Return the output directory for a single page."""
    return output_root / document_name / str(page_index)


def image_filename(image_index: int) -> str:
    return f"image_{image_index}.png"


class PageWriter:
    """Drain a ResultChannel and materialize each result to disk.

    A result that cannot be written is logged and recorded in ``failures``;
    the writer moves on so the channel is always drained.

    Attributes:
        channel: Channel to consume
        output_root: Root output directory
        pages_written: Number of results fully written
        images_written: Number of image files written
        failures: Results that could not be written
    """

    def __init__(self, channel: ResultChannel, output_root: Path):
        self.channel = channel
        self.output_root = output_root
        self.pages_written = 0
        self.images_written = 0
        self.failures: list[WriteFailure] = []

    def __repr__(self) -> str:
        return f"PageWriter('{self.output_root}')"

    def run(self) -> None:
        """Consume results until the channel reports end of input."""
        while (result := self.channel.pop()) is not None:
            try:
                self.write(result)
            except (OSError, UnicodeError) as e:
                target = page_dir(self.output_root, result.document_name, result.page_index)
                logger.error(
                    f"Failed to write page {result.page_index} of "
                    f"{result.document_name} to {target}: {e}"
                )
                self.failures.append(
                    WriteFailure(page_index=result.page_index, path=str(target), error=str(e))
                )

        logger.debug(f"Writer for {self.output_root} drained, {self.pages_written} pages written")

    def write(self, result: PageResult) -> Path:
        """Write a single result to its page directory.

        Args:
            result: The page result to materialize

        Returns:
            The page directory that was written
        """
        target = page_dir(self.output_root, result.document_name, result.page_index)
        target.mkdir(parents=True, exist_ok=True)

        (target / TEXT_LAYER_FILENAME).write_text(
            result.text, encoding=TEXT_ENCODING, newline=""
        )

        for image_index, payload in result.images:
            (target / image_filename(image_index)).write_bytes(payload)
            self.images_written += 1

        self.pages_written += 1
        logger.debug(f"Wrote page {result.page_index} of {result.document_name}")
        return target
