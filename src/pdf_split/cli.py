"""Command-line interface for pdf-split."""

import argparse
import logging
import sys
from pathlib import Path

from pdf_split.pipeline import BatchDriver, DocumentPipeline
from pdf_split.pipeline.batch import DEFAULT_EXTENSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def positive_int(value: str) -> int:
    """argparse type for the worker thread count."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid thread count: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"thread count must be at least 1, got {number}")
    return number


def extract(args: argparse.Namespace) -> int:
    """Execute a batch extraction.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    input_dir = args.input_dir.resolve()
    if not input_dir.exists() or not input_dir.is_dir():
        logger.error(f"Input directory does not exist or is not a directory: {input_dir}")
        return 1

    output_dir = args.output_dir

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        pipeline = DocumentPipeline(
            output_root=output_dir,
            workers=args.threads,
            extract_images=args.extract_images,
        )
        report = BatchDriver(pipeline, extension=args.extension).run(input_dir)
    except Exception as e:
        logger.error(f"Batch extraction failed: {e}")
        return 1

    logger.info(f"Extraction complete for {input_dir}")
    logger.info(f"  Documents: {len(report.documents)}")
    logger.info(f"  Pages written: {report.pages_written}")
    logger.info(f"  Output: {output_dir}")

    if report.failed:
        logger.warning(f"  Failed documents: {report.failed}")
        for document in report.documents:
            if document.error:
                logger.warning(f"    - {document.source_path}: {document.error}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="pdf-split",
        description="Extract the text layer of every page of every PDF in a directory",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--extract-images",
        action="store_true",
        help="Also write embedded page images as image_<n>.png",
    )
    parser.add_argument(
        "--extension",
        type=str,
        default=DEFAULT_EXTENSION,
        help=f"Extension of documents to process (default: {DEFAULT_EXTENSION})",
    )
    parser.add_argument(
        "input_dir",
        type=Path,
        help="Directory containing the documents to extract",
    )
    parser.add_argument(
        "output_dir",
        type=Path,
        help="Directory where <document>/<page>/text_layer.txt files are written",
    )
    parser.add_argument(
        "threads",
        type=positive_int,
        help="Number of page extractor threads per document",
    )

    # argparse exits with status 2 on usage errors; report them as 1
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return 0 if e.code in (0, None) else 1

    return extract(args)


if __name__ == "__main__":
    sys.exit(main())
