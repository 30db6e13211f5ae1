"""Parallel per-page text extraction for directories of PDF documents."""

__version__ = "0.1.0"
