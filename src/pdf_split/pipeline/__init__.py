"""Extraction pipeline: extractor workers, result channel, and page writer."""

from .batch import BatchDriver
from .channel import ChannelClosedError, ResultChannel
from .coordinator import DocumentPipeline
from .extractor import PageCounter, PageExtractor
from .writer import PageWriter

__all__ = [
    "BatchDriver",
    "ChannelClosedError",
    "DocumentPipeline",
    "PageCounter",
    "PageExtractor",
    "PageWriter",
    "ResultChannel",
]
