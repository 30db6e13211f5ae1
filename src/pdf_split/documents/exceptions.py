"""Custom exceptions for document engines."""


class DocumentError(Exception):
    """Base exception for all document engine errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DocumentOpenError(DocumentError):
    """Raised when a document cannot be opened."""

    def __init__(self, message: str, path: str, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class PageOpenError(DocumentError):
    """Raised when a page cannot be loaded from an open document."""

    def __init__(self, message: str, page_index: int, *args, **kwargs):
        self.page_index = page_index
        super().__init__(message, *args, **kwargs)


class ExtractionError(DocumentError):
    """Raised when text or images cannot be extracted from a loaded page."""

    def __init__(self, message: str, page_index: int, *args, **kwargs):
        self.page_index = page_index
        super().__init__(message, *args, **kwargs)
