from docreport.exceptions import DocReportError


class ReaderError(DocReportError):
    """Base exception for all document reader errors."""


class InvalidPathError(ReaderError):
    """Raised when the document path is empty, missing, or not a file."""


class UnsupportedFileTypeError(ReaderError):
    """Raised when the document extension is not supported."""


class EmptyDocumentError(ReaderError):
    """Raised when the document contains no lines."""


class FileReadError(ReaderError):
    """Raised when a file cannot be read from disk."""
