from docreport.exceptions import DocReportError


class AnalysisError(DocReportError):
    """Base exception for text analysis failures."""


class EmptyInputError(AnalysisError):
    """Raised when normalization receives no lines."""


class EmptyResultError(AnalysisError):
    """Raised when sanitization leaves no text to analyze."""


class DuplicateGroupKeyError(AnalysisError):
    """Raised when two partial results target the same frequency value."""
