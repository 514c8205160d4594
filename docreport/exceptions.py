class DocReportError(Exception):
    """Base exception for every failure a document run can report."""
