from docreport.exceptions import DocReportError


class ReportWriteError(DocReportError):
    """Raised when a report file cannot be written."""
