from collections.abc import Callable
from pathlib import Path

from docreport.analysis.models import Report
from docreport.logging.logger import Log
from docreport.output.exceptions import ReportWriteError


def report_file_path(source: Path, subdirectory: str, prefix: str) -> Path:
    """Build path to report file: {source dir}/{subdirectory}/{prefix}{source name}"""
    return source.parent / subdirectory / f"{prefix}{source.name}"


class ReportWriter:
    """Writes a report next to its source document and mirrors it to the console."""

    def __init__(
        self,
        subdirectory: str = "Edited",
        prefix: str = "New-",
        echo: Callable[[str], None] | None = print,
    ) -> None:
        self._subdirectory = subdirectory
        self._prefix = prefix
        self._echo = echo

    def write(self, source: Path, report: Report) -> Path:
        """Write every report section on its own line and return the file path.

        Raises:
            ReportWriteError: if the directory or file cannot be created.
        """
        path = report_file_path(source, self._subdirectory, self._prefix)
        Log.info(f"Saving report to {path}", source_path=str(source))

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                for section in report:
                    if self._echo is not None:
                        self._echo(section)
                    handle.write(f"{section}\n")
        except OSError as exc:
            raise ReportWriteError(f"Could not write {path}: {exc}") from exc

        Log.info(f"Report saved to {path.parent}", source_path=str(source))
        return path
