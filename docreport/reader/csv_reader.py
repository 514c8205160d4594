import csv
from pathlib import Path

from docreport.reader.base import BaseDocumentReader
from docreport.reader.exceptions import FileReadError


class CsvReader(BaseDocumentReader):
    """Reads CSV files; each row becomes one line of space-joined cells."""

    def read_lines(self, path: Path) -> list[str]:
        try:
            with path.open(encoding="utf-8-sig", newline="") as handle:
                return [" ".join(row) for row in csv.reader(handle)]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise FileReadError(f"Could not read {path}: {exc}") from exc
