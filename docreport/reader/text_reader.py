from pathlib import Path

from docreport.reader.base import BaseDocumentReader
from docreport.reader.exceptions import FileReadError


class PlainTextReader(BaseDocumentReader):
    """Reads plain text files line by line.

    Only ``\\n``, ``\\r`` and ``\\r\\n`` end a line; a leading UTF-8 BOM is dropped.
    """

    def read_lines(self, path: Path) -> list[str]:
        try:
            with path.open(encoding="utf-8-sig") as handle:
                return [line.rstrip("\n") for line in handle]
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(f"Could not read {path}: {exc}") from exc
