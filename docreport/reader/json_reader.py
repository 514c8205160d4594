import json
from pathlib import Path

from docreport.reader.base import BaseDocumentReader
from docreport.reader.exceptions import FileReadError


class JsonReader(BaseDocumentReader):
    """Reads JSON files; every string value (not key) becomes one line."""

    def read_lines(self, path: Path) -> list[str]:
        try:
            data = json.loads(path.read_text(encoding="utf-8-sig"))
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(f"Could not read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise FileReadError(f"Invalid JSON in {path}: {exc}") from exc

        lines: list[str] = []
        self._collect_strings(data, lines)
        return lines

    def _collect_strings(self, node: object, lines: list[str]) -> None:
        if isinstance(node, str):
            lines.extend(node.splitlines() or [""])
        elif isinstance(node, dict):
            for value in node.values():
                self._collect_strings(value, lines)
        elif isinstance(node, list):
            for item in node:
                self._collect_strings(item, lines)
