from collections.abc import Iterable
from pathlib import Path

from docreport.logging.logger import Log
from docreport.reader.exceptions import (
    EmptyDocumentError,
    InvalidPathError,
    UnsupportedFileTypeError,
)
from docreport.reader.factory import ReaderFactory


class DocumentReader:
    """Validates a document path and loads its lines."""

    def __init__(self, supported_extensions: Iterable[str]) -> None:
        self._supported = {ext.lower().lstrip(".") for ext in supported_extensions}

    def read(self, path: str | Path | None) -> list[str]:
        """Validate ``path`` and return the document lines.

        Raises:
            InvalidPathError: if the path is empty, missing, or not a file.
            UnsupportedFileTypeError: if the extension is not enabled.
            EmptyDocumentError: if the document has no lines.
            FileReadError: if the file cannot be read.
        """
        resolved = self._validate_path(path)
        extension = self._validate_extension(resolved)

        lines = ReaderFactory.create(extension).read_lines(resolved)
        if not lines:
            raise EmptyDocumentError(f"No data found in {resolved}")

        Log.info(f"Read {len(lines)} lines from {resolved.name}")
        return lines

    @staticmethod
    def _validate_path(path: str | Path | None) -> Path:
        if path is None or not str(path).strip():
            raise InvalidPathError("File path cannot be empty")
        resolved = Path(str(path).strip()).expanduser()
        if not resolved.exists():
            raise InvalidPathError(f"File not found: {resolved}")
        if not resolved.is_file():
            raise InvalidPathError(f"Not a file: {resolved}")
        return resolved

    def _validate_extension(self, path: Path) -> str:
        extension = path.suffix.lower().lstrip(".")
        if not extension:
            raise UnsupportedFileTypeError(f"Failed to find extension for {path.name}")
        if extension not in self._supported:
            raise UnsupportedFileTypeError(
                f"Invalid file type '{extension}'. Choose from: {sorted(self._supported)}"
            )
        return extension
