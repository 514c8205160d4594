from abc import ABC, abstractmethod
from pathlib import Path


class BaseDocumentReader(ABC):
    """Contract for all document format readers."""

    @abstractmethod
    def read_lines(self, path: Path) -> list[str]:
        """Read a document as an ordered list of text lines.

        Args:
            path: Existing file with an extension this reader handles.

        Returns:
            Lines without line terminators, in document order.

        Raises:
            FileReadError: if the file cannot be read or decoded.
        """
