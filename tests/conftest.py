from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def write_document(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes text to ``tmp_path/name`` and returns the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_lines() -> list[str]:
    """Lines with punctuation, blank lines, tabs and mixed case."""
    return [
        "  The quick, brown fox!  ",
        "",
        "--jumps over\tthe lazy dog.",
        "...",
        "THE END (42)",
        " and after the end ",
    ]
