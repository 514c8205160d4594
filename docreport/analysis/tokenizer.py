import re
from collections.abc import Sequence

from docreport.analysis.models import WordCount
from docreport.logging.logger import Log

_SEPARATOR_RE = re.compile(r"[ \t\n\r]+")


def word_count(text: str | None) -> WordCount:
    """Split ``text`` into words on space, tab, newline and carriage return.

    Empty input is not an error: the result is ``WordCount(0, [])`` and
    callers must check for zero themselves.
    """
    trimmed = text.strip() if text else ""
    if not trimmed:
        Log.warning("Word count requested for empty text")
        return WordCount()

    words = _SEPARATOR_RE.split(trimmed)
    return WordCount(count=len(words), words=words)


def character_count(value: str | Sequence[str] | None) -> int:
    """Count characters in a string, or the summed line lengths of a document.

    Line terminators are never part of a line, so they are not counted.
    """
    if not value:
        Log.warning("Character count requested for empty input")
        return 0
    if isinstance(value, str):
        return len(value)
    return sum(len(line) for line in value)
