"""Batch-parallel text normalization.

Processing flow:
1. Give every line except the last of the document one trailing space.
2. Split lines into contiguous batches of at most ``task_limit`` lines.
3. Sanitize each batch on a worker thread: join, drop characters outside
   ``[0-9a-zA-Z ]``, collapse whitespace.
4. Join batch results in batch order, collapse the seams, lowercase, trim.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import ClassVar

from docreport.analysis.exceptions import EmptyInputError, EmptyResultError
from docreport.logging.logger import Log


class TextNormalizer:
    """Turns raw document lines into one lowercase, alphanumeric string."""

    DEFAULT_TASK_LIMIT: ClassVar[int] = 500

    _DISALLOWED_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^0-9a-zA-Z ]+")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    def __init__(
        self,
        task_limit: int = DEFAULT_TASK_LIMIT,
        max_workers: int | None = None,
    ) -> None:
        if task_limit < 1:
            raise ValueError(f"task_limit must be at least 1, got {task_limit}")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._task_limit = task_limit
        self._max_workers = max_workers

    @property
    def task_limit(self) -> int:
        return self._task_limit

    def normalize(self, lines: Sequence[str] | None) -> str:
        """Sanitize and join ``lines`` into a single normalized string.

        Raises:
            EmptyInputError: if ``lines`` is None or empty.
            EmptyResultError: if nothing is left after sanitization.
        """
        if not lines:
            raise EmptyInputError("No lines were supplied for normalization")

        batches = self._make_batches(self._separate(lines))
        Log.debug(
            f"Normalizing {len(lines)} lines in {len(batches)} batches "
            f"of up to {self._task_limit}"
        )

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            sanitized = list(executor.map(self._sanitize_batch, batches))

        text = self._WHITESPACE_RE.sub(" ", "".join(sanitized)).lower().strip()
        if not text:
            raise EmptyResultError("Document contains no alphanumeric text")
        return text

    @staticmethod
    def _separate(lines: Sequence[str]) -> list[str]:
        last = len(lines) - 1
        return [line if i == last else f"{line} " for i, line in enumerate(lines)]

    def _make_batches(self, lines: list[str]) -> list[list[str]]:
        size = self._task_limit
        return [lines[start:start + size] for start in range(0, len(lines), size)]

    @classmethod
    def _sanitize_batch(cls, batch: list[str]) -> str:
        joined = "".join(batch)
        stripped = cls._DISALLOWED_RE.sub("", joined)
        return cls._WHITESPACE_RE.sub(" ", stripped)
