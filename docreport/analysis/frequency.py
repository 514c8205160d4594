from collections import Counter
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from docreport.analysis.exceptions import DuplicateGroupKeyError
from docreport.analysis.models import FrequencyAnalysis
from docreport.logging.logger import Log


class FrequencyAnalyzer:
    """Groups words by how many times they occur."""

    def __init__(self, max_workers: int | None = None) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._max_workers = max_workers

    def group(self, words: Sequence[str] | None) -> FrequencyAnalysis:
        """Build the frequency table and the per-count word groups.

        Each distinct count is scanned by its own task; tasks only return
        their group, and the groups dict is filled afterwards on the
        calling thread.

        Raises:
            DuplicateGroupKeyError: if two tasks report the same count.
        """
        if not words:
            return FrequencyAnalysis()

        table = self._build_table(words)
        values = sorted(set(table.values()), reverse=True)
        Log.debug(f"Grouping {len(table)} unique words into {len(values)} frequencies")

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            partials = list(
                executor.map(lambda value: self._collect(table, value), values)
            )

        return FrequencyAnalysis(
            table=table,
            groups=self._merge(partials),
            unique_count=len(table),
        )

    @staticmethod
    def _build_table(words: Sequence[str]) -> dict[str, int]:
        # most_common keeps first-seen order among equal counts
        return dict(Counter(words).most_common())

    @staticmethod
    def _collect(table: dict[str, int], value: int) -> tuple[int, list[str]]:
        return value, [word for word, count in table.items() if count == value]

    @staticmethod
    def _merge(partials: Iterable[tuple[int, list[str]]]) -> dict[int, list[str]]:
        groups: dict[int, list[str]] = {}
        for value, words in partials:
            if value in groups:
                raise DuplicateGroupKeyError(
                    f"Frequency group {value} was produced more than once"
                )
            groups[value] = words
        return dict(sorted(groups.items(), reverse=True))
