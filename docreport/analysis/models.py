from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class WordCount:
    """Tokens of a normalized text and how many there are."""

    count: int = 0
    words: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FrequencyAnalysis:
    """Output of the frequency analyzer.

    ``table`` maps word -> occurrences, ordered by descending count.
    ``groups`` maps occurrences -> words with exactly that count, ordered
    by descending count.
    """

    table: dict[str, int] = field(default_factory=dict)
    groups: dict[int, list[str]] = field(default_factory=dict)
    unique_count: int = 0


@dataclass(frozen=True)
class DocumentStatistics:
    """Aggregate counts shown at the top of a report."""

    total_lines: int
    total_words: int
    unique_words: int
    total_characters: int


@dataclass(frozen=True)
class Report:
    """Rendered report: summary lines followed by one block per group."""

    sections: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)
