from typing import ClassVar

from docreport.analysis.models import DocumentStatistics, Report


class ReportBuilder:
    """Renders document statistics and frequency groups as report sections."""

    THRESHOLD: ClassVar[float] = 0.001

    def build(
        self,
        statistics: DocumentStatistics,
        groups: dict[int, list[str]],
    ) -> Report:
        """Build the summary block followed by one block per frequency group.

        Groups are emitted in descending frequency order whatever order
        ``groups`` iterates in.
        """
        sections = [
            f"Total Lines: ({statistics.total_lines:,})",
            f"Total Words: ({statistics.total_words:,})",
            f"Total Unique Words: ({statistics.unique_words:,})",
            f"Total Character Count: ({statistics.total_characters:,})",
        ]
        ordered = sorted(groups.items(), key=lambda item: item[0], reverse=True)
        for index, (frequency, words) in enumerate(ordered, start=1):
            sections.append(self._group_section(index, frequency, words, statistics))
        return Report(sections=tuple(sections))

    def _group_section(
        self,
        index: int,
        frequency: int,
        words: list[str],
        statistics: DocumentStatistics,
    ) -> str:
        listed = len(words)
        per_word = self.format_percentage(listed, statistics.total_words)
        per_unique = self.format_percentage(listed, statistics.unique_words)
        header = (
            f"Total entries: ({self.format_frequency(frequency)}) "
            f"Percentage Per Word: ({per_word}) "
            f"Unique Word Count: ({listed:,}) "
            f"Total Unique Word Percentage: ({per_unique})"
        )
        word_list = " ".join(f"({word})" for word in words)
        return f"\nGroup: {index}\n {header}\n{word_list}"

    @staticmethod
    def format_frequency(frequency: int) -> str:
        return "Once" if frequency == 1 else f"{frequency:,}"

    @classmethod
    def format_percentage(cls, part: int, total: int) -> str:
        """Format ``100 * part / total`` with three decimals.

        Values below 0.001 (including a zero total) render as ``<0.001%``.
        """
        value = 100 * part / total if total else 0.0
        if value < cls.THRESHOLD:
            return f"<{cls.THRESHOLD}%"
        return f"{value:.3f}%"
