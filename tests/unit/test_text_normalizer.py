import re

import pytest

from docreport.analysis.exceptions import EmptyInputError, EmptyResultError
from docreport.analysis.normalizer import TextNormalizer


class TestNormalizeSuccess:
    def test_joins_lines_and_strips_punctuation(self) -> None:
        normalizer = TextNormalizer()
        result = normalizer.normalize(["Hello, world!", "hello World"])
        assert result == "hello world hello world"

    def test_single_line(self) -> None:
        normalizer = TextNormalizer()
        assert normalizer.normalize(["a a a b"]) == "a a a b"

    def test_collapses_whitespace_and_trims(self) -> None:
        normalizer = TextNormalizer()
        result = normalizer.normalize(["   spaced    out   ", "   words  "])
        assert result == "spaced out words"

    def test_lines_without_spaces_stay_separate_words(self) -> None:
        normalizer = TextNormalizer()
        assert normalizer.normalize(["one", "two", "three"]) == "one two three"

    def test_drops_non_ascii_characters(self) -> None:
        normalizer = TextNormalizer()
        assert normalizer.normalize(["Café naïve"]) == "caf nave"

    def test_tabs_are_stripped_not_split(self) -> None:
        normalizer = TextNormalizer()
        assert normalizer.normalize(["baz\tqux"]) == "bazqux"

    def test_keeps_digits(self) -> None:
        normalizer = TextNormalizer()
        assert normalizer.normalize(["Route 66, exit 9"]) == "route 66 exit 9"

    def test_does_not_mutate_input(self) -> None:
        normalizer = TextNormalizer()
        lines = ["First line", "Second line"]
        normalizer.normalize(lines)
        assert lines == ["First line", "Second line"]


class TestNormalizeInvariants:
    def test_output_only_lowercase_alphanumerics_and_single_spaces(
        self, sample_lines: list[str]
    ) -> None:
        for task_limit in (1, 2, 3, 500):
            result = TextNormalizer(task_limit=task_limit).normalize(sample_lines)
            assert re.fullmatch(r"[a-z0-9 ]+", result)
            assert "  " not in result
            assert result == result.strip()

    def test_batch_size_does_not_change_output(self, sample_lines: list[str]) -> None:
        small = TextNormalizer(task_limit=1).normalize(sample_lines)
        large = TextNormalizer(task_limit=10000).normalize(sample_lines)
        assert small == large
        assert small == (
            "the quick brown fox jumps overthe lazy dog the end 42 and after the end"
        )

    def test_batch_edges_do_not_double_spaces(self) -> None:
        lines = ["alpha ", "! beta", "gamma ", "  delta"]
        result = TextNormalizer(task_limit=1).normalize(lines)
        assert result == "alpha beta gamma delta"

    def test_many_batches_keep_original_order(self) -> None:
        lines = [f"w{i}" for i in range(1000)]
        result = TextNormalizer(task_limit=7, max_workers=4).normalize(lines)
        assert result == " ".join(lines)


class TestNormalizeErrors:
    def test_empty_list_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            TextNormalizer().normalize([])

    def test_none_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            TextNormalizer().normalize(None)

    def test_only_punctuation_raises(self) -> None:
        with pytest.raises(EmptyResultError, match="no alphanumeric"):
            TextNormalizer().normalize(["!!!", "???"])

    def test_blank_line_raises(self) -> None:
        with pytest.raises(EmptyResultError):
            TextNormalizer().normalize([""])

    def test_task_limit_below_one_rejected(self) -> None:
        with pytest.raises(ValueError, match="task_limit"):
            TextNormalizer(task_limit=0)

    def test_max_workers_below_one_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_workers"):
            TextNormalizer(max_workers=0)

    def test_default_task_limit(self) -> None:
        assert TextNormalizer().task_limit == 500
