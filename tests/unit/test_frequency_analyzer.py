import pytest

from docreport.analysis.exceptions import DuplicateGroupKeyError
from docreport.analysis.frequency import FrequencyAnalyzer
from docreport.analysis.models import FrequencyAnalysis


class TestGroup:
    def test_groups_by_count(self) -> None:
        result = FrequencyAnalyzer().group(["a", "a", "a", "b"])
        assert result.table == {"a": 3, "b": 1}
        assert result.groups == {3: ["a"], 1: ["b"]}
        assert result.unique_count == 2

    def test_ties_share_a_group(self) -> None:
        result = FrequencyAnalyzer().group(["hello", "world", "hello", "world"])
        assert list(result.groups) == [2]
        assert set(result.groups[2]) == {"hello", "world"}

    def test_groups_in_descending_order(self) -> None:
        words = ["c"] + ["a"] * 5 + ["b"] * 2 + ["d"] * 5
        result = FrequencyAnalyzer(max_workers=3).group(words)
        keys = list(result.groups)
        assert keys == sorted(keys, reverse=True)
        assert keys == [5, 2, 1]

    def test_table_ordered_by_descending_count(self) -> None:
        result = FrequencyAnalyzer().group(["x", "y", "y", "z", "z", "z"])
        assert list(result.table) == ["z", "y", "x"]

    def test_unique_count_is_distinct_words(self) -> None:
        result = FrequencyAnalyzer().group(["a", "a", "b"])
        assert result.unique_count == 2

    def test_every_word_in_exactly_one_group(self) -> None:
        words = "the cat and the hat and the bat sat".split()
        result = FrequencyAnalyzer().group(words)
        placed = [word for group in result.groups.values() for word in group]
        assert len(placed) == len(set(placed)) == result.unique_count
        assert set(placed) == set(words)
        for count, group in result.groups.items():
            assert all(result.table[word] == count for word in group)

    def test_empty_words_is_empty_result(self) -> None:
        assert FrequencyAnalyzer().group([]) == FrequencyAnalysis()

    def test_none_words_is_empty_result(self) -> None:
        result = FrequencyAnalyzer().group(None)
        assert result.unique_count == 0
        assert result.groups == {}

    def test_separate_runs_do_not_share_state(self) -> None:
        analyzer = FrequencyAnalyzer()
        first = analyzer.group(["a", "a"])
        second = analyzer.group(["b"])
        assert first.groups == {2: ["a"]}
        assert second.groups == {1: ["b"]}


class TestConstruction:
    def test_max_workers_below_one_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_workers"):
            FrequencyAnalyzer(max_workers=0)


class TestMerge:
    def test_duplicate_frequency_raises(self) -> None:
        with pytest.raises(DuplicateGroupKeyError, match="2"):
            FrequencyAnalyzer._merge([(2, ["a"]), (2, ["b"])])

    def test_orders_partials_descending(self) -> None:
        groups = FrequencyAnalyzer._merge([(1, ["x"]), (4, ["y"]), (2, ["z"])])
        assert list(groups) == [4, 2, 1]
