"""Tests for the batch splitter (core/chunking.py)."""

from __future__ import annotations

import pytest

from crystallize_setup.core.chunking import chunk_array


class TestChunkArray:
    def test_uneven_split_keeps_short_tail(self) -> None:
        assert chunk_array([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_exact_multiple(self) -> None:
        assert chunk_array(["a", "b", "c", "d"], 2) == [["a", "b"], ["c", "d"]]

    def test_size_larger_than_input(self) -> None:
        assert chunk_array([1, 2], 10) == [[1, 2]]

    def test_empty_input(self) -> None:
        assert chunk_array([], 3) == []

    def test_falsy_elements_are_kept(self) -> None:
        assert chunk_array([0, None, "", 4], 3) == [[0, None, ""], [4]]

    def test_accepts_tuples(self) -> None:
        assert chunk_array((1, 2, 3), 2) == [[1, 2], [3]]

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
    def test_concatenation_reproduces_input(self, size: int) -> None:
        items = list(range(11))
        batches = chunk_array(items, size)

        assert [x for batch in batches for x in batch] == items
        assert all(len(batch) <= size for batch in batches)
        assert all(len(batch) == size for batch in batches[:-1])

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_raises(self, size: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            chunk_array([1, 2, 3], size)
