"""
Тесты для Aggregation — сумма DTW по всем парам

Проверяемые инварианты:
1. Ровно m * (m + 1) / 2 вызовов ядра, каждая пара один раз
2. Self-pairs включены
3. Left fold в порядке iter_pair_indices
4. LengthMismatch прерывает обход
"""

import random

import pytest

from tswarp.core.math.aggregation import (
    iter_pair_indices,
    pair_count,
    sum_all_pairs,
    totals_match,
)
from tswarp.core.math.dtw import LengthMismatch, compute_dtw


# =============================================================================
# ТЕСТЫ: Перечисление пар
# =============================================================================


class TestIterPairIndices:
    """Тесты iter_pair_indices."""

    def test_order(self):
        assert list(iter_pair_indices(3)) == [
            (0, 0), (0, 1), (0, 2),
            (1, 1), (1, 2),
            (2, 2),
        ]

    def test_empty(self):
        assert list(iter_pair_indices(0)) == []

    @pytest.mark.parametrize("m", [1, 2, 5, 10])
    def test_count_and_uniqueness(self, m):
        pairs = list(iter_pair_indices(m))
        assert len(pairs) == pair_count(m)
        assert len(set(pairs)) == len(pairs)
        assert all(i <= j for i, j in pairs)

    def test_no_reverse_duplicates(self):
        pairs = set(iter_pair_indices(6))
        for i, j in pairs:
            if i != j:
                assert (j, i) not in pairs

    def test_negative_size(self):
        with pytest.raises(ValueError, match="non-negative"):
            list(iter_pair_indices(-1))


class TestPairCount:
    """Тесты pair_count."""

    @pytest.mark.parametrize("m, expected", [(0, 0), (1, 1), (2, 3), (3, 6), (50, 1275)])
    def test_values(self, m, expected):
        assert pair_count(m) == expected

    def test_negative_size(self):
        with pytest.raises(ValueError):
            pair_count(-3)


# =============================================================================
# ТЕСТЫ: sum_all_pairs
# =============================================================================


class TestSumAllPairs:
    """Тесты sum_all_pairs."""

    def test_identical_zero_series(self):
        """3 одинаковых ряда: 6 пар, каждая 0."""
        assert sum_all_pairs([[0.0, 0.0], [0.0, 0.0], [0.0, 0.0]]) == 0.0

    def test_known_total(self):
        """
        [0,1], [1,0], [0,0]:
            (0,1) = 2, (0,2) = 1, (1,2) = 1, self-pairs = 0
        """
        assert sum_all_pairs([[0.0, 1.0], [1.0, 0.0], [0.0, 0.0]]) == 4.0

    def test_empty_collection(self):
        assert sum_all_pairs([]) == 0.0

    def test_single_series(self):
        assert sum_all_pairs([[1.0, 2.0, 3.0]]) == 0.0

    @pytest.mark.parametrize("m", [0, 1, 2, 4, 7])
    def test_each_pair_evaluated_once(self, m):
        """Каждая пара (i, j), i <= j, передаётся в ядро ровно один раз."""
        calls: list[tuple[int, int]] = []

        def spy(a, b):
            calls.append((a[0], b[0]))
            return 1.0

        collection = [(float(i),) for i in range(m)]
        total = sum_all_pairs(collection, distance=spy)

        assert len(calls) == pair_count(m)
        assert sorted(calls) == [(float(i), float(j)) for i, j in iter_pair_indices(m)]
        assert total == float(pair_count(m))

    def test_left_fold_order(self):
        """Сумма совпадает бит-в-бит с явным циклом в том же порядке."""
        rng = random.Random(3)
        collection = [[rng.uniform(-1.0, 1.0) for _ in range(6)] for _ in range(5)]

        expected = 0.0
        for i in range(len(collection)):
            for j in range(i, len(collection)):
                expected += compute_dtw(collection[i], collection[j])

        assert sum_all_pairs(collection) == expected

    def test_length_mismatch_aborts(self):
        with pytest.raises(LengthMismatch):
            sum_all_pairs([[0.0, 1.0], [0.0, 1.0, 2.0]])

    def test_input_not_mutated(self):
        collection = [[0.0, 1.0], [1.0, 0.0]]
        snapshot = [list(s) for s in collection]
        sum_all_pairs(collection)
        assert collection == snapshot


class TestTotalsMatch:
    """Тесты totals_match: сравнение сумм в разном порядке."""

    def test_reversed_order_matches(self):
        rng = random.Random(11)
        collection = [[rng.uniform(-3.0, 3.0) for _ in range(5)] for _ in range(6)]

        forward = sum_all_pairs(collection)
        distances = [compute_dtw(collection[i], collection[j]) for i, j in iter_pair_indices(6)]
        backward = 0.0
        for d in reversed(distances):
            backward += d

        assert totals_match(forward, backward)

    def test_different_totals(self):
        assert not totals_match(1.0, 1.001)

    def test_near_zero(self):
        assert totals_match(0.0, 1e-13)
