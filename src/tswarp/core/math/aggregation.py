"""
Aggregation — сумма DTW-расстояний по всем неупорядоченным парам

Модуль обходит все пары (i, j), 0 <= i <= j < m, включая self-pairs,
и сворачивает расстояния в одну сумму.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая пара вычисляется ровно один раз: m * (m + 1) / 2 вызовов ядра
2. Порядок суммирования фиксирован: left fold в порядке iter_pair_indices
3. Промежуточные суммы наружу не отдаются
4. Сравнение сумм, полученных в другом порядке, только через totals_match
"""

from functools import reduce
from typing import Callable, Iterator, Sequence

from tswarp.core.math.dtw import compute_dtw
from tswarp.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

DistanceFn = Callable[[Sequence[float], Sequence[float]], float]


# =============================================================================
# PAIR ENUMERATION
# =============================================================================


def iter_pair_indices(m: int) -> Iterator[tuple[int, int]]:
    """
    Пары индексов (i, j) с i <= j в row-major порядке.

    Examples:
        >>> list(iter_pair_indices(3))
        [(0, 0), (0, 1), (0, 2), (1, 1), (1, 2), (2, 2)]
        >>> list(iter_pair_indices(0))
        []
    """
    if m < 0:
        raise ValueError(f"collection size must be non-negative, got {m}")

    for i in range(m):
        for j in range(i, m):
            yield (i, j)


def pair_count(m: int) -> int:
    """
    Количество пар с self-pairs: m * (m + 1) / 2.

    Examples:
        >>> pair_count(3)
        6
    """
    if m < 0:
        raise ValueError(f"collection size must be non-negative, got {m}")
    return m * (m + 1) // 2


# =============================================================================
# SUM ALL PAIRS
# =============================================================================


def sum_all_pairs(
    collection: Sequence[Sequence[float]],
    distance: DistanceFn = compute_dtw,
) -> float:
    """
    Сумма distance(collection[i], collection[j]) по всем парам i <= j.

    Args:
        collection: Упорядоченный набор последовательностей одной длины
        distance: Функция расстояния (default: compute_dtw)

    Returns:
        Итоговая сумма; 0.0 для пустого набора

    Raises:
        LengthMismatch: если какая-то пара имеет разную длину (прерывает обход)

    Examples:
        >>> sum_all_pairs([[0.0, 0.0], [0.0, 0.0], [0.0, 0.0]])
        0.0
        >>> sum_all_pairs([[0.0, 1.0], [1.0, 0.0]])
        2.0
    """
    return reduce(
        lambda total, pair: total + distance(collection[pair[0]], collection[pair[1]]),
        iter_pair_indices(len(collection)),
        0.0,
    )


def totals_match(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение двух сумм, посчитанных в разном порядке обхода пар.

    Сложение float не ассоциативно, поэтому точное равенство
    гарантировано только для одинакового порядка суммирования.
    """
    return is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
