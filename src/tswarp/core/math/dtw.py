"""
DTW Kernel — Dynamic Time Warping со squared local cost

Модуль вычисляет DTW-расстояние между двумя последовательностями одинаковой длины:
- Локальная стоимость: squared difference (x - y)^2, не abs
- Unit step, без весов шагов и без окна (banding)
- Rolling buffer: две строки длины n вместо матрицы n×n

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(xs) == len(ys) >= 1, иначе LengthMismatch / InvalidInput
2. Память O(n): ровно два буфера, роли меняются на каждой внешней итерации
3. Буферы принадлежат одному вызову и никогда не переиспользуются между вызовами
4. NaN/Inf не санитизируются и пропагируют в результат

ФОРМУЛЫ:
    D[0][0] = cost(0, 0)
    D[0][j] = D[0][j-1] + cost(0, j)
    D[i][0] = D[i-1][0] + cost(i, 0)
    D[i][j] = min3(D[i-1][j-1], D[i][j-1], D[i-1][j]) + cost(i, j)
    DTW(xs, ys) = D[n-1][n-1]
"""

from typing import Sequence


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidInput(ValueError):
    """Нарушение контракта ядра DTW (ошибка программиста, не runtime-условие)."""


class LengthMismatch(InvalidInput):
    """
    Последовательности разной длины переданы в DTW kernel.

    Расстояние для разных длин в этой модели не определено,
    поэтому вычисление прерывается, а не возвращает sentinel.
    """

    def __init__(self, len_x: int, len_y: int):
        self.len_x = len_x
        self.len_y = len_y
        super().__init__(
            f"DTW requires sequences of equal length, got {len_x} and {len_y}"
        )


# =============================================================================
# LOCAL COST
# =============================================================================


def square_dist(xs: Sequence[float], xidx: int, ys: Sequence[float], yidx: int) -> float:
    """
    Squared distance между xs[xidx] и ys[yidx].

    Examples:
        >>> square_dist([0.0, 1.0], 1, [3.0], 0)
        4.0
    """
    dif = xs[xidx] - ys[yidx]
    return dif * dif


def min3(x: float, y: float, z: float) -> float:
    """
    Минимум трёх значений.

    При равенстве возвращается любое из равных значений:
    хранится только значение, путь не восстанавливается.

    Examples:
        >>> min3(1.0, 1.0, 2.0)
        1.0
        >>> min3(3.0, 2.0, 1.0)
        1.0
    """
    if x < y:
        return x if x < z else z
    return y if y < z else z


def _check_lengths(xs: Sequence[float], ys: Sequence[float]) -> int:
    if len(xs) != len(ys):
        raise LengthMismatch(len(xs), len(ys))
    if len(xs) == 0:
        raise InvalidInput("DTW requires non-empty sequences")
    return len(xs)


# =============================================================================
# DTW DISTANCE
# =============================================================================


def compute_dtw(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    DTW-расстояние с rolling buffer (O(n) память, O(n^2) время).

    Первая строка накапливается вдоль ys без минимума (граничное условие).
    Далее на каждой строке idx_line буферы меняются ролями: бывший curr
    становится prev, а бывший prev перезаписывается как новый curr.

    Args:
        xs: Первая последовательность длины n
        ys: Вторая последовательность длины n

    Returns:
        D[n-1][n-1] — накопленная squared-стоимость оптимального warping path

    Raises:
        LengthMismatch: если len(xs) != len(ys)
        InvalidInput: если последовательности пустые

    Examples:
        >>> compute_dtw([0.0, 1.0], [1.0, 0.0])
        2.0
        >>> compute_dtw([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
        0.0
    """
    n = _check_lengths(xs, ys)
    curr = [0.0] * n
    prev = [0.0] * n

    # Первая строка: D[0][j]
    curr[0] = square_dist(xs, 0, ys, 0)
    for idx_col in range(1, n):
        curr[idx_col] = curr[idx_col - 1] + square_dist(xs, 0, ys, idx_col)

    for idx_line in range(1, n):
        curr, prev = prev, curr
        curr[0] = prev[0] + square_dist(xs, idx_line, ys, 0)
        for idx_col in range(1, n):
            d11 = prev[idx_col - 1]
            d01 = curr[idx_col - 1]
            d10 = prev[idx_col]
            curr[idx_col] = min3(d11, d01, d10) + square_dist(xs, idx_line, ys, idx_col)

    return curr[n - 1]


def compute_dtw_matrix(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Reference-версия DTW с полной матрицей n×n.

    Та же рекуррентность, что и в compute_dtw, но без rolling buffer.
    Используется только для перекрёстной проверки ядра: память O(n^2).

    Raises:
        LengthMismatch: если len(xs) != len(ys)
        InvalidInput: если последовательности пустые
    """
    n = _check_lengths(xs, ys)
    m = [[0.0] * n for _ in range(n)]

    m[0][0] = square_dist(xs, 0, ys, 0)
    for x in range(1, n):
        m[0][x] = m[0][x - 1] + square_dist(xs, 0, ys, x)  # первая строка
        m[x][0] = m[x - 1][0] + square_dist(xs, x, ys, 0)  # первый столбец

    for idx_line in range(1, n):
        for idx_col in range(1, n):
            m[idx_line][idx_col] = min3(
                m[idx_line - 1][idx_col - 1],
                m[idx_line][idx_col - 1],
                m[idx_line - 1][idx_col],
            ) + square_dist(xs, idx_line, ys, idx_col)

    return m[n - 1][n - 1]
