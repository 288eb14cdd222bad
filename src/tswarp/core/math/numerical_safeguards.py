"""
Numerical Safeguards — float-примитивы для DTW-расчётов

Модуль собирает общие численные константы и проверки:
- Толерантности для сравнения сумм, посчитанных в разном порядке
- Проверка конечности значений (NaN/Inf) на границе загрузки данных
- Валидация неотрицательных параметров отчёта

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ядро DTW не санитизирует входы: NaN/Inf пропагируют по IEEE 754
2. Проверки конечности применяются только на входе (loader)
3. Float сравнения всегда учитывают машинную точность
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения сумм DTW
# Сложение float не ассоциативно: итог зависит от порядка обхода пар
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения сумм около нуля
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def first_invalid_index(values: Iterable[float]) -> int | None:
    """
    Индекс первого NaN/Inf значения в последовательности.

    Args:
        values: Последовательность значений

    Returns:
        Индекс первого невалидного значения или None, если все конечны

    Examples:
        >>> first_invalid_index([1.0, 2.0])
        >>> first_invalid_index([1.0, float('nan'), float('inf')])
        1
    """
    for idx, value in enumerate(values):
        if not is_valid_float(value):
            return idx
    return None


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
