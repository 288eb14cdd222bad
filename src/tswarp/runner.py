"""Runner — прогон all-pairs DTW над CSV файлом.

Порядок:
1. Загрузка коллекции рядов (io.csv_loader)
2. Замер времени sum_all_pairs
3. Формирование RunResult и, по запросу, JSON отчёта (контракт run_report)
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Final, TypeVar

from tswarp.core.contracts import validate_run_report
from tswarp.core.math.aggregation import pair_count, sum_all_pairs
from tswarp.core.math.numerical_safeguards import validate_non_negative
from tswarp.io.csv_loader import load_collection

logger = logging.getLogger(__name__)

T = TypeVar("T")

REPORT_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RunConfig:
    """Конфигурация прогона."""

    input_path: Path
    has_header: bool = True  # первая строка CSV — заголовок


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RunResult:
    """Результат прогона all-pairs DTW."""

    total: float  # сумма DTW по всем парам i <= j
    pair_count: int
    series_count: int
    series_length: int
    elapsed_ms: int  # время sum_all_pairs, без загрузки
    input_path: str

    def to_report(self) -> Dict[str, Any]:
        """JSON-совместимый отчёт (без валидации)."""
        return {
            "schema_version": REPORT_SCHEMA_VERSION,
            "input_path": self.input_path,
            "series_count": self.series_count,
            "series_length": self.series_length,
            "pair_count": self.pair_count,
            "total_distance": self.total,
            "elapsed_ms": self.elapsed_ms,
        }


# =============================================================================
# TIMING
# =============================================================================


def measure_time_millis(fn: Callable[[], T]) -> tuple[T, int]:
    """
    Выполнить fn и замерить wall-clock время в миллисекундах.

    Returns:
        (результат fn, elapsed_ms)
    """
    start = time.perf_counter()
    result = fn()
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    return result, elapsed_ms


# =============================================================================
# RUN
# =============================================================================


def run_dtw_sum(config: RunConfig) -> RunResult:
    """
    Загрузить ряды и посчитать сумму DTW по всем парам.

    Args:
        config: конфигурация прогона

    Returns:
        RunResult

    Raises:
        TimeSeriesLoadError: если входной файл невалиден
    """
    collection = load_collection(config.input_path, has_header=config.has_header)
    sequences = collection.as_sequences()
    pairs = pair_count(collection.size)

    logger.info(f"Computing DTW over {pairs} pairs")
    total, elapsed_ms = measure_time_millis(lambda: sum_all_pairs(sequences))
    logger.info(f"Done in {elapsed_ms} ms, total={total}")

    return RunResult(
        total=total,
        pair_count=pairs,
        series_count=collection.size,
        series_length=collection.series_length,
        elapsed_ms=elapsed_ms,
        input_path=str(config.input_path),
    )


def build_report(result: RunResult) -> Dict[str, Any]:
    """
    JSON отчёт, проверенный по контракту run_report.

    Raises:
        ValueError: если total некорректен (NaN/Inf или < 0)
        ValidationError: если отчёт не соответствует схеме
    """
    validate_non_negative(result.total, "total")
    report = result.to_report()
    validate_run_report(report)
    return report
