"""
CSV Loader — загрузка временных рядов из CSV

Формат файла:
- Первая строка — заголовок (пропускается, если has_header=True)
- Колонка 0 — метка класса
- Остальные колонки — значения ряда (float)

Файл читается через polars.read_csv, все колонки как строки (infer_schema=False);
разбор чисел и проверки выполняются здесь, чтобы ошибки несли номер строки.
Все ряды должны иметь одинаковую длину n >= 1 и конечные значения.
"""

import logging
from pathlib import Path
from typing import Iterable, Sequence

import polars as pl
from pydantic import ValidationError

from tswarp.core.domain.time_series import TimeSeries, TimeSeriesCollection

logger = logging.getLogger(__name__)


class TimeSeriesLoadError(Exception):
    """Ошибка чтения или разбора входного CSV."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def _normalize_cells(row: Sequence[str | None]) -> list[str]:
    # polars дополняет короткие строки null-ами справа
    cells = list(row)
    while cells and cells[-1] is None:
        cells.pop()
    return ["" if cell is None else cell for cell in cells]


def _parse_row(row: list[str], line_number: int) -> TimeSeries:
    label, *raw_values = row
    if not raw_values:
        raise TimeSeriesLoadError("row has a label but no values", line_number)

    values = []
    for col, raw in enumerate(raw_values, start=1):
        try:
            values.append(float(raw))
        except ValueError:
            raise TimeSeriesLoadError(
                f"column {col} is not a number: {raw!r}", line_number
            ) from None

    try:
        return TimeSeries(label=label.strip(), values=tuple(values))
    except ValidationError as e:
        raise TimeSeriesLoadError(str(e.errors()[0]["msg"]), line_number) from e


def parse_rows(
    rows: Iterable[Sequence[str | None]],
    has_header: bool = True,
    first_line: int = 1,
) -> TimeSeriesCollection:
    """
    Разбор строк CSV (уже разделённых на колонки) в коллекцию рядов.

    Args:
        rows: Строки CSV как последовательности ячеек (None — пустая ячейка)
        has_header: Пропустить первую строку (default: True)
        first_line: Номер строки файла, соответствующий rows[0]

    Returns:
        TimeSeriesCollection в порядке строк файла

    Raises:
        TimeSeriesLoadError: при нечисловых/неконечных значениях,
            пустых рядах или рядах разной длины
    """
    series: list[TimeSeries] = []
    line_numbers: list[int] = []

    for line_number, raw_row in enumerate(rows, start=first_line):
        if has_header and line_number == first_line:
            continue
        row = _normalize_cells(raw_row)
        if not row or all(not cell.strip() for cell in row):
            continue
        series.append(_parse_row(row, line_number))
        line_numbers.append(line_number)

    if series:
        expected = len(series[0])
        for ts, line_number in zip(series, line_numbers):
            if len(ts) != expected:
                raise TimeSeriesLoadError(
                    f"series has {len(ts)} values, expected {expected}", line_number
                )

    return TimeSeriesCollection(series=tuple(series))


def read_frame(path: Path, has_header: bool = True) -> pl.DataFrame:
    """
    Чтение CSV в DataFrame со строковыми колонками.

    Raises:
        TimeSeriesLoadError: если файл не читается, не UTF-8 или не разбирается как CSV
    """
    try:
        raw = path.read_bytes()
        raw.decode("utf-8")
    except OSError as e:
        raise TimeSeriesLoadError(f"cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise TimeSeriesLoadError(f"{path} is not valid UTF-8: {e}") from e

    try:
        return pl.read_csv(
            raw,
            has_header=has_header,
            infer_schema=False,
            raise_if_empty=False,
        )
    except pl.exceptions.PolarsError as e:
        raise TimeSeriesLoadError(f"cannot parse {path} as CSV: {e}") from e


def load_collection(path: str | Path, has_header: bool = True) -> TimeSeriesCollection:
    """
    Загрузка коллекции рядов из CSV файла.

    Args:
        path: Путь к CSV файлу
        has_header: Первая строка — заголовок (default: True)

    Returns:
        TimeSeriesCollection

    Raises:
        TimeSeriesLoadError: если файл не найден, не читается или формат невалиден
    """
    path = Path(path)
    if not path.is_file():
        raise TimeSeriesLoadError(f"input file not found: {path}")

    df = read_frame(path, has_header=has_header)
    # Заголовок уже поглощён polars: данные начинаются со второй строки файла
    collection = parse_rows(
        df.iter_rows(),
        has_header=False,
        first_line=2 if has_header else 1,
    )

    logger.info(
        f"Loaded {collection.size} series of length {collection.series_length} from {path}"
    )
    return collection
