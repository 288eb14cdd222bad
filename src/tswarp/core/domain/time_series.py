"""
TimeSeries — Модели временных рядов для DTW

Immutable Pydantic модели:
- TimeSeries: один ряд (метка класса + значения)
- TimeSeriesCollection: упорядоченный набор рядов одной длины

Метка класса хранится для диагностики и никак не влияет на расстояния.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from tswarp.core.math.numerical_safeguards import first_invalid_index


# =============================================================================
# TIME SERIES
# =============================================================================


class TimeSeries(BaseModel):
    """
    Один временной ряд.

    Immutable модель (frozen=True): после загрузки ряд не изменяется.
    """

    label: str = Field(default="", description="Метка класса (первая колонка CSV)")
    values: tuple[float, ...] = Field(..., min_length=1, description="Значения ряда")

    model_config = {"frozen": True}  # Immutable

    @field_validator("values")
    @classmethod
    def validate_finite(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Все значения должны быть конечными (без NaN/Inf)."""
        idx = first_invalid_index(v)
        if idx is not None:
            raise ValueError(f"value at position {idx} is not finite: {v[idx]}")
        return v

    def __len__(self) -> int:
        return len(self.values)


# =============================================================================
# COLLECTION
# =============================================================================


class TimeSeriesCollection(BaseModel):
    """
    Упорядоченный набор рядов одной длины.

    Порядок определяет только перечисление пар (i <= j),
    но не влияет на значение расстояния внутри пары.
    Пустой набор допустим.
    """

    series: tuple[TimeSeries, ...] = Field(default=(), description="Ряды в порядке загрузки")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_equal_lengths(self) -> "TimeSeriesCollection":
        """Все ряды должны иметь одинаковую длину n."""
        if not self.series:
            return self

        expected = len(self.series[0])
        for idx, ts in enumerate(self.series):
            if len(ts) != expected:
                raise ValueError(
                    f"series {idx} has length {len(ts)}, expected {expected}"
                )
        return self

    @property
    def size(self) -> int:
        """Количество рядов m."""
        return len(self.series)

    @property
    def series_length(self) -> int:
        """Длина рядов n (0 для пустого набора)."""
        return len(self.series[0]) if self.series else 0

    def as_sequences(self) -> list[tuple[float, ...]]:
        """Значения рядов в формате, который принимает DTW kernel."""
        return [ts.values for ts in self.series]

    def labels(self) -> list[str]:
        return [ts.label for ts in self.series]
