"""
Domain models and value objects.

Contains the immutable time series entities consumed by the DTW core.
"""

from tswarp.core.domain.time_series import TimeSeries, TimeSeriesCollection

__all__ = [
    "TimeSeries",
    "TimeSeriesCollection",
]
