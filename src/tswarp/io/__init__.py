"""
Input modules: чтение временных рядов из файлов.
"""

from tswarp.io.csv_loader import TimeSeriesLoadError, load_collection, parse_rows

__all__ = [
    "TimeSeriesLoadError",
    "load_collection",
    "parse_rows",
]
