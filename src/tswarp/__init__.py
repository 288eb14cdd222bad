"""
tswarp — сумма DTW-расстояний по всем парам временных рядов.
"""

from tswarp.core.math import LengthMismatch, compute_dtw, sum_all_pairs

__version__ = "0.1.0"

__all__ = [
    "LengthMismatch",
    "compute_dtw",
    "sum_all_pairs",
    "__version__",
]
