"""
Core math modules для tswarp

DTW kernel, агрегация по парам и численные примитивы.
"""

# Numerical Safeguards
from tswarp.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    first_invalid_index,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_non_negative,
)

# DTW Kernel
from tswarp.core.math.dtw import (
    InvalidInput,
    LengthMismatch,
    compute_dtw,
    compute_dtw_matrix,
    min3,
    square_dist,
)

# Aggregation
from tswarp.core.math.aggregation import (
    iter_pair_indices,
    pair_count,
    sum_all_pairs,
    totals_match,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf checks
    "first_invalid_index",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    # DTW — Exceptions
    "InvalidInput",
    "LengthMismatch",
    # DTW — Functions
    "compute_dtw",
    "compute_dtw_matrix",
    "min3",
    "square_dist",
    # Aggregation — Functions
    "iter_pair_indices",
    "pair_count",
    "sum_all_pairs",
    "totals_match",
]
