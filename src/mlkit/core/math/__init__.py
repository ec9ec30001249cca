"""
mlkit Math Module.

Scalar helpers shared by the numeric kernels:

    - Truncated exponential and logarithm (saturate at the finite double
      range instead of overflowing)
    - IEEE-style division that never raises on a zero denominator
"""

from mlkit.core.math.trunc import (
    DBL_MAX,
    DBL_MIN,
    LOG_MAX,
    LOG_MIN,
    trunc_exp,
    trunc_log,
    safe_divide,
)

__all__ = [
    "DBL_MAX",
    "DBL_MIN",
    "LOG_MAX",
    "LOG_MIN",
    "trunc_exp",
    "trunc_log",
    "safe_divide",
]
