"""Truncated elementary functions.

The kernels must never raise on numeric edge cases. ``math.exp`` raises
``OverflowError`` and ``math.log`` raises ``ValueError`` outside their
domains, so every kernel goes through these wrappers instead.
"""

import math
import sys

__all__ = ['DBL_MAX', 'DBL_MIN', 'LOG_MAX', 'LOG_MIN',
           'trunc_exp', 'trunc_log', 'safe_divide']


DBL_MAX = sys.float_info.max
DBL_MIN = sys.float_info.min   # smallest positive normal double

LOG_MAX = math.log(DBL_MAX)
LOG_MIN = math.log(DBL_MIN)


def trunc_exp(x: float) -> float:
    """exp(x), saturating at DBL_MAX.

    Example:
        >>> trunc_exp(1000.0) == DBL_MAX
        True
    """
    if x >= LOG_MAX:
        return DBL_MAX
    return math.exp(x)


def trunc_log(x: float) -> float:
    """log(x), with x <= 0 mapped to LOG_MIN and x >= DBL_MAX to LOG_MAX.

    NaN propagates.
    """
    if x >= DBL_MAX:
        return LOG_MAX
    if x <= 0.0:
        return LOG_MIN
    return math.log(x)


def safe_divide(num: float, den: float) -> float:
    """num / den with IEEE semantics for a zero denominator.

    A non-zero numerator gives a signed infinity and 0/0 gives NaN.
    """
    if den != 0.0:
        return num / den
    if num == 0.0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)
