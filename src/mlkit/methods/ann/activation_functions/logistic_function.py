"""Logistic (sigmoid) transfer function.

    f(x)      = 1 / (1 + e^-x)
    f'(x)     = f(x) * (1 - f(x))
    f^{-1}(y) = ln(y / (1 - y))
"""

from __future__ import annotations

import math

from mlkit.core.math import LOG_MIN, safe_divide, trunc_log
from mlkit.methods.ann.activation_functions.base_function import ActivationFunction

__all__ = ['LogisticFunction']


class LogisticFunction(ActivationFunction):
    """The logistic function."""

    name = "logistic"

    @staticmethod
    def _fn(x: float) -> float:
        # e^-x overflows below LOG_MIN
        if x < LOG_MIN:
            return 0.0
        return 1.0 / (1.0 + math.exp(-x))

    @staticmethod
    def _deriv(y: float) -> float:
        return y * (1.0 - y)

    @staticmethod
    def _inv(y: float) -> float:
        return trunc_log(safe_divide(y, 1.0 - y))
