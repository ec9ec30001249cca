"""Hyperbolic tangent transfer function.

    f(x)      = tanh(x)
    f'(x)     = 1 - f(x)^2
    f^{-1}(y) = 0.5 * ln((1 + y) / (1 - y))
"""

from __future__ import annotations

import math

from mlkit.core.math import safe_divide, trunc_log
from mlkit.methods.ann.activation_functions.base_function import ActivationFunction

__all__ = ['TanhFunction']


class TanhFunction(ActivationFunction):
    """The tanh function."""

    name = "tanh"

    @staticmethod
    def _fn(x: float) -> float:
        return math.tanh(x)

    @staticmethod
    def _deriv(y: float) -> float:
        return 1.0 - y * y

    @staticmethod
    def _inv(y: float) -> float:
        return 0.5 * trunc_log(safe_divide(1.0 + y, 1.0 - y))
