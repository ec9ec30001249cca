"""Rectified linear unit.

    f(x)      = max(0, x)
    f'(x)     = 1 if f(x) > 0 else 0
    f^{-1}(y) = y for y > 0, 0 otherwise
"""

from __future__ import annotations

from mlkit.methods.ann.activation_functions.base_function import ActivationFunction

__all__ = ['RectifierFunction']


class RectifierFunction(ActivationFunction):
    """The rectifier (ReLU) function."""

    name = "rectifier"

    @staticmethod
    def _fn(x: float) -> float:
        return max(0.0, x)

    @staticmethod
    def _deriv(y: float) -> float:
        return 1.0 if y > 0 else 0.0

    @staticmethod
    def _inv(y: float) -> float:
        # Non-positive values have no unique preimage
        return y if y > 0 else 0.0
