"""Identity transfer function: f(x) = x, f'(x) = 1, f^{-1}(y) = y."""

from __future__ import annotations

from mlkit.methods.ann.activation_functions.base_function import ActivationFunction

__all__ = ['IdentityFunction']


class IdentityFunction(ActivationFunction):
    name = "identity"

    @staticmethod
    def _fn(x: float) -> float:
        return x

    @staticmethod
    def _deriv(y: float) -> float:
        return 1.0

    @staticmethod
    def _inv(y: float) -> float:
        return y
