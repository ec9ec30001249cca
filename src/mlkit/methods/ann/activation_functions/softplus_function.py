"""Softplus transfer function.

    f(x)      = ln(1 + e^x)
    f'(x)     = 1 / (1 + e^-x)
    f^{-1}(y) = ln(e^y - 1)

Above ``threshold`` the forward pass returns x unchanged. Below it the
value is evaluated as ln(1 + e^-|x|) + max(x, 0), which never overflows and
stays accurate for any threshold. The inverse uses expm1 near 0 and
y + ln(1 - e^-y) for larger y, so fn(inv(y)) recovers y down to the
smallest positive doubles.

References:
    Dugas et al. "Incorporating Second-Order Functional Knowledge for Better
    Option Pricing", NIPS 2001.
"""

from __future__ import annotations

import math
from functools import partial
from typing import Optional

from mlkit._config import config
from mlkit.core.math import trunc_exp, trunc_log
from mlkit.methods.ann.activation_functions.base_function import (
    ActivationFunction,
    apply_elementwise,
)

__all__ = ['SoftplusFunction', 'DEFAULT_THRESHOLD']


DEFAULT_THRESHOLD = 40.0


class SoftplusFunction(ActivationFunction):
    """The softplus function.

    Example:
        >>> SoftplusFunction.fn(0.0)
        0.6931471805599453
        >>> SoftplusFunction.fn(np.array([1.0, 50.0]))
        array([ 1.31326169, 50.        ])
    """

    name = "softplus"

    @staticmethod
    def _fn(x: float, threshold: float = DEFAULT_THRESHOLD) -> float:
        if x > threshold:
            return x
        if x > 0.0:
            return x + math.log1p(math.exp(-x))
        return math.log1p(math.exp(x))

    @staticmethod
    def _deriv(y: float) -> float:
        return 1.0 / (1.0 + trunc_exp(-y))

    @staticmethod
    def _inv(y: float) -> float:
        # y <= 0 is outside the image of softplus and maps to 0
        if y > 1.0:
            return y + math.log1p(-math.exp(-y))
        if y > 0.0:
            return trunc_log(math.expm1(y))
        return 0.0

    @classmethod
    def fn(cls, x, out=None, threshold: Optional[float] = None):
        """Compute softplus.

        Args:
            x: Scalar or container.
            out: Optional preallocated output of the same shape as ``x``.
            threshold: Value above which softplus is linear. Defaults to
                ``config.kernel.softplus_threshold``.

        Returns:
            f(x), a float for scalar input.
        """
        if threshold is None:
            threshold = config.kernel.softplus_threshold
        return apply_elementwise(partial(cls._fn, threshold=threshold), x, out)
