"""
Activation (transfer) functions.

Each family exposes ``fn``, ``deriv`` and ``inv`` over scalars, numpy arrays
and scipy sparse matrices. ``deriv`` consumes the forward output.

Example:
    >>> from mlkit.methods.ann.activation_functions import SoftplusFunction
    >>> y = SoftplusFunction.fn(np.linspace(-5, 5, 11))
    >>> dy = SoftplusFunction.deriv(y)
"""

from mlkit.methods.ann.activation_functions.base_function import (
    ActivationFunction,
    apply_elementwise,
    get_activation,
    list_activations,
)
from mlkit.methods.ann.activation_functions.identity_function import IdentityFunction
from mlkit.methods.ann.activation_functions.logistic_function import LogisticFunction
from mlkit.methods.ann.activation_functions.rectifier_function import RectifierFunction
from mlkit.methods.ann.activation_functions.softplus_function import (
    DEFAULT_THRESHOLD,
    SoftplusFunction,
)
from mlkit.methods.ann.activation_functions.tanh_function import TanhFunction

__all__ = [
    "ActivationFunction",
    "apply_elementwise",
    "get_activation",
    "list_activations",
    "IdentityFunction",
    "LogisticFunction",
    "RectifierFunction",
    "SoftplusFunction",
    "TanhFunction",
    "DEFAULT_THRESHOLD",
]
