"""Transfer function base class and element-wise application.

A transfer function family is a class of static scalar routines
(``_fn``, ``_deriv``, ``_inv``) plus the public entry points ``fn``,
``deriv`` and ``inv``. The public entry points accept either a scalar or a
container:

    - scalar in, float out
    - ndarray / sequence in, ndarray out (or written into ``out``)
    - scipy sparse in: sparse out when the routine maps 0 to 0, dense
      ndarray out otherwise

Container results are produced by calling the scalar routine on every
element, so bulk and scalar results agree bit for bit.

Derivatives take the forward *output* y = fn(x), not the original input.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type

import numpy as np
from scipy import sparse as sp

from mlkit._typing import ensure_array, get_format
from mlkit.core.error import check_shape

logger = logging.getLogger("mlkit.ann")

__all__ = ['ActivationFunction', 'apply_elementwise', 'get_activation',
           'list_activations']


_REGISTRY: Dict[str, Type["ActivationFunction"]] = {}


# =============================================================================
# Element-wise Application
# =============================================================================

def apply_elementwise(
    func: Callable[[float], float],
    x: Any,
    out: Optional[np.ndarray] = None,
) -> Any:
    """Apply a scalar routine to a scalar or to every element of a container.

    Args:
        func: Scalar routine taking and returning a float.
        x: Scalar, ndarray, nested sequence, or scipy sparse matrix.
        out: Optional preallocated ndarray. Its shape must equal the shape
            of ``x``. Not supported for scalar or sparse input.

    Returns:
        float for scalar input; ``out`` (or a new float64 ndarray) for dense
        input; a sparse matrix or dense ndarray for sparse input.

    Raises:
        DimensionMismatchError: If ``out`` does not have the input's shape.
        TypeError: If ``out`` is given for scalar or sparse input.
    """
    fmt = get_format(x)

    if fmt == "scalar":
        if out is not None:
            raise TypeError("out= is only supported for container input")
        return func(float(x))

    if fmt == "scipy_sparse":
        if out is not None:
            raise TypeError("out= is not supported for sparse input")
        return _apply_sparse(func, x)

    values = ensure_array(x)
    if out is not None:
        check_shape(values.shape, out.shape, context="output container")

    result = np.fromiter(
        (func(float(v)) for v in values.flat),
        dtype=np.float64,
        count=values.size,
    ).reshape(values.shape)

    if out is None:
        return result
    out[...] = result
    return out


def _apply_sparse(func: Callable[[float], float], mat: Any) -> Any:
    """Sparse path: keep sparsity only when func(0) == 0."""
    if func(0.0) != 0.0:
        logger.debug(
            "Routine does not preserve zeros; densifying %s input of shape %s",
            mat.format, mat.shape,
        )
        return apply_elementwise(func, mat.toarray())

    result = mat.tocsr(copy=True).astype(np.float64)
    # Duplicate entries add up; f must see their sum, not each part
    result.sum_duplicates()
    result.data = np.fromiter(
        (func(float(v)) for v in result.data),
        dtype=np.float64,
        count=result.data.size,
    )
    return result.asformat(mat.format)


# =============================================================================
# Base Class
# =============================================================================

class ActivationFunction:
    """Base class of the transfer function families.

    Subclasses set ``name`` and implement the static scalar routines. They
    are never instantiated; every entry point is a classmethod.
    """

    name: str = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.name:
            _REGISTRY[cls.name] = cls

    @staticmethod
    def _fn(x: float) -> float:
        raise NotImplementedError

    @staticmethod
    def _deriv(y: float) -> float:
        raise NotImplementedError

    @staticmethod
    def _inv(y: float) -> float:
        raise NotImplementedError

    @classmethod
    def fn(cls, x, out=None):
        """Forward pass f(x)."""
        return apply_elementwise(cls._fn, x, out)

    @classmethod
    def deriv(cls, y, out=None):
        """First derivative, computed from the forward output y."""
        return apply_elementwise(cls._deriv, y, out)

    @classmethod
    def inv(cls, y, out=None):
        """Inverse f^{-1}(y)."""
        return apply_elementwise(cls._inv, y, out)


def get_activation(name: str) -> Type[ActivationFunction]:
    """Look up a transfer function family by name.

    Raises:
        KeyError: If no family is registered under ``name``.
    """
    key = name.strip().lower()
    if key not in _REGISTRY:
        raise KeyError(
            f"Unknown activation function: {name!r}. "
            f"Available: {sorted(_REGISTRY)}"
        )
    return _REGISTRY[key]


def list_activations() -> list:
    """Names of all registered transfer function families."""
    return sorted(_REGISTRY)
