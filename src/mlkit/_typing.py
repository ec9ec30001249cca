"""
mlkit Type Definitions and Protocols.

This module provides the serialization protocol and format detection for
the containers the kernel layer accepts:

    - Python scalars and numpy scalars
    - NumPy arrays (ndarray)
    - SciPy sparse matrices and arrays
    - Python sequences (List, Tuple)

Example:
    >>> from mlkit._typing import get_format
    >>> get_format(np.zeros(3))
    'numpy'
"""

from __future__ import annotations

import numbers
from typing import Any, Protocol, runtime_checkable

import numpy as np
from scipy import sparse as sp

# =============================================================================
# Protocol Definitions
# =============================================================================

@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that can write themselves to an archive.

    ``serialize(archive, version)`` is called with a mapping-like archive;
    the object stores or restores its state through it.
    """

    def serialize(self, archive: Any, version: int) -> None:
        ...


# =============================================================================
# Format Detection
# =============================================================================

def is_scalar(obj: Any) -> bool:
    """Check if object is a real scalar (Python or numpy, not bool)."""
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, numbers.Real)


def is_numpy_array(obj: Any) -> bool:
    """Check if object is a numpy ndarray."""
    return isinstance(obj, np.ndarray)


def is_scipy_sparse(obj: Any) -> bool:
    """Check if object is any scipy sparse matrix or array."""
    return sp.issparse(obj)


def get_format(obj: Any) -> str:
    """Detect the format of a numeric value.

    Args:
        obj: Value to classify.

    Returns:
        Format string: 'scalar', 'numpy', 'scipy_sparse', 'sequence',
        or 'unknown'.
    """
    if is_scalar(obj):
        return "scalar"
    elif is_numpy_array(obj):
        return "numpy"
    elif is_scipy_sparse(obj):
        return "scipy_sparse"
    elif isinstance(obj, (list, tuple)):
        return "sequence"
    else:
        return "unknown"


def ensure_array(obj: Any, dtype: Any = np.float64) -> "np.ndarray":
    """Convert dense input to an ndarray of ``dtype`` (no copy when possible).

    Raises:
        TypeError: If the input is sparse or of an unsupported kind.
    """
    fmt = get_format(obj)
    if fmt == "numpy":
        return obj.astype(dtype, copy=False)
    if fmt in ("sequence", "scalar"):
        return np.asarray(obj, dtype=dtype)
    raise TypeError(
        f"Cannot convert {type(obj).__name__} to ndarray. "
        f"Supported types: numpy.ndarray, sequences, scalars"
    )


__all__ = [
    "Serializable",
    "is_scalar",
    "is_numpy_array",
    "is_scipy_sparse",
    "get_format",
    "ensure_array",
]
