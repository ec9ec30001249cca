"""Numeric backend facade.

A fixed set of array operations re-exported from exactly one backend
module. The backend is chosen through configuration
(``mlkit.config.backend`` or the ``MLKIT_BACKEND`` environment variable),
never by whichever name happens to be in scope.

Backends:
    - numpy: always available (default)
    - cupy: GPU arrays, imported only when selected

Example:
    >>> from mlkit.core.util import backend as xb
    >>> xb.filled((2, 3), xb.Fill.ONES)
    array([[1., 1., 1.],
           [1., 1., 1.]])
    >>> with mlkit.config.local(backend=BackendConfig(name="cupy")):
    ...     xb.randu((4, 4))
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Tuple, Union

from mlkit._config import config
from mlkit.core.error import BackendError

logger = logging.getLogger("mlkit.backend")

__all__ = [
    'Fill',
    'NumericBackend',
    'get_backend',
    'current_backend',
    'available_backends',
    'OPERATIONS',
    'conv_to', 'exp', 'dot', 'join_cols', 'join_rows', 'log', 'min', 'max',
    'mean', 'norm', 'normalise', 'pow', 'randi', 'randn', 'randu', 'repmat',
    'sign', 'sqrt', 'square', 'sum', 'trans', 'vectorise',
    'zeros', 'ones', 'empty', 'filled',
]


# =============================================================================
# Fill Tags
# =============================================================================

class Fill(Enum):
    """Initial contents of a newly allocated array.

    One tag set shared by every backend.
    """
    NONE = 'none'
    ZEROS = 'zeros'
    ONES = 'ones'
    RANDU = 'randu'


# =============================================================================
# Backend
# =============================================================================

# Backend name -> importable array module
_BACKEND_MODULES = {
    'numpy': 'numpy',
    'cupy': 'cupy',
}

OPERATIONS: Tuple[str, ...] = (
    'conv_to', 'exp', 'dot', 'join_cols', 'join_rows', 'log', 'min', 'max',
    'mean', 'norm', 'normalise', 'pow', 'randi', 'randn', 'randu', 'repmat',
    'sign', 'sqrt', 'square', 'sum', 'trans', 'vectorise',
)

ShapeLike = Union[int, Tuple[int, ...]]


@dataclass(frozen=True)
class NumericBackend:
    """The fixed operation set bound to one array module.

    Attributes:
        name: Backend name ('numpy', 'cupy').
        xp: The array module (numpy-compatible API).
    """
    name: str
    xp: Any

    # -------------------------------------------------------------------------
    # Conversion / element-wise
    # -------------------------------------------------------------------------

    def conv_to(self, x, dtype):
        return self.xp.asarray(x, dtype=dtype)

    def exp(self, x):
        return self.xp.exp(x)

    def log(self, x):
        return self.xp.log(x)

    def pow(self, x, p):
        return self.xp.power(x, p)

    def sign(self, x):
        return self.xp.sign(x)

    def sqrt(self, x):
        return self.xp.sqrt(x)

    def square(self, x):
        return self.xp.square(x)

    # -------------------------------------------------------------------------
    # Reductions
    # -------------------------------------------------------------------------

    def dot(self, a, b):
        """Inner product of two same-size arrays (flattened)."""
        return self.xp.dot(self.xp.ravel(a), self.xp.ravel(b))

    def min(self, x, axis=None):
        return self.xp.min(x, axis=axis)

    def max(self, x, axis=None):
        return self.xp.max(x, axis=axis)

    def mean(self, x, axis=None):
        return self.xp.mean(x, axis=axis)

    def sum(self, x, axis=None):
        return self.xp.sum(x, axis=axis)

    def norm(self, x, p=2):
        return self.xp.linalg.norm(self.xp.ravel(x), ord=p)

    def normalise(self, x, p=2, axis=0):
        """Scale each column (axis=0) or row (axis=1) to unit p-norm.

        Zero vectors are left unchanged.
        """
        norms = self.xp.linalg.norm(x, ord=p, axis=axis, keepdims=True)
        norms = self.xp.where(norms == 0, 1.0, norms)
        return x / norms

    # -------------------------------------------------------------------------
    # Shape manipulation
    # -------------------------------------------------------------------------

    def join_cols(self, a, b):
        """Stack vertically (append rows)."""
        return self.xp.vstack((a, b))

    def join_rows(self, a, b):
        """Stack horizontally (append columns)."""
        return self.xp.hstack((a, b))

    def repmat(self, x, rows, cols):
        return self.xp.tile(x, (rows, cols))

    def trans(self, x):
        return self.xp.transpose(x)

    def vectorise(self, x):
        """Column vector of all elements in column-major order."""
        return self.xp.reshape(x, (-1, 1), order='F')

    # -------------------------------------------------------------------------
    # Random / allocation
    # -------------------------------------------------------------------------

    def randi(self, shape: ShapeLike, low: int = 0, high: int = 1):
        """Random integers in the closed interval [low, high]."""
        return self.xp.random.randint(low, high + 1, size=shape)

    def randn(self, shape: ShapeLike):
        return self.xp.random.standard_normal(shape)

    def randu(self, shape: ShapeLike):
        """Uniform random values in [0, 1)."""
        return self.xp.random.random_sample(shape)

    def filled(self, shape: ShapeLike, fill: Fill = Fill.ZEROS, dtype=None):
        """Allocate an array initialised according to ``fill``."""
        if dtype is None:
            dtype = self.xp.float64
        if fill is Fill.ZEROS:
            return self.xp.zeros(shape, dtype=dtype)
        if fill is Fill.ONES:
            return self.xp.ones(shape, dtype=dtype)
        if fill is Fill.RANDU:
            return self.randu(shape).astype(dtype)
        if fill is Fill.NONE:
            return self.xp.empty(shape, dtype=dtype)
        raise ValueError(f"Unknown fill tag: {fill!r}")


def available_backends() -> Tuple[str, ...]:
    """Names accepted by ``get_backend``."""
    return tuple(_BACKEND_MODULES)


@lru_cache(maxsize=None)
def get_backend(name: str) -> NumericBackend:
    """Load a backend by name.

    Raises:
        BackendError: If the name is unknown or its module cannot be imported.
    """
    key = name.strip().lower()
    if key not in _BACKEND_MODULES:
        raise BackendError(
            f"Unknown backend {name!r}. Available: {list(_BACKEND_MODULES)}"
        )
    try:
        module = importlib.import_module(_BACKEND_MODULES[key])
    except ImportError as e:
        raise BackendError(f"Backend {key!r} is not installed: {e}") from e

    logger.info("Loaded numeric backend %r", key)
    return NumericBackend(name=key, xp=module)


def current_backend() -> NumericBackend:
    """The backend selected by the (possibly thread-local) configuration."""
    return get_backend(config.backend.name)


# =============================================================================
# Facade
# =============================================================================

def conv_to(x, dtype):
    return current_backend().conv_to(x, dtype)


def exp(x):
    return current_backend().exp(x)


def dot(a, b):
    return current_backend().dot(a, b)


def join_cols(a, b):
    return current_backend().join_cols(a, b)


def join_rows(a, b):
    return current_backend().join_rows(a, b)


def log(x):
    return current_backend().log(x)


def min(x, axis=None):
    return current_backend().min(x, axis=axis)


def max(x, axis=None):
    return current_backend().max(x, axis=axis)


def mean(x, axis=None):
    return current_backend().mean(x, axis=axis)


def norm(x, p=2):
    return current_backend().norm(x, p)


def normalise(x, p=2, axis=0):
    return current_backend().normalise(x, p, axis)


def pow(x, p):
    return current_backend().pow(x, p)


def randi(shape, low=0, high=1):
    return current_backend().randi(shape, low, high)


def randn(shape):
    return current_backend().randn(shape)


def randu(shape):
    return current_backend().randu(shape)


def repmat(x, rows, cols):
    return current_backend().repmat(x, rows, cols)


def sign(x):
    return current_backend().sign(x)


def sqrt(x):
    return current_backend().sqrt(x)


def square(x):
    return current_backend().square(x)


def sum(x, axis=None):
    return current_backend().sum(x, axis=axis)


def trans(x):
    return current_backend().trans(x)


def vectorise(x):
    return current_backend().vectorise(x)


def filled(shape, fill: Fill = Fill.ZEROS, dtype: Optional[Any] = None):
    return current_backend().filled(shape, fill, dtype)


def zeros(shape, dtype=None):
    return filled(shape, Fill.ZEROS, dtype)


def ones(shape, dtype=None):
    return filled(shape, Fill.ONES, dtype)


def empty(shape, dtype=None):
    return filled(shape, Fill.NONE, dtype)
