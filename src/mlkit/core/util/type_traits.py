"""
Type-level predicates and value categories.

Categories are computed from a *declared type* (a class or a parametrised
generic such as ``list[int]`` or ``tuple[DatasetInfo, np.ndarray]``), never
from a runtime value. Each category is defined by a predicate and the
predicates are mutually exclusive by construction:

    PLAIN              none of the four predicates below
    SEQUENCE           is_sequence_type
    NUMERIC_CONTAINER  is_numeric_container_type
    SERIALIZABLE       has_serialize and not is_numeric_container_type
    PAIRED_MATRIX      is_paired_matrix_type

``value_category`` evaluates all of them and refuses a type that matches
zero or several (e.g. a ``list`` subclass that also defines ``serialize``).
Parameters are categorised when they are declared, so such a type fails
before any value is ever printed.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Any, Tuple, get_args, get_origin

import numpy as np
from scipy import sparse as sp

from mlkit.core.data.dataset_mapper import DatasetInfo
from mlkit.core.error import DispatchAmbiguityError

logger = logging.getLogger("mlkit.util")

__all__ = [
    'ValueCategory',
    'is_sequence_type',
    'is_numeric_container_type',
    'has_serialize',
    'is_paired_matrix_type',
    'value_category',
    'type_name',
]


class ValueCategory(Enum):
    """Closed set of printing categories."""
    PLAIN = 'plain'
    SEQUENCE = 'sequence'
    NUMERIC_CONTAINER = 'numeric_container'
    SERIALIZABLE = 'serializable'
    PAIRED_MATRIX = 'paired_matrix'


PAIRED_MATRIX_ARGS: Tuple[type, type] = (DatasetInfo, np.ndarray)


def _origin_class(tp: Any):
    """The runtime class behind a (possibly parametrised) type, or None."""
    origin = get_origin(tp) or tp
    return origin if isinstance(origin, type) else None


# =============================================================================
# Predicates
# =============================================================================

def is_sequence_type(tp: Any) -> bool:
    """``list`` or ``list[...]`` (and subclasses)."""
    cls = _origin_class(tp)
    return cls is not None and issubclass(cls, list)


def is_numeric_container_type(tp: Any) -> bool:
    """numpy ndarray (including ``NDArray[...]``) or a scipy sparse class."""
    cls = _origin_class(tp)
    if cls is None:
        return False
    return issubclass(cls, (np.ndarray, sp.spmatrix, sp.sparray))


def has_serialize(tp: Any) -> bool:
    """The class exposes a callable ``serialize`` member."""
    cls = _origin_class(tp)
    return cls is not None and callable(getattr(cls, "serialize", None))


def is_paired_matrix_type(tp: Any) -> bool:
    """Exactly ``tuple[DatasetInfo, numpy.ndarray]``."""
    return get_origin(tp) is tuple and get_args(tp) == PAIRED_MATRIX_ARGS


# =============================================================================
# Category Resolution
# =============================================================================

@lru_cache(maxsize=None)
def value_category(tp: Any) -> ValueCategory:
    """Resolve the single category of a declared type.

    Raises:
        DispatchAmbiguityError: If the type matches zero or several categories.
    """
    numeric = is_numeric_container_type(tp)
    sequence = is_sequence_type(tp)
    serializable = has_serialize(tp)
    paired = is_paired_matrix_type(tp)

    matches = []
    if not (numeric or sequence or serializable or paired):
        matches.append(ValueCategory.PLAIN)
    if sequence:
        matches.append(ValueCategory.SEQUENCE)
    if numeric:
        matches.append(ValueCategory.NUMERIC_CONTAINER)
    if serializable and not numeric:
        matches.append(ValueCategory.SERIALIZABLE)
    if paired:
        matches.append(ValueCategory.PAIRED_MATRIX)

    if len(matches) != 1:
        names = ", ".join(m.value for m in matches) or "none"
        raise DispatchAmbiguityError(
            f"Type {type_name(tp)} must match exactly one value category "
            f"(matched: {names})"
        )

    logger.debug("Type %s resolved to category %s", type_name(tp), matches[0].value)
    return matches[0]


def type_name(tp: Any) -> str:
    """Short printable name of a declared type."""
    if get_origin(tp) is not None:
        return repr(tp).replace("typing.", "")
    if isinstance(tp, type):
        return tp.__name__
    return repr(tp)
