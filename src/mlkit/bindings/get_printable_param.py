"""
Short, one-line rendering of a parameter value.

The renderer is chosen from the parameter's value category (see
``mlkit.core.util.type_traits``), which is fixed by the parameter's declared
type:

    PLAIN              str(value)
    SEQUENCE           elements separated by single spaces
    NUMERIC_CONTAINER  the filename the matrix came from / goes to
    SERIALIZABLE       the filename of the serialized object
    PAIRED_MATRIX      the filename of the (DatasetInfo, matrix) pair

Matrices and models are never printed in full. No file is touched; the
filename is only formatted.

Example:
    >>> get_printable_param(ParamData("k", py_type=int, value=5))
    '5'
    >>> slot = []
    >>> get_printable_param(matrix_param, None, slot)
    'data.csv'
    >>> slot
    ['data.csv']
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from mlkit.core.error import ParameterError
from mlkit.core.util.param_data import ParamData
from mlkit.core.util.type_traits import ValueCategory, value_category

__all__ = ['get_printable_param']


def _printable_plain(data: ParamData) -> str:
    return str(data.value)


def _printable_sequence(data: ParamData) -> str:
    return " ".join(str(v) for v in data.value)


def _printable_filename(data: ParamData) -> str:
    value = data.value
    if not (isinstance(value, tuple) and len(value) == 2):
        raise ParameterError(
            f"Parameter '{data.name}' of type {data.tname} must hold an "
            f"(object, filename) pair"
        )
    return str(value[1])


_RENDERERS: Dict[ValueCategory, Callable[[ParamData], str]] = {
    ValueCategory.PLAIN: _printable_plain,
    ValueCategory.SEQUENCE: _printable_sequence,
    ValueCategory.NUMERIC_CONTAINER: _printable_filename,
    ValueCategory.SERIALIZABLE: _printable_filename,
    ValueCategory.PAIRED_MATRIX: _printable_filename,
}

# Every category needs exactly one renderer
_missing = set(ValueCategory) - set(_RENDERERS)
if _missing:
    raise ImportError(f"No printable renderer for categories: {sorted(c.value for c in _missing)}")
del _missing


def get_printable_param(
    data: ParamData,
    input: Any = None,
    output: Optional[List[str]] = None,
) -> str:
    """Render a parameter as a short single-line string.

    Args:
        data: The parameter.
        input: Unused; kept so every binding function shares one signature.
        output: Optional list used as the output slot; it is replaced by a
            one-element list holding the result.

    Returns:
        The rendered string.

    Raises:
        DispatchAmbiguityError: If the declared type has no single category.
    """
    category = data.category
    if category is None:
        category = value_category(data.py_type)

    text = _RENDERERS[category](data)
    if output is not None:
        output[:] = [text]
    return text
