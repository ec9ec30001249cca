"""Descriptor of one bound parameter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from mlkit.core.util.type_traits import ValueCategory

__all__ = ['ParamData']


@dataclass
class ParamData:
    """Everything the binding layer knows about a parameter.

    Attributes:
        name: Parameter name.
        desc: One-line description.
        py_type: Declared type; may be a generic such as ``list[int]``.
        tname: Printable name of ``py_type``.
        alias: Optional single-character alias ('' for none).
        was_passed: Whether the user supplied a value.
        required: Whether the parameter must be supplied.
        input: Input (True) or output (False) parameter.
        value: Current value. Matrices, serializable objects and paired
            matrices are stored as ``(object, filename)``.
        category: Value category, resolved when the parameter is declared.
    """
    name: str
    desc: str = ""
    py_type: Any = None
    tname: str = ""
    alias: str = ""
    was_passed: bool = False
    required: bool = False
    input: bool = True
    value: Any = None
    category: Optional[ValueCategory] = field(default=None, compare=False)

    @property
    def is_file_backed(self) -> bool:
        """Value is an ``(object, filename)`` pair."""
        return self.category in (
            ValueCategory.NUMERIC_CONTAINER,
            ValueCategory.SERIALIZABLE,
            ValueCategory.PAIRED_MATRIX,
        )
