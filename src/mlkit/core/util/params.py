"""
Parameter registry for a binding.

``Params`` stores the ``ParamData`` of every parameter of one binding,
indexed by name and by optional single-character alias. Each declaration
resolves the parameter's value category immediately, so a declared type
that is ambiguous for the printing dispatch is rejected at declaration.

Matrices, serializable objects and ``(DatasetInfo, matrix)`` pairs are
stored together with the filename they are loaded from or saved to; ``get``
returns the object and ``printable`` shows the filename.

Example:
    >>> params = Params("softplus_transform")
    >>> params.add("threshold", float, "Linear region start.", alias="t",
    ...            default=40.0)
    >>> params.add("input", np.ndarray, "Input matrix.", alias="i",
    ...            required=True)
    >>> params.set("input", np.zeros((3, 3)), filename="x.csv")
    >>> params.summary()
    ['input: x.csv', 'threshold: 40.0']
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

from mlkit.bindings.get_printable_param import get_printable_param
from mlkit.core.error import MLKIT_ERROR_UNKNOWN_PARAMETER, ParameterError
from mlkit.core.util.param_data import ParamData
from mlkit.core.util.type_traits import type_name, value_category

logger = logging.getLogger("mlkit.params")

__all__ = ['Params']


class Params:
    """Parameters of one binding.

    Args:
        binding_name: Name of the binding (used in messages only).
    """

    def __init__(self, binding_name: str = ""):
        self.binding_name = binding_name
        self._parameters: Dict[str, ParamData] = {}
        self._aliases: Dict[str, str] = {}

    # -------------------------------------------------------------------------
    # Declaration
    # -------------------------------------------------------------------------

    def add(
        self,
        name: str,
        py_type: Any,
        desc: str = "",
        alias: str = "",
        *,
        default: Any = None,
        required: bool = False,
        input: bool = True,
    ) -> ParamData:
        """Declare a parameter.

        Raises:
            ParameterError: On an empty or duplicate name, an alias that is
                not a single character, or a duplicate alias.
            DispatchAmbiguityError: If ``py_type`` has no single category.
        """
        if not name:
            raise ParameterError("Parameter name must not be empty")
        if name in self._parameters:
            raise ParameterError(f"Parameter '{name}' is already declared")
        if alias:
            if len(alias) != 1:
                raise ParameterError(
                    f"Alias of '{name}' must be a single character, got {alias!r}"
                )
            if alias in self._aliases:
                raise ParameterError(
                    f"Alias '{alias}' is already used by '{self._aliases[alias]}'"
                )

        data = ParamData(
            name=name,
            desc=desc,
            py_type=py_type,
            tname=type_name(py_type),
            alias=alias,
            required=required,
            input=input,
            category=value_category(py_type),
        )
        data.value = (default, "") if data.is_file_backed else default

        self._parameters[name] = data
        if alias:
            self._aliases[alias] = name
        logger.debug(
            "Declared parameter '%s' (%s, %s)", name, data.tname, data.category.value,
        )
        return data

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def _resolve(self, identifier: str) -> str:
        if identifier in self._parameters:
            return identifier
        if identifier in self._aliases:
            return self._aliases[identifier]
        raise ParameterError(
            f"Unknown parameter '{identifier}'"
            + (f" for binding '{self.binding_name}'" if self.binding_name else ""),
            MLKIT_ERROR_UNKNOWN_PARAMETER,
        )

    def has(self, identifier: str) -> bool:
        """Whether a name or alias is declared."""
        return identifier in self._parameters or identifier in self._aliases

    def param(self, identifier: str) -> ParamData:
        """The ``ParamData`` for a name or alias."""
        return self._parameters[self._resolve(identifier)]

    def get(self, identifier: str) -> Any:
        """Current value (the object itself for file-backed parameters)."""
        data = self.param(identifier)
        if data.is_file_backed:
            return data.value[0]
        return data.value

    def filename(self, identifier: str) -> str:
        """Filename attached to a file-backed parameter."""
        data = self.param(identifier)
        if not data.is_file_backed:
            raise ParameterError(f"Parameter '{data.name}' is not file-backed")
        return data.value[1]

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def set(self, identifier: str, value: Any, filename: Optional[str] = None) -> None:
        """Set a value and mark the parameter as passed.

        Args:
            identifier: Name or alias.
            value: New value.
            filename: For file-backed parameters, the associated file. Keeps
                the previous filename when omitted.
        """
        data = self.param(identifier)
        if data.is_file_backed:
            previous = data.value[1] if isinstance(data.value, tuple) else ""
            data.value = (value, previous if filename is None else filename)
        else:
            if filename is not None:
                raise ParameterError(f"Parameter '{data.name}' is not file-backed")
            data.value = value
        data.was_passed = True

    def mark_passed(self, identifier: str, passed: bool = True) -> None:
        self.param(identifier).was_passed = passed

    def check_required(self) -> None:
        """Raise if a required input parameter was not passed."""
        missing = [p.name for p in self._parameters.values()
                   if p.required and p.input and not p.was_passed]
        if missing:
            raise ParameterError(f"Missing required parameter(s): {', '.join(missing)}")

    # -------------------------------------------------------------------------
    # Printing
    # -------------------------------------------------------------------------

    def printable(self, identifier: str) -> str:
        """Short representation of one parameter's value."""
        return get_printable_param(self.param(identifier))

    def summary(self) -> List[str]:
        """``name: value`` for every parameter, sorted by name."""
        lines = [f"{name}: {self.printable(name)}" for name in sorted(self._parameters)]
        for line in lines:
            logger.debug("%s", line)
        return lines

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __contains__(self, identifier: str) -> bool:
        return self.has(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"Params({self.binding_name!r}, parameters={sorted(self._parameters)})"
