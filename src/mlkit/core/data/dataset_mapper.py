"""
Dataset dimension information.

``DatasetInfo`` records, for every dimension of a dataset, whether it is
numeric or categorical, and for categorical dimensions the bidirectional
mapping between the original strings and the numeric values stored in the
matrix. New strings receive the next free value (0, 1, 2, ...) in their
dimension.

A ``(DatasetInfo, numpy.ndarray)`` pair is what loaders return for data
with categorical columns; the parameter printing layer treats that pair as
its own value category.

Example:
    >>> info = DatasetInfo(3)
    >>> info.map_string("red", 1)
    0
    >>> info.map_string("blue", 1)
    1
    >>> info.type(1)
    <Datatype.CATEGORICAL: 'categorical'>
    >>> info.unmap_string(1, 1)
    'blue'
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

__all__ = ['Datatype', 'DatasetInfo']


class Datatype(Enum):
    """Kind of a dataset dimension."""
    NUMERIC = 'numeric'
    CATEGORICAL = 'categorical'


class DatasetInfo:
    """Per-dimension types and string mappings of a dataset.

    Args:
        dimensionality: Number of dimensions. All start as numeric.
    """

    def __init__(self, dimensionality: int = 0):
        if dimensionality < 0:
            raise ValueError(f"dimensionality must be >= 0, got {dimensionality}")
        self._types: List[Datatype] = [Datatype.NUMERIC] * dimensionality
        # dimension -> string -> value
        self._maps: Dict[int, Dict[str, int]] = {}
        # dimension -> value -> strings (several strings may share a value)
        self._unmaps: Dict[int, Dict[int, List[str]]] = {}

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def dimensionality(self) -> int:
        return len(self._types)

    def type(self, dimension: int) -> Datatype:
        self._check_dimension(dimension)
        return self._types[dimension]

    def set_type(self, dimension: int, datatype: Datatype) -> None:
        self._check_dimension(dimension)
        self._types[dimension] = Datatype(datatype)

    def num_mappings(self, dimension: int) -> int:
        """Number of distinct values in a dimension's mapping."""
        self._check_dimension(dimension)
        return len(self._unmaps.get(dimension, {}))

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def map_string(self, string: str, dimension: int) -> int:
        """Map a string to its numeric value, assigning a new one if needed.

        Mapping a string marks the dimension as categorical.
        """
        self._check_dimension(dimension)
        forward = self._maps.setdefault(dimension, {})
        if string in forward:
            return forward[string]

        value = len(self._unmaps.get(dimension, {}))
        forward[string] = value
        self._unmaps.setdefault(dimension, {})[value] = [string]
        self._types[dimension] = Datatype.CATEGORICAL
        return value

    def has_mapping(self, string: str, dimension: int) -> bool:
        self._check_dimension(dimension)
        return string in self._maps.get(dimension, {})

    def unmap_value(self, string: str, dimension: int) -> int:
        """Numeric value previously assigned to ``string``.

        Raises:
            KeyError: If the string was never mapped in this dimension.
        """
        self._check_dimension(dimension)
        try:
            return self._maps[dimension][string]
        except KeyError:
            raise KeyError(
                f"String {string!r} has no mapping in dimension {dimension}"
            ) from None

    def unmap_string(self, value: int, dimension: int, unmapping_index: int = 0) -> str:
        """String originally mapped to ``value``.

        Raises:
            KeyError: If the value has no mapping in this dimension.
            IndexError: If ``unmapping_index`` exceeds the strings stored
                for the value.
        """
        self._check_dimension(dimension)
        strings = self._unmaps.get(dimension, {}).get(int(value))
        if strings is None:
            raise KeyError(f"Value {value} has no mapping in dimension {dimension}")
        if unmapping_index >= len(strings):
            raise IndexError(
                f"Value {value} in dimension {dimension} has only "
                f"{len(strings)} mapped string(s)"
            )
        return strings[unmapping_index]

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def serialize(self, archive, version: int) -> None:
        """Save to or load from ``archive`` (see ``serialization.Archive``)."""
        if archive.is_loading:
            self._types = [Datatype(t) for t in archive["types"]]
            self._maps = {}
            self._unmaps = {}
            for dim, forward in archive["maps"].items():
                dim = int(dim)
                self._maps[dim] = dict(forward)
                unmaps: Dict[int, List[str]] = {}
                for string, value in forward.items():
                    unmaps.setdefault(int(value), []).append(string)
                self._unmaps[dim] = unmaps
        else:
            archive["types"] = [t.value for t in self._types]
            archive["maps"] = {str(dim): dict(forward) for dim, forward in self._maps.items()}

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_dimension(self, dimension: int) -> None:
        if not 0 <= dimension < len(self._types):
            raise IndexError(
                f"Dimension {dimension} out of range for dataset with "
                f"{len(self._types)} dimension(s)"
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, DatasetInfo):
            return NotImplemented
        return self._types == other._types and self._maps == other._maps

    def __repr__(self) -> str:
        n_cat = sum(t is Datatype.CATEGORICAL for t in self._types)
        return f"DatasetInfo(dimensionality={self.dimensionality}, categorical={n_cat})"
