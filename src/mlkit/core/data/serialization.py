"""Mapping-backed archives for ``serialize(archive, version)``.

Serializable objects implement a single ``serialize`` method that either
writes their state into the archive or reads it back, depending on
``archive.is_loading``. The archive contents are plain dicts, lists,
strings and numbers.

Example:
    >>> state = save_object(info)
    >>> restored = load_object(DatasetInfo(), state)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from mlkit._typing import Serializable

__all__ = ['Archive', 'save_object', 'load_object']


class Archive(dict):
    """A dict that knows whether it is being read from or written to."""

    def __init__(self, loading: bool = False, data: Optional[Dict[str, Any]] = None):
        super().__init__(data or {})
        self.is_loading = loading

    def __repr__(self) -> str:
        mode = "loading" if self.is_loading else "saving"
        return f"Archive({mode}, keys={sorted(self)})"


def save_object(obj: Serializable, version: int = 0) -> Dict[str, Any]:
    """Collect the state of a serializable object."""
    archive = Archive(loading=False)
    obj.serialize(archive, version)
    return dict(archive)


def load_object(obj: Serializable, state: Dict[str, Any], version: int = 0) -> Serializable:
    """Restore ``obj`` in place from ``state`` and return it."""
    obj.serialize(Archive(loading=True, data=state), version)
    return obj
