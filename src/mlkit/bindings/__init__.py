"""
Binding-side helpers shared by every language binding.
"""

from mlkit.bindings.get_printable_param import get_printable_param

__all__ = ["get_printable_param"]
