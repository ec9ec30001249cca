"""
Utilities: numeric backend facade, type categories and parameter registry.

Submodules are imported explicitly (``mlkit.core.util.backend`` etc.) to
keep this package free of import cycles with ``mlkit.core.data``.
"""
