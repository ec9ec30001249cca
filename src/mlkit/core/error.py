"""
Error handling for mlkit.

Every error raised by the library carries an integer code so that binding
layers can forward a stable number instead of a Python class name.

Numeric kernels never raise: domain violations clamp to a sentinel value.
The errors below cover caller mistakes (shape preconditions, ambiguous
dispatch categories, undeclared policy traits, bad parameter declarations).
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
MLKIT_OK = 0

# General errors (1-9)
MLKIT_ERROR_UNKNOWN = 1
MLKIT_ERROR_INTERNAL = 2

# Argument errors (10-19)
MLKIT_ERROR_INVALID_ARGUMENT = 10
MLKIT_ERROR_DIMENSION_MISMATCH = 11

# Type errors (20-29)
MLKIT_ERROR_TYPE_ERROR = 20
MLKIT_ERROR_DISPATCH_AMBIGUITY = 21
MLKIT_ERROR_MISSING_TRAITS = 22

# Parameter errors (30-39)
MLKIT_ERROR_PARAMETER = 30
MLKIT_ERROR_UNKNOWN_PARAMETER = 31

# Feature errors (40-49)
MLKIT_ERROR_BACKEND_UNAVAILABLE = 40


_ERROR_MESSAGES = {
    MLKIT_OK: "Success",
    MLKIT_ERROR_UNKNOWN: "Unknown error",
    MLKIT_ERROR_INTERNAL: "Internal error",
    MLKIT_ERROR_INVALID_ARGUMENT: "Invalid argument",
    MLKIT_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    MLKIT_ERROR_TYPE_ERROR: "Type error",
    MLKIT_ERROR_DISPATCH_AMBIGUITY: "Ambiguous value category",
    MLKIT_ERROR_MISSING_TRAITS: "Missing policy traits",
    MLKIT_ERROR_PARAMETER: "Invalid parameter declaration",
    MLKIT_ERROR_UNKNOWN_PARAMETER: "Unknown parameter",
    MLKIT_ERROR_BACKEND_UNAVAILABLE: "Backend unavailable",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MLKitError(Exception):
    """
    Base exception for all mlkit errors.

    Subclasses fix ``default_code``; the code can still be overridden
    per instance.
    """

    default_code = MLKIT_ERROR_UNKNOWN

    OK = MLKIT_OK
    ERROR_UNKNOWN = MLKIT_ERROR_UNKNOWN
    ERROR_INTERNAL = MLKIT_ERROR_INTERNAL
    ERROR_INVALID_ARGUMENT = MLKIT_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = MLKIT_ERROR_DIMENSION_MISMATCH
    ERROR_TYPE_ERROR = MLKIT_ERROR_TYPE_ERROR
    ERROR_DISPATCH_AMBIGUITY = MLKIT_ERROR_DISPATCH_AMBIGUITY
    ERROR_MISSING_TRAITS = MLKIT_ERROR_MISSING_TRAITS
    ERROR_PARAMETER = MLKIT_ERROR_PARAMETER
    ERROR_UNKNOWN_PARAMETER = MLKIT_ERROR_UNKNOWN_PARAMETER
    ERROR_BACKEND_UNAVAILABLE = MLKIT_ERROR_BACKEND_UNAVAILABLE

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        """
        Create an mlkit exception.

        Args:
            message: Detailed message. Falls back to the text for ``code``.
            code: Error code. Falls back to the class ``default_code``.
        """
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"mlkit error {code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MLKitError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(msg, code)


class DimensionMismatchError(MLKitError, ValueError):
    """Paired input/output containers do not have the same shape."""

    default_code = MLKIT_ERROR_DIMENSION_MISMATCH


class DispatchAmbiguityError(MLKitError, TypeError):
    """A type resolves to zero or several value categories."""

    default_code = MLKIT_ERROR_DISPATCH_AMBIGUITY


class MissingPolicyTraitsError(MLKitError, TypeError):
    """An encoding policy has no registered traits."""

    default_code = MLKIT_ERROR_MISSING_TRAITS


class ParameterError(MLKitError, ValueError):
    """A parameter declaration or lookup is invalid."""

    default_code = MLKIT_ERROR_PARAMETER


class BackendError(MLKitError, RuntimeError):
    """The requested numeric backend cannot be used."""

    default_code = MLKIT_ERROR_BACKEND_UNAVAILABLE


# =============================================================================
# Error Checking Functions
# =============================================================================

def error_message(code: int) -> str:
    """Return the default message for an error code."""
    return _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")


def check_shape(expected, actual, context: str = "") -> None:
    """
    Check a container shape precondition.

    Args:
        expected: Shape the caller promised.
        actual: Shape actually supplied.
        context: Optional context for the error message.

    Raises:
        DimensionMismatchError: If the shapes differ.
    """
    expected = tuple(expected)
    actual = tuple(actual)
    if expected == actual:
        return

    msg = f"expected shape {expected}, got {actual}"
    if context:
        msg = f"{context}: {msg}"
    raise DimensionMismatchError(msg)


__all__ = [
    "MLKIT_OK",
    "MLKIT_ERROR_UNKNOWN",
    "MLKIT_ERROR_INTERNAL",
    "MLKIT_ERROR_INVALID_ARGUMENT",
    "MLKIT_ERROR_DIMENSION_MISMATCH",
    "MLKIT_ERROR_TYPE_ERROR",
    "MLKIT_ERROR_DISPATCH_AMBIGUITY",
    "MLKIT_ERROR_MISSING_TRAITS",
    "MLKIT_ERROR_PARAMETER",
    "MLKIT_ERROR_UNKNOWN_PARAMETER",
    "MLKIT_ERROR_BACKEND_UNAVAILABLE",
    "MLKitError",
    "DimensionMismatchError",
    "DispatchAmbiguityError",
    "MissingPolicyTraitsError",
    "ParameterError",
    "BackendError",
    "error_message",
    "check_shape",
]
