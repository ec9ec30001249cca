"""
Tests for error codes, exception classes and numeric helpers.
"""

import math

import pytest

from mlkit.core import error
from mlkit.core.error import (
    BackendError,
    DimensionMismatchError,
    DispatchAmbiguityError,
    MissingPolicyTraitsError,
    MLKitError,
    ParameterError,
    check_shape,
    error_message,
)
from mlkit.core.math import DBL_MAX, LOG_MAX, LOG_MIN, safe_divide, trunc_exp, trunc_log


# =============================================================================
# Exceptions
# =============================================================================

class TestExceptions:
    """Test MLKitError and its subclasses."""

    @pytest.mark.parametrize("cls,code,builtin", [
        (DimensionMismatchError, error.MLKIT_ERROR_DIMENSION_MISMATCH, ValueError),
        (DispatchAmbiguityError, error.MLKIT_ERROR_DISPATCH_AMBIGUITY, TypeError),
        (MissingPolicyTraitsError, error.MLKIT_ERROR_MISSING_TRAITS, TypeError),
        (ParameterError, error.MLKIT_ERROR_PARAMETER, ValueError),
        (BackendError, error.MLKIT_ERROR_BACKEND_UNAVAILABLE, RuntimeError),
    ])
    def test_default_codes(self, cls, code, builtin):
        exc = cls("detail")
        assert exc.code == code
        assert isinstance(exc, MLKitError)
        assert isinstance(exc, builtin)
        assert exc.message == "detail"
        assert str(exc) == f"mlkit error {code}: detail"

    def test_default_message(self):
        exc = MLKitError()
        assert exc.code == error.MLKIT_ERROR_UNKNOWN
        assert exc.message == "Unknown error"

    def test_code_override(self):
        exc = ParameterError("x", error.MLKIT_ERROR_UNKNOWN_PARAMETER)
        assert exc.code == MLKitError.ERROR_UNKNOWN_PARAMETER

    def test_from_code(self):
        exc = MLKitError.from_code(error.MLKIT_ERROR_INTERNAL, "encode")
        assert exc.message == "encode: Internal error"
        assert exc.code == error.MLKIT_ERROR_INTERNAL

    def test_error_message(self):
        assert error_message(error.MLKIT_OK) == "Success"
        assert "999" in error_message(999)


class TestCheckShape:
    """Test check_shape."""

    def test_equal(self):
        check_shape((2, 3), [2, 3])

    def test_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="output: expected shape"):
            check_shape((2, 3), (3, 2), context="output")


# =============================================================================
# Truncated Math
# =============================================================================

class TestTruncatedMath:
    """Test trunc_exp, trunc_log and safe_divide."""

    def test_trunc_exp(self):
        assert trunc_exp(0.0) == 1.0
        assert trunc_exp(1000.0) == DBL_MAX
        assert trunc_exp(-1000.0) == 0.0

    def test_trunc_log(self):
        assert trunc_log(1.0) == 0.0
        assert trunc_log(0.0) == LOG_MIN
        assert trunc_log(-1.0) == LOG_MIN
        assert trunc_log(math.inf) == LOG_MAX
        assert math.isnan(trunc_log(math.nan))

    def test_safe_divide(self):
        assert safe_divide(1.0, 4.0) == 0.25
        assert safe_divide(1.0, 0.0) == math.inf
        assert safe_divide(-1.0, 0.0) == -math.inf
        assert safe_divide(1.0, -0.0) == -math.inf
        assert math.isnan(safe_divide(0.0, 0.0))
