"""
Pytest configuration and shared fixtures for mlkit tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import scipy.sparse as sp

import mlkit
from mlkit.core.util import backend as xb

try:
    import cupy  # noqa: F401
    HAS_CUPY = True
except ImportError:
    HAS_CUPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from (and leaves behind) the default configuration."""
    mlkit.config.reset()
    yield
    mlkit.config.reset()


@pytest.fixture(scope="session")
def requires_cupy():
    """Skip test if cupy is not available."""
    if not HAS_CUPY:
        pytest.skip("cupy not available")


@pytest.fixture
def numpy_backend():
    """The always-available numpy backend."""
    return xb.get_backend("numpy")


@pytest.fixture
def softplus_points():
    """Inputs covering the negative, central and linear regions of softplus."""
    return np.array([-50.0, -5.0, -1.0, 0.0, 0.5, 1.0, 10.0, 39.9, 40.0, 40.5, 100.0])


@pytest.fixture
def small_dense_matrix():
    """A 3x4 dense matrix with both zeros and non-zeros.

    Matrix:
    [[1, 0, 2, 0],
     [0, 3, 0, 4],
     [5, 0, 0, 6]]
    """
    return np.array([
        [1, 0, 2, 0],
        [0, 3, 0, 4],
        [5, 0, 0, 6]
    ], dtype=np.float64)


@pytest.fixture
def scipy_csr_matrix(small_dense_matrix):
    """The same 3x4 matrix in CSR format."""
    return sp.csr_matrix(small_dense_matrix)


@pytest.fixture
def corpus():
    """Small whitespace-separated corpus."""
    return [
        "the quick brown fox",
        "the lazy dog",
        "quick quick fox",
    ]


# =============================================================================
# Helper Functions
# =============================================================================

def assert_array_equal(a1, a2, rtol=1e-12, atol=0.0):
    """Assert two arrays are approximately equal."""
    if sp.issparse(a1):
        a1 = a1.toarray()
    if sp.issparse(a2):
        a2 = a2.toarray()
    np.testing.assert_allclose(np.asarray(a1), np.asarray(a2), rtol=rtol, atol=atol)


def sigmoid(y):
    """Reference logistic function for comparisons."""
    return 1.0 / (1.0 + np.exp(-np.asarray(y, dtype=np.float64)))
