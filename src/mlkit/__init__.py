"""
MLKit - Machine Learning Kernel Library

Numerical kernels and binding helpers for machine learning methods:
- Activation functions (softplus, logistic, tanh, rectifier, identity)
- String encoding policies with per-policy traits
- Parameter registry with category-based printing
- Numeric backend facade (numpy, optionally cupy)

Example:
    >>> import numpy as np
    >>> import mlkit
    >>> from mlkit.methods.ann import SoftplusFunction
    >>>
    >>> SoftplusFunction.fn(1.0)
    1.3132616875182228
    >>> y = SoftplusFunction.fn(np.linspace(-5, 5, 11))
    >>>
    >>> # Temporarily change the linear-region threshold
    >>> with mlkit.config.local(kernel=mlkit.KernelConfig(softplus_threshold=20.0)):
    ...     SoftplusFunction.fn(30.0)
    30.0
"""

__version__ = "0.1.0"

from mlkit._config import (
    BackendConfig,
    EncodingConfig,
    KernelConfig,
    MLKitConfig,
    config,
    get_config,
    set_backend,
)
from mlkit.core.error import (
    BackendError,
    DimensionMismatchError,
    DispatchAmbiguityError,
    MissingPolicyTraitsError,
    MLKitError,
    ParameterError,
)
from mlkit.core.data import (
    BagOfWordsEncoding,
    DatasetInfo,
    DictionaryEncoding,
    PolicyTraits,
    StringEncoding,
    policy_traits,
)
from mlkit.core.util.params import Params
from mlkit.bindings import get_printable_param

__all__ = [
    # Version
    '__version__',
    # Configuration
    'config',
    'get_config',
    'set_backend',
    'MLKitConfig',
    'KernelConfig',
    'EncodingConfig',
    'BackendConfig',
    # Errors
    'MLKitError',
    'DimensionMismatchError',
    'DispatchAmbiguityError',
    'MissingPolicyTraitsError',
    'ParameterError',
    'BackendError',
    # Data
    'DatasetInfo',
    'PolicyTraits',
    'policy_traits',
    'DictionaryEncoding',
    'BagOfWordsEncoding',
    'StringEncoding',
    # Parameters
    'Params',
    'get_printable_param',
]
