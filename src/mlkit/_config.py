"""
mlkit Config - Global Configuration System

Provides property-based configuration for the kernel layer. Settings can be
changed globally or overridden per thread inside a context manager, so
kernels and encoders never need extra keyword arguments to pick them up.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

logger = logging.getLogger("mlkit.config")


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass
class KernelConfig:
    """Configuration for numeric kernel functions."""
    softplus_threshold: float = 40.0   # Above this softplus is linear


@dataclass
class EncodingConfig:
    """Configuration for string encoding output."""
    dtype: str = "float64"
    sparse_output: bool = False


def _default_backend_name() -> str:
    return os.environ.get("MLKIT_BACKEND", "numpy").strip().lower() or "numpy"


@dataclass
class BackendConfig:
    """Configuration for the numeric backend facade."""
    name: str = ""

    def __post_init__(self):
        if not self.name:
            self.name = _default_backend_name()


# =============================================================================
# Global Configuration Manager
# =============================================================================

_SECTIONS = ("kernel", "encoding", "backend")


class MLKitConfig:
    """
    Global configuration manager for mlkit.

    Provides thread-local configuration with context manager support.

    Example:
        # Global configuration
        mlkit.config.kernel = KernelConfig(softplus_threshold=20.0)

        # Local configuration (context manager)
        with mlkit.config.local(encoding=EncodingConfig(sparse_output=True)):
            out = encoder.encode(docs, tokenizer)
        # Back to global config
    """

    def __init__(self):
        self._global_kernel = KernelConfig()
        self._global_encoding = EncodingConfig()
        self._global_backend = BackendConfig()

        # Thread-local storage for context overrides
        self._local = threading.local()

        self._callbacks: Dict[str, List[Callable]] = {name: [] for name in _SECTIONS}

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    def _current(self, name: str):
        value = getattr(self._local, name, None)
        if value is not None:
            return value
        return getattr(self, f"_global_{name}")

    @property
    def kernel(self) -> KernelConfig:
        """Get kernel configuration."""
        return self._current("kernel")

    @kernel.setter
    def kernel(self, value: KernelConfig):
        self._global_kernel = value
        self._notify("kernel", value)

    @property
    def encoding(self) -> EncodingConfig:
        """Get encoding configuration."""
        return self._current("encoding")

    @encoding.setter
    def encoding(self, value: EncodingConfig):
        self._global_encoding = value
        self._notify("encoding", value)

    @property
    def backend(self) -> BackendConfig:
        """Get backend configuration."""
        return self._current("backend")

    @backend.setter
    def backend(self, value: BackendConfig):
        self._global_backend = value
        logger.info("Numeric backend set to %r", value.name)
        self._notify("backend", value)

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def softplus_threshold(self) -> float:
        """Threshold above which softplus is treated as linear."""
        return self.kernel.softplus_threshold

    @softplus_threshold.setter
    def softplus_threshold(self, value: float):
        self._global_kernel.softplus_threshold = float(value)

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (kernel, encoding, backend)

        Returns:
            Context manager
        """
        unknown = set(kwargs) - set(_SECTIONS)
        if unknown:
            raise TypeError(f"Unknown configuration sections: {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs) -> Dict[str, Any]:
        """Apply overrides; return the overrides they replace."""
        previous = {}
        for key, value in kwargs.items():
            if value is not None:
                previous[key] = getattr(self._local, key, None)
                setattr(self._local, key, value)
        return previous

    def _restore_local(self, previous: Dict[str, Any]):
        for key, value in previous.items():
            setattr(self._local, key, value)

    # -------------------------------------------------------------------------
    # Callback Registration
    # -------------------------------------------------------------------------

    def on_change(self, config_name: str, callback: Callable):
        """
        Register callback for configuration changes.

        Args:
            config_name: Name of config ("kernel", "encoding", "backend")
            callback: Function to call when config changes
        """
        if config_name not in self._callbacks:
            raise KeyError(f"Unknown configuration section: {config_name}")
        self._callbacks[config_name].append(callback)

    def _notify(self, config_name: str, value: Any):
        for callback in self._callbacks.get(config_name, []):
            callback(value)

    # -------------------------------------------------------------------------
    # Reset / Serialization
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_kernel = KernelConfig()
        self._global_encoding = EncodingConfig()
        self._global_backend = BackendConfig()

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "kernel": {
                "softplus_threshold": self.kernel.softplus_threshold,
            },
            "encoding": {
                "dtype": self.encoding.dtype,
                "sparse_output": self.encoding.sparse_output,
            },
            "backend": {
                "name": self.backend.name,
            },
        }

    def __repr__(self) -> str:
        return f"MLKitConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: MLKitConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._previous: Dict[str, Any] = {}

    def __enter__(self):
        self._previous = self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Restore the enclosing override (or None) so nested contexts unwind
        self._config._restore_local(self._previous)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = MLKitConfig()


def get_config() -> MLKitConfig:
    """Get the global configuration instance."""
    return config


def set_backend(name: str):
    """Select the numeric backend used by ``mlkit.core.util.backend``."""
    config.backend = BackendConfig(name=name.strip().lower())


__all__ = [
    "KernelConfig",
    "EncodingConfig",
    "BackendConfig",
    "MLKitConfig",
    "config",
    "get_config",
    "set_backend",
]
