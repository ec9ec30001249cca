"""Artificial neural network building blocks."""

from mlkit.methods.ann.activation_functions import (
    ActivationFunction,
    IdentityFunction,
    LogisticFunction,
    RectifierFunction,
    SoftplusFunction,
    TanhFunction,
    get_activation,
    list_activations,
)

__all__ = [
    "ActivationFunction",
    "IdentityFunction",
    "LogisticFunction",
    "RectifierFunction",
    "SoftplusFunction",
    "TanhFunction",
    "get_activation",
    "list_activations",
]
