"""Encoding policy traits.

Every encoding policy declares how a string-encoding driver has to iterate
over the input:

    - is_single_pass: output can be produced while scanning the input once;
      the column count does not depend on the final vocabulary.
    - is_multi_pass: the full vocabulary must be known before the output
      can be sized, so the driver scans everything first.
    - output_with_no_padding: the policy can emit ragged rows, so the
      driver may skip padding every row to the longest one.

Traits are bound to the policy class, never to an instance. A subclass of
``EncodingPolicy`` that does not declare its own ``traits`` is rejected when
the class statement executes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np
from scipy import sparse as sp

from mlkit.core.error import MissingPolicyTraitsError
from mlkit.core.util import backend as xb

__all__ = ['PolicyTraits', 'EncodingPolicy', 'policy_traits',
           'register_policy_traits', 'zeros_matrix']


@dataclass(frozen=True)
class PolicyTraits:
    """Iteration contract of one encoding policy.

    Raises:
        ValueError: Unless exactly one of the pass flags is true.
    """
    is_single_pass: bool
    is_multi_pass: bool
    output_with_no_padding: bool

    def __post_init__(self):
        if bool(self.is_single_pass) == bool(self.is_multi_pass):
            raise ValueError(
                "Exactly one of is_single_pass / is_multi_pass must be true "
                f"(got {self.is_single_pass}, {self.is_multi_pass})"
            )


_TRAITS: Dict[type, PolicyTraits] = {}


def register_policy_traits(policy: type, traits: PolicyTraits) -> None:
    """Bind traits to a policy class that does not derive from EncodingPolicy."""
    if not isinstance(traits, PolicyTraits):
        raise TypeError(f"traits must be PolicyTraits, got {type(traits).__name__}")
    _TRAITS[policy] = traits


def policy_traits(policy: Any) -> PolicyTraits:
    """Traits of a policy class (or of the class of a policy object).

    Raises:
        MissingPolicyTraitsError: If no traits were declared for the policy.
    """
    cls = policy if isinstance(policy, type) else type(policy)
    try:
        return _TRAITS[cls]
    except KeyError:
        raise MissingPolicyTraitsError(
            f"No PolicyTraits registered for encoding policy {cls.__name__}"
        ) from None


def zeros_matrix(rows: int, cols: int, *, sparse: bool = False, dtype=np.float64):
    """Zero-filled dense array or writable sparse (LIL) matrix."""
    if sparse:
        return sp.lil_matrix((rows, cols), dtype=dtype)
    return xb.zeros((rows, cols), dtype=dtype)


class EncodingPolicy:
    """Base of the stateless encoding policies.

    Subclasses provide two static methods and a ``traits`` class attribute:

        init_matrix(dataset_size, col_size, mappings_size, *, sparse, dtype)
            -> zero-filled output of the policy's shape
        encode(element, output, row, col)
            -> write ``element`` into output[row, col] only
    """

    traits: PolicyTraits

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        traits = cls.__dict__.get("traits")
        if not isinstance(traits, PolicyTraits):
            raise TypeError(
                f"Encoding policy {cls.__name__} must declare "
                f"'traits = PolicyTraits(...)'"
            )
        register_policy_traits(cls, traits)

    @staticmethod
    def init_matrix(dataset_size: int, col_size: int, mappings_size: int, *,
                    sparse: bool = False, dtype=np.float64):
        raise NotImplementedError

    @staticmethod
    def encode(element, output, row: int, col: int) -> None:
        output[row, col] = element
