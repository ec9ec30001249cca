"""Bag-of-words encoding.

Row ``i`` holds, for every dictionary entry ``j`` (0-based), the number of
times that token occurs in input line ``i``. The column count equals the
dictionary size, so the whole input must be scanned before the output can
be allocated.
"""

from __future__ import annotations

import numpy as np

from mlkit.core.data.encoding_policies.policy_traits import (
    EncodingPolicy,
    PolicyTraits,
    zeros_matrix,
)

__all__ = ['BagOfWordsEncoding']


class BagOfWordsEncoding(EncodingPolicy):
    """Token-count encoding; one column per dictionary entry."""

    traits = PolicyTraits(
        is_single_pass=False,
        is_multi_pass=True,
        output_with_no_padding=False,
    )

    @staticmethod
    def init_matrix(dataset_size: int, col_size: int, mappings_size: int, *,
                    sparse: bool = False, dtype=np.float64):
        """Zero matrix of ``dataset_size`` x ``mappings_size`` (col_size unused)."""
        return zeros_matrix(dataset_size, mappings_size, sparse=sparse, dtype=dtype)

    @staticmethod
    def encode(element, output, row: int, col: int) -> None:
        """Store the count ``element`` of dictionary entry ``col`` in line ``row``."""
        output[row, col] = element
