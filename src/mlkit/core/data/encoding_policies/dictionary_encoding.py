"""Dictionary encoding.

Each token is replaced by its integer index in the dictionary, exactly as
the word would be looked up in a dictionary; the dataset is treated as
categorical. Row ``i`` of the output holds the indices of the tokens of
input line ``i`` in order, padded with zeros to the longest line.
"""

from __future__ import annotations

import numpy as np

from mlkit.core.data.encoding_policies.policy_traits import (
    EncodingPolicy,
    PolicyTraits,
    zeros_matrix,
)

__all__ = ['DictionaryEncoding']


class DictionaryEncoding(EncodingPolicy):
    """Token-index encoding; one cell per token position."""

    traits = PolicyTraits(
        is_single_pass=True,
        is_multi_pass=False,
        output_with_no_padding=True,
    )

    @staticmethod
    def init_matrix(dataset_size: int, col_size: int, mappings_size: int, *,
                    sparse: bool = False, dtype=np.float64):
        """Zero matrix of ``dataset_size`` x ``col_size``.

        Args:
            dataset_size: Number of input lines.
            col_size: Maximum number of tokens in a line.
            mappings_size: Dictionary size (unused).
            sparse: Return a LIL sparse matrix instead of an ndarray.
            dtype: Element type.
        """
        return zeros_matrix(dataset_size, col_size, sparse=sparse, dtype=dtype)

    @staticmethod
    def encode(element, output, row: int, col: int) -> None:
        """Store the token index ``element`` at (row, col)."""
        output[row, col] = element
