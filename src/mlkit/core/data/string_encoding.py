"""
Generic string encoding driver.

``StringEncoding`` tokenizes lines of text, assigns every distinct token an
id in a ``StringEncodingDictionary`` (ids start at 1; 0 is the padding
value) and writes the result through an encoding policy. The policy's
traits select the loop:

    - single-pass policies: each line is turned into token ids as soon as it
      is read. Rows can be emitted immediately (``iter_encode``) or returned
      ragged when the policy allows output without padding.
    - multi-pass policies: the whole input is scanned to build the
      dictionary and the per-line token counts, and only then is the output
      allocated and filled.

Example:
    >>> enc = StringEncoding(DictionaryEncoding)
    >>> enc.encode(["a b", "b c d"], SplitByAnyOf(" "))
    array([[1., 2., 0.],
           [2., 3., 4.]])
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Dict, Iterable, Iterator, List, Optional

import numpy as np

from mlkit._config import config
from mlkit.core.data.encoding_policies import policy_traits

logger = logging.getLogger("mlkit.data")

__all__ = ['StringEncodingDictionary', 'StringEncoding']

Tokenizer = Callable[[str], List[str]]


class StringEncodingDictionary:
    """Token -> id mapping with ids assigned in order of first appearance."""

    def __init__(self):
        self._mapping: Dict[str, int] = {}
        self._tokens: List[str] = []

    def add_token(self, token: str) -> int:
        """Id of ``token``, assigning the next id if it is new."""
        value = self._mapping.get(token)
        if value is None:
            self._tokens.append(token)
            value = len(self._tokens)
            self._mapping[token] = value
        return value

    def has_token(self, token: str) -> bool:
        return token in self._mapping

    def value(self, token: str) -> int:
        """Id of a known token.

        Raises:
            KeyError: If the token was never added.
        """
        return self._mapping[token]

    def token(self, value: int) -> str:
        """Token with id ``value`` (ids start at 1)."""
        if not 1 <= value <= len(self._tokens):
            raise KeyError(f"No token with id {value}")
        return self._tokens[value - 1]

    @property
    def mapping(self) -> Dict[str, int]:
        return dict(self._mapping)

    @property
    def size(self) -> int:
        return len(self._tokens)

    def clear(self) -> None:
        self._mapping.clear()
        self._tokens.clear()

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: str) -> bool:
        return token in self._mapping


class StringEncoding:
    """Encode text with a fixed encoding policy.

    Args:
        policy: Encoding policy class (e.g. ``DictionaryEncoding``). Its
            traits are looked up immediately, so a policy without traits is
            rejected here rather than on first use.
        dictionary: Existing dictionary to extend. A new one by default.
    """

    def __init__(self, policy: type, dictionary: Optional[StringEncodingDictionary] = None):
        self.policy = policy
        self.traits = policy_traits(policy)
        self.dictionary = dictionary if dictionary is not None else StringEncodingDictionary()

    def reset(self) -> None:
        """Forget every token id assigned so far."""
        self.dictionary.clear()

    # -------------------------------------------------------------------------
    # Single pass
    # -------------------------------------------------------------------------

    def iter_encode(self, input: Iterable[str], tokenizer: Tokenizer) -> Iterator[List[int]]:
        """Yield the token ids of each line as it is read.

        Only valid for single-pass policies that allow unpadded output.
        """
        if not (self.traits.is_single_pass and self.traits.output_with_no_padding):
            raise ValueError(
                f"{self.policy.__name__} cannot emit rows before the whole "
                f"input has been scanned"
            )
        return (
            [self.dictionary.add_token(tok) for tok in tokenizer(line)]
            for line in input
        )

    def _encode_single_pass(self, lines, tokenizer, padded, sparse, dtype):
        rows = [[self.dictionary.add_token(tok) for tok in tokenizer(line)]
                for line in lines]

        if not padded:
            return rows

        col_size = max((len(r) for r in rows), default=0)
        output = self.policy.init_matrix(
            len(rows), col_size, self.dictionary.size, sparse=sparse, dtype=dtype,
        )
        for i, ids in enumerate(rows):
            for j, value in enumerate(ids):
                self.policy.encode(value, output, i, j)
        return output

    # -------------------------------------------------------------------------
    # Multi pass
    # -------------------------------------------------------------------------

    def _encode_multi_pass(self, lines, tokenizer, sparse, dtype):
        # First pass: complete the dictionary and count tokens per line.
        counts = [Counter(self.dictionary.add_token(tok) for tok in tokenizer(line))
                  for line in lines]
        max_tokens = max((sum(c.values()) for c in counts), default=0)

        output = self.policy.init_matrix(
            len(counts), max_tokens, self.dictionary.size, sparse=sparse, dtype=dtype,
        )
        for i, line_counts in enumerate(counts):
            for value, count in line_counts.items():
                self.policy.encode(count, output, i, value - 1)
        return output

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def encode(
        self,
        input: Iterable[str],
        tokenizer: Tokenizer,
        *,
        padded: bool = True,
        sparse: Optional[bool] = None,
        dtype=None,
    ):
        """Encode lines of text.

        Args:
            input: Lines of text.
            tokenizer: Callable splitting a line into tokens.
            padded: If False, return ragged ``list[list[int]]`` rows. Only
                allowed for policies whose traits permit output with no
                padding.
            sparse: Return a CSR matrix instead of an ndarray. Defaults to
                ``config.encoding.sparse_output``.
            dtype: Output element type. Defaults to ``config.encoding.dtype``.

        Returns:
            ndarray, scipy CSR matrix, or list of token-id lists.

        Raises:
            ValueError: If ``padded=False`` is requested from a policy that
                always pads.
        """
        if not padded and not self.traits.output_with_no_padding:
            raise ValueError(
                f"{self.policy.__name__} does not support output with no padding"
            )
        if sparse is None:
            sparse = config.encoding.sparse_output
        dtype = np.dtype(config.encoding.dtype if dtype is None else dtype)

        lines = list(input)
        logger.debug(
            "Encoding %d line(s) with %s (%s pass)",
            len(lines), self.policy.__name__,
            "single" if self.traits.is_single_pass else "multi",
        )

        if self.traits.is_single_pass:
            output = self._encode_single_pass(lines, tokenizer, padded, sparse, dtype)
        else:
            output = self._encode_multi_pass(lines, tokenizer, sparse, dtype)

        if sparse and padded:
            output = output.tocsr()
        logger.debug("Dictionary holds %d token(s)", self.dictionary.size)
        return output
