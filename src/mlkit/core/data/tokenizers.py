"""Tokenizers for string encoding.

A tokenizer is any callable taking one line of text and returning its
tokens in order.
"""

from __future__ import annotations

from typing import List

__all__ = ['SplitByAnyOf', 'CharExtract']


class SplitByAnyOf:
    """Split on any of the given delimiter characters; empty tokens are dropped.

    Example:
        >>> SplitByAnyOf(" ,")("a, b  c")
        ['a', 'b', 'c']
    """

    def __init__(self, delimiters: str):
        if not delimiters:
            raise ValueError("SplitByAnyOf needs at least one delimiter")
        self.delimiters = frozenset(delimiters)

    def __call__(self, text: str) -> List[str]:
        tokens = []
        start = 0
        for i, ch in enumerate(text):
            if ch in self.delimiters:
                if i > start:
                    tokens.append(text[start:i])
                start = i + 1
        if start < len(text):
            tokens.append(text[start:])
        return tokens

    def __repr__(self) -> str:
        return f"SplitByAnyOf({''.join(sorted(self.delimiters))!r})"


class CharExtract:
    """Every character is a token."""

    def __call__(self, text: str) -> List[str]:
        return list(text)

    def __repr__(self) -> str:
        return "CharExtract()"
