"""
Encoding policies for string encoding.

A policy decides the output shape (``init_matrix``) and how a single value
is written (``encode``). Its ``PolicyTraits`` tell the driver whether one
scan of the input is enough and whether ragged output is allowed.

Example:
    >>> out = DictionaryEncoding.init_matrix(5, 3, 0)
    >>> DictionaryEncoding.encode(7, out, 2, 1)
    >>> policy_traits(DictionaryEncoding).is_single_pass
    True
"""

from mlkit.core.data.encoding_policies.policy_traits import (
    EncodingPolicy,
    PolicyTraits,
    policy_traits,
    register_policy_traits,
    zeros_matrix,
)
from mlkit.core.data.encoding_policies.dictionary_encoding import DictionaryEncoding
from mlkit.core.data.encoding_policies.bag_of_words_encoding import BagOfWordsEncoding

__all__ = [
    "EncodingPolicy",
    "PolicyTraits",
    "policy_traits",
    "register_policy_traits",
    "zeros_matrix",
    "DictionaryEncoding",
    "BagOfWordsEncoding",
]
