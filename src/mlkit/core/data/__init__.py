"""
Data handling: dataset dimension info, string encoding and serialization.
"""

from mlkit.core.data.dataset_mapper import Datatype, DatasetInfo
from mlkit.core.data.encoding_policies import (
    BagOfWordsEncoding,
    DictionaryEncoding,
    EncodingPolicy,
    PolicyTraits,
    policy_traits,
    register_policy_traits,
)
from mlkit.core.data.serialization import Archive, load_object, save_object
from mlkit.core.data.string_encoding import StringEncoding, StringEncodingDictionary
from mlkit.core.data.tokenizers import CharExtract, SplitByAnyOf

__all__ = [
    "Datatype",
    "DatasetInfo",
    "BagOfWordsEncoding",
    "DictionaryEncoding",
    "EncodingPolicy",
    "PolicyTraits",
    "policy_traits",
    "register_policy_traits",
    "Archive",
    "load_object",
    "save_object",
    "StringEncoding",
    "StringEncodingDictionary",
    "CharExtract",
    "SplitByAnyOf",
]
