"""
Tests for value categories and printable parameter rendering.

Covers:
- Category resolution for each of the five categories
- Rejection of types matching zero or several categories
- get_printable_param for every category and the output slot
"""

from typing import List, Tuple

import pytest
import numpy as np
import numpy.typing as npt
import scipy.sparse as sp

from mlkit.bindings import get_printable_param
from mlkit.core.data import DatasetInfo
from mlkit.core.error import DispatchAmbiguityError, MLKitError, ParameterError
from mlkit.core.util.param_data import ParamData
from mlkit.core.util.type_traits import (
    ValueCategory,
    has_serialize,
    is_numeric_container_type,
    is_paired_matrix_type,
    is_sequence_type,
    type_name,
    value_category,
)


class Model:
    """Minimal serializable model."""

    def __init__(self, weight=0.0):
        self.weight = weight

    def serialize(self, archive, version):
        if archive.is_loading:
            self.weight = archive["weight"]
        else:
            archive["weight"] = self.weight


class SerializableList(list):
    """Both a sequence and serializable: no single category."""

    def serialize(self, archive, version):
        pass


class SerializableArray(np.ndarray):
    """Numeric containers take precedence over a serialize member."""

    def serialize(self, archive, version):
        pass


# =============================================================================
# Category Resolution
# =============================================================================

class TestValueCategory:
    """Test value_category and the predicates."""

    @pytest.mark.parametrize("tp", [int, float, str, bool, dict, tuple, Tuple[int, int]])
    def test_plain(self, tp):
        assert value_category(tp) is ValueCategory.PLAIN

    @pytest.mark.parametrize("tp", [list, list[int], List[str], list[float]])
    def test_sequence(self, tp):
        assert is_sequence_type(tp)
        assert value_category(tp) is ValueCategory.SEQUENCE

    @pytest.mark.parametrize("tp", [np.ndarray, npt.NDArray[np.float64], sp.csr_matrix,
                                    sp.csc_matrix, sp.csr_array])
    def test_numeric_container(self, tp):
        assert is_numeric_container_type(tp)
        assert value_category(tp) is ValueCategory.NUMERIC_CONTAINER

    @pytest.mark.parametrize("tp", [Model, DatasetInfo])
    def test_serializable(self, tp):
        assert has_serialize(tp)
        assert value_category(tp) is ValueCategory.SERIALIZABLE

    @pytest.mark.parametrize("tp", [tuple[DatasetInfo, np.ndarray],
                                    Tuple[DatasetInfo, np.ndarray]])
    def test_paired_matrix(self, tp):
        assert is_paired_matrix_type(tp)
        assert value_category(tp) is ValueCategory.PAIRED_MATRIX

    def test_other_tuples_are_not_paired(self):
        assert not is_paired_matrix_type(tuple[np.ndarray, DatasetInfo])
        assert not is_paired_matrix_type(tuple[DatasetInfo, np.ndarray, int])
        assert value_category(tuple[np.ndarray, DatasetInfo]) is ValueCategory.PLAIN

    def test_numeric_wins_over_serialize(self):
        assert value_category(SerializableArray) is ValueCategory.NUMERIC_CONTAINER

    def test_ambiguous_type_rejected(self):
        """A list subclass with serialize matches two categories."""
        with pytest.raises(DispatchAmbiguityError) as exc_info:
            value_category(SerializableList)
        assert "sequence" in str(exc_info.value)
        assert "serializable" in str(exc_info.value)
        assert exc_info.value.code == MLKitError.ERROR_DISPATCH_AMBIGUITY

    def test_ambiguity_is_type_error(self):
        with pytest.raises(TypeError):
            value_category(SerializableList)

    def test_categories_are_exclusive(self):
        """Every representative type resolves to exactly one category."""
        representatives = {
            int: ValueCategory.PLAIN,
            list[int]: ValueCategory.SEQUENCE,
            np.ndarray: ValueCategory.NUMERIC_CONTAINER,
            Model: ValueCategory.SERIALIZABLE,
            tuple[DatasetInfo, np.ndarray]: ValueCategory.PAIRED_MATRIX,
        }
        assert set(representatives.values()) == set(ValueCategory)
        for tp, category in representatives.items():
            assert value_category(tp) is category

    def test_type_name(self):
        assert type_name(int) == "int"
        assert type_name(list[int]) == "list[int]"
        assert type_name(List[int]) == "List[int]"


# =============================================================================
# Printable Rendering
# =============================================================================

class TestGetPrintableParam:
    """Test get_printable_param."""

    def test_plain_int(self):
        data = ParamData("k", py_type=int, value=5)
        assert get_printable_param(data) == "5"

    def test_plain_string(self):
        data = ParamData("name", py_type=str, value="abc")
        assert get_printable_param(data) == "abc"

    def test_plain_float(self):
        data = ParamData("lambda", py_type=float, value=0.5)
        assert get_printable_param(data) == "0.5"

    def test_plain_bool(self):
        data = ParamData("verbose", py_type=bool, value=True)
        assert get_printable_param(data) == "True"

    def test_sequence(self):
        data = ParamData("sizes", py_type=list[int], value=[1, 2, 3])
        assert get_printable_param(data) == "1 2 3"

    def test_empty_sequence(self):
        data = ParamData("sizes", py_type=list[int], value=[])
        assert get_printable_param(data) == ""

    def test_string_sequence(self):
        data = ParamData("labels", py_type=list[str], value=["a", "b"])
        assert get_printable_param(data) == "a b"

    def test_matrix_shows_filename(self):
        data = ParamData("input", py_type=np.ndarray, value=(np.zeros((3, 3)), "data.csv"))
        assert get_printable_param(data) == "data.csv"

    def test_sparse_matrix_shows_filename(self):
        data = ParamData("input", py_type=sp.csr_matrix,
                         value=(sp.csr_matrix((2, 2)), "sparse.mtx"))
        assert get_printable_param(data) == "sparse.mtx"

    def test_model_shows_filename(self):
        data = ParamData("model", py_type=Model, value=(Model(1.0), "model.bin"))
        assert get_printable_param(data) == "model.bin"

    def test_paired_matrix_shows_filename(self):
        value = ((DatasetInfo(2), np.zeros((2, 4))), "categorical.arff")
        data = ParamData("input", py_type=tuple[DatasetInfo, np.ndarray], value=value)
        assert get_printable_param(data) == "categorical.arff"

    def test_unset_filename_is_empty(self):
        data = ParamData("input", py_type=np.ndarray, value=(None, ""))
        assert get_printable_param(data) == ""

    def test_file_backed_value_must_be_pair(self):
        data = ParamData("input", py_type=np.ndarray, value=np.zeros(2))
        with pytest.raises(ParameterError):
            get_printable_param(data)

    def test_output_slot(self):
        """The rendered string is also written to the output slot."""
        data = ParamData("sizes", py_type=list[int], value=[4, 5])
        slot = ["stale", "values"]
        result = get_printable_param(data, None, slot)
        assert slot == ["4 5"]
        assert result == "4 5"

    def test_precomputed_category_is_used(self):
        data = ParamData("k", py_type=list[int], value=[1],
                         category=ValueCategory.PLAIN)
        assert get_printable_param(data) == "[1]"

    def test_ambiguous_declared_type(self):
        data = ParamData("odd", py_type=SerializableList, value=SerializableList())
        with pytest.raises(DispatchAmbiguityError):
            get_printable_param(data)
