"""
Tests for the Params registry.
"""

import dataclasses
import logging

import pytest
import numpy as np

from mlkit.core.data import DatasetInfo
from mlkit.core.error import (
    DispatchAmbiguityError,
    MLKitError,
    ParameterError,
)
from mlkit.core.util.params import Params
from mlkit.core.util.type_traits import ValueCategory


class SerializableList(list):
    def serialize(self, archive, version):
        pass


@pytest.fixture
def params():
    """A registry with one parameter of each category."""
    p = Params("softplus_transform")
    p.add("threshold", float, "Linear region start.", alias="t", default=40.0)
    p.add("sizes", list[int], "Layer sizes.", default=[2, 3])
    p.add("input", np.ndarray, "Input matrix.", alias="i", required=True)
    p.add("info", DatasetInfo, "Dimension info.", input=False)
    p.add("dataset", tuple[DatasetInfo, np.ndarray], "Categorical dataset.")
    return p


# =============================================================================
# Declaration
# =============================================================================

class TestDeclaration:
    """Test Params.add."""

    def test_categories_resolved(self, params):
        assert params.param("threshold").category is ValueCategory.PLAIN
        assert params.param("sizes").category is ValueCategory.SEQUENCE
        assert params.param("input").category is ValueCategory.NUMERIC_CONTAINER
        assert params.param("info").category is ValueCategory.SERIALIZABLE
        assert params.param("dataset").category is ValueCategory.PAIRED_MATRIX

    def test_type_names(self, params):
        assert params.param("threshold").tname == "float"
        assert params.param("sizes").tname == "list[int]"

    def test_flags(self, params):
        data = params.param("input")
        assert data.required is True
        assert data.input is True
        assert data.was_passed is False
        assert params.param("info").input is False

    def test_descriptor_fields(self, params):
        """Descriptors carry only the fields the registry reads."""
        names = {f.name for f in dataclasses.fields(params.param("input"))}
        assert names == {"name", "desc", "py_type", "tname", "alias", "was_passed",
                         "required", "input", "value", "category"}

    def test_no_transpose_not_accepted(self):
        with pytest.raises(TypeError):
            Params().add("input", np.ndarray, no_transpose=True)

    def test_ambiguous_type_rejected_at_declaration(self):
        p = Params()
        with pytest.raises(DispatchAmbiguityError):
            p.add("odd", SerializableList)
        assert "odd" not in p

    def test_duplicate_name(self, params):
        with pytest.raises(ParameterError):
            params.add("threshold", int)

    def test_duplicate_alias(self, params):
        with pytest.raises(ParameterError):
            params.add("tolerance", float, alias="t")

    def test_alias_must_be_single_character(self):
        with pytest.raises(ParameterError):
            Params().add("threshold", float, alias="th")

    def test_empty_name(self):
        with pytest.raises(ParameterError):
            Params().add("", float)

    def test_len_and_iter(self, params):
        assert len(params) == 5
        assert list(params) == ["threshold", "sizes", "input", "info", "dataset"]


# =============================================================================
# Lookup and Update
# =============================================================================

class TestValues:
    """Test get/set and alias resolution."""

    def test_defaults(self, params):
        assert params.get("threshold") == 40.0
        assert params.get("sizes") == [2, 3]
        assert params.get("input") is None
        assert params.filename("input") == ""

    def test_alias_lookup(self, params):
        assert params.has("t")
        assert "i" in params
        assert params.param("t") is params.param("threshold")

    def test_unknown_parameter(self, params):
        with pytest.raises(ParameterError) as exc_info:
            params.get("missing")
        assert exc_info.value.code == MLKitError.ERROR_UNKNOWN_PARAMETER
        assert "softplus_transform" in str(exc_info.value)
        assert not params.has("missing")

    def test_set_plain(self, params):
        params.set("t", 20.0)
        assert params.get("threshold") == 20.0
        assert params.param("threshold").was_passed

    def test_set_file_backed(self, params):
        matrix = np.ones((2, 2))
        params.set("input", matrix, filename="x.csv")
        assert params.get("input") is matrix
        assert params.filename("input") == "x.csv"

    def test_set_keeps_previous_filename(self, params):
        params.set("input", np.ones(1), filename="x.csv")
        params.set("input", np.zeros(1))
        assert params.filename("input") == "x.csv"

    def test_filename_on_plain_rejected(self, params):
        with pytest.raises(ParameterError):
            params.set("threshold", 1.0, filename="t.txt")
        with pytest.raises(ParameterError):
            params.filename("threshold")

    def test_mark_passed(self, params):
        params.mark_passed("sizes")
        assert params.param("sizes").was_passed
        params.mark_passed("sizes", False)
        assert not params.param("sizes").was_passed

    def test_check_required(self, params):
        with pytest.raises(ParameterError, match="input"):
            params.check_required()
        params.set("input", np.zeros(1), filename="x.csv")
        params.check_required()


# =============================================================================
# Printing
# =============================================================================

class TestPrinting:
    """Test printable values and the summary."""

    def test_printable(self, params):
        params.set("input", np.zeros((3, 3)), filename="x.csv")
        params.set("info", DatasetInfo(2), filename="info.bin")
        params.set("dataset", (DatasetInfo(1), np.zeros((1, 1))), filename="d.arff")

        assert params.printable("threshold") == "40.0"
        assert params.printable("sizes") == "2 3"
        assert params.printable("input") == "x.csv"
        assert params.printable("info") == "info.bin"
        assert params.printable("dataset") == "d.arff"

    def test_summary_sorted(self, params):
        params.set("input", np.zeros((3, 3)), filename="x.csv")
        assert params.summary() == [
            "dataset: ",
            "info: ",
            "input: x.csv",
            "sizes: 2 3",
            "threshold: 40.0",
        ]

    def test_summary_logged(self, params, caplog):
        with caplog.at_level(logging.DEBUG, logger="mlkit.params"):
            params.summary()
        assert "threshold: 40.0" in caplog.text
