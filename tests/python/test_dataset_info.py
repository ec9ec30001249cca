"""
Tests for DatasetInfo and archive serialization.
"""

import pytest

from mlkit.core.data import Archive, DatasetInfo, Datatype, load_object, save_object
from mlkit._typing import Serializable


class TestDatasetInfo:
    """Test DatasetInfo mappings."""

    def test_starts_numeric(self):
        info = DatasetInfo(3)
        assert info.dimensionality == 3
        assert all(info.type(d) is Datatype.NUMERIC for d in range(3))

    def test_negative_dimensionality(self):
        with pytest.raises(ValueError):
            DatasetInfo(-1)

    def test_map_string(self):
        info = DatasetInfo(2)
        assert info.map_string("red", 1) == 0
        assert info.map_string("blue", 1) == 1
        assert info.map_string("red", 1) == 0
        assert info.num_mappings(1) == 2
        assert info.num_mappings(0) == 0

    def test_mapping_marks_categorical(self):
        info = DatasetInfo(2)
        info.map_string("a", 0)
        assert info.type(0) is Datatype.CATEGORICAL
        assert info.type(1) is Datatype.NUMERIC

    def test_dimensions_are_independent(self):
        info = DatasetInfo(2)
        info.map_string("x", 0)
        assert info.map_string("y", 1) == 0
        assert not info.has_mapping("x", 1)

    def test_unmap(self):
        info = DatasetInfo(1)
        info.map_string("red", 0)
        info.map_string("blue", 0)
        assert info.unmap_value("blue", 0) == 1
        assert info.unmap_string(1, 0) == "blue"
        assert info.unmap_string(1.0, 0) == "blue"

    def test_unmap_unknown(self):
        info = DatasetInfo(1)
        with pytest.raises(KeyError):
            info.unmap_value("red", 0)
        with pytest.raises(KeyError):
            info.unmap_string(0, 0)

    def test_unmapping_index_out_of_range(self):
        info = DatasetInfo(1)
        info.map_string("red", 0)
        with pytest.raises(IndexError):
            info.unmap_string(0, 0, unmapping_index=1)

    def test_dimension_out_of_range(self):
        info = DatasetInfo(1)
        with pytest.raises(IndexError):
            info.map_string("a", 1)
        with pytest.raises(IndexError):
            info.type(-1)

    def test_set_type(self):
        info = DatasetInfo(1)
        info.set_type(0, Datatype.CATEGORICAL)
        assert info.type(0) is Datatype.CATEGORICAL
        info.set_type(0, "numeric")
        assert info.type(0) is Datatype.NUMERIC

    def test_repr(self):
        info = DatasetInfo(2)
        info.map_string("a", 0)
        assert repr(info) == "DatasetInfo(dimensionality=2, categorical=1)"


class TestSerialization:
    """Test serialize through save_object / load_object."""

    def test_is_serializable(self):
        assert isinstance(DatasetInfo(1), Serializable)

    def test_save_and_load(self):
        info = DatasetInfo(3)
        info.map_string("red", 0)
        info.map_string("blue", 0)
        info.map_string("x", 2)

        state = save_object(info)
        assert state["types"] == ["categorical", "numeric", "categorical"]

        restored = load_object(DatasetInfo(), state)
        assert restored == info
        assert restored.unmap_string(1, 0) == "blue"
        assert restored.map_string("green", 0) == 2

    def test_archive_mode(self):
        assert Archive().is_loading is False
        assert Archive(loading=True, data={"a": 1})["a"] == 1
        assert "loading" in repr(Archive(loading=True))
