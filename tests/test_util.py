"""Tests for geojson_core.util field extraction."""

import pytest

from geojson_core import util
from geojson_core.crs import Named
from geojson_core.exceptions import (
    BboxExpectedArray,
    BboxExpectedNumericValues,
    CrsExpectedObject,
    ExpectedArrayValue,
    ExpectedF64Value,
    ExpectedObjectValue,
    ExpectedProperty,
    ExpectedStringValue,
)


class TestPrimitives:
    def test_require_present(self):
        assert util.require({"a": 1}, "a") == 1

    def test_require_missing(self):
        with pytest.raises(ExpectedProperty, match="'a'"):
            util.require({}, "a")

    def test_require_null_is_present(self):
        assert util.require({"a": None}, "a") is None

    @pytest.mark.parametrize(
        "func, value, error",
        [
            (util.as_string, 1, ExpectedStringValue),
            (util.as_array, {}, ExpectedArrayValue),
            (util.as_array, (1, 2), ExpectedArrayValue),
            (util.as_object, [], ExpectedObjectValue),
            (util.as_f64, "1.0", ExpectedF64Value),
            (util.as_f64, True, ExpectedF64Value),
            (util.as_f64, None, ExpectedF64Value),
        ],
    )
    def test_wrong_kind_raises(self, func, value, error):
        with pytest.raises(error):
            func(value)

    def test_as_f64_integer_beyond_double_range(self):
        with pytest.raises(ExpectedF64Value):
            util.as_f64(10**400)

    def test_as_f64_rejects_infinity(self):
        with pytest.raises(ExpectedF64Value):
            util.as_f64(float("inf"))

    def test_as_f64_converts_ints(self):
        value = util.as_f64(3)
        assert value == 3.0
        assert isinstance(value, float)

    def test_type_of(self):
        assert util.type_of({"type": "Point"}) == "Point"

    def test_type_of_missing(self):
        with pytest.raises(ExpectedProperty):
            util.type_of({"coordinates": [0, 0]})

    def test_type_of_not_string(self):
        with pytest.raises(ExpectedStringValue):
            util.type_of({"type": 7})


class TestCoordinates:
    def test_one_position(self):
        assert util.get_coords_one_pos({"coordinates": [1, 2.5]}) == [1.0, 2.5]

    def test_positions_nested(self):
        obj = {"coordinates": [[[[0, 0], [1, 1]]]]}
        assert util.get_coords_3d_pos(obj) == [[[[0.0, 0.0], [1.0, 1.0]]]]

    def test_too_deep_for_one_position(self):
        with pytest.raises(ExpectedF64Value):
            util.get_coords_one_pos({"coordinates": [[1, 2]]})

    def test_too_shallow_for_positions(self):
        with pytest.raises(ExpectedArrayValue):
            util.get_coords_1d_pos({"coordinates": [1, 2]})

    def test_empty_arrays_allowed(self):
        assert util.get_coords_2d_pos({"coordinates": []}) == []

    def test_oversized_integer_coordinate(self):
        with pytest.raises(ExpectedF64Value):
            util.get_coords_one_pos({"coordinates": [10**400, 0]})

    def test_missing_coordinates(self):
        with pytest.raises(ExpectedProperty):
            util.get_coords_1d_pos({"type": "LineString"})

    def test_geometries_must_be_objects(self):
        with pytest.raises(ExpectedObjectValue):
            util.get_geometries({"geometries": [[1, 2]]})


class TestOptionalMembers:
    def test_bbox_absent_or_null(self):
        assert util.get_bbox({}) is None
        assert util.get_bbox({"bbox": None}) is None

    def test_bbox_values(self):
        assert util.get_bbox({"bbox": [-10, -10, 10, 10]}) == [-10.0, -10.0, 10.0, 10.0]

    def test_bbox_not_array(self):
        with pytest.raises(BboxExpectedArray):
            util.get_bbox({"bbox": "0,0,1,1"})

    def test_bbox_non_numeric(self):
        with pytest.raises(BboxExpectedNumericValues):
            util.get_bbox({"bbox": [0, 0, "1", 1]})

    def test_bbox_integer_beyond_double_range(self):
        with pytest.raises(BboxExpectedNumericValues):
            util.get_bbox({"bbox": [0, 0, 10**400, 1]})

    def test_crs(self):
        obj = {"crs": {"type": "name", "properties": {"name": "EPSG:4326"}}}
        assert util.get_crs(obj) == Named(name="EPSG:4326")

    def test_crs_not_object(self):
        with pytest.raises(CrsExpectedObject):
            util.get_crs({"crs": "EPSG:4326"})

    def test_foreign_members_keep_order(self):
        obj = {"z": 1, "type": "Point", "a": 2, "coordinates": [0, 0], "m": 3}
        members = util.get_foreign_members(obj, ("type", "coordinates"))
        assert list(members) == ["z", "a", "m"]

    def test_foreign_members_none_when_empty(self):
        assert util.get_foreign_members({"type": "Point"}, ("type",)) is None

    def test_same_members_is_order_sensitive(self):
        assert util.same_members({"a": 1, "b": 2}, {"a": 1, "b": 2})
        assert not util.same_members({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert util.same_members(None, {})
        assert not util.same_members(None, {"a": 1})
