"""Tests for geojson_core.crs."""

import pytest

from geojson_core.crs import Crs, Linked, Named
from geojson_core.exceptions import (
    CrsUnknownType,
    ExpectedObjectValue,
    GeoJsonError,
    ExpectedProperty,
    ExpectedStringValue,
)

CRS84 = "urn:ogc:def:crs:OGC:1.3:CRS84"


class TestNamedCrs:
    def test_parse(self):
        crs = Crs.from_dict({"type": "name", "properties": {"name": CRS84}})
        assert crs == Named(name=CRS84)

    def test_round_trip(self):
        obj = {"type": "name", "properties": {"name": CRS84}}
        assert Crs.from_dict(obj).to_dict() == obj

    def test_missing_name(self):
        with pytest.raises(ExpectedProperty):
            Crs.from_dict({"type": "name", "properties": {}})

    def test_name_not_string(self):
        with pytest.raises(ExpectedStringValue):
            Crs.from_dict({"type": "name", "properties": {"name": 4326}})


class TestLinkedCrs:
    def test_parse_with_type(self):
        crs = Crs.from_dict(
            {"type": "link", "properties": {"href": "http://example.com/crs/42", "type": "proj4"}}
        )
        assert crs == Linked(href="http://example.com/crs/42", link_type="proj4")

    def test_parse_without_type(self):
        crs = Crs.from_dict({"type": "link", "properties": {"href": "data.crs"}})
        assert crs == Linked(href="data.crs")
        assert crs.link_type is None

    def test_serialize_omits_missing_type(self):
        assert Linked(href="data.crs").to_dict() == {
            "type": "link",
            "properties": {"href": "data.crs"},
        }

    def test_serialize_with_type(self):
        assert Linked(href="data.crs", link_type="ogcwkt").to_dict() == {
            "type": "link",
            "properties": {"href": "data.crs", "type": "ogcwkt"},
        }

    def test_null_type_rejected(self):
        with pytest.raises(ExpectedStringValue):
            Crs.from_dict({"type": "link", "properties": {"href": "data.crs", "type": None}})

    def test_missing_href(self):
        with pytest.raises(ExpectedProperty):
            Crs.from_dict({"type": "link", "properties": {"type": "proj4"}})


class TestCrsErrors:
    def test_unknown_type_carries_name(self):
        with pytest.raises(CrsUnknownType, match="'epsg'") as info:
            Crs.from_dict({"type": "epsg", "properties": {"code": 4326}})
        assert info.value.type_name == "epsg"
        assert isinstance(info.value, GeoJsonError)

    def test_missing_properties(self):
        with pytest.raises(ExpectedProperty):
            Crs.from_dict({"type": "name"})

    def test_properties_not_object(self):
        with pytest.raises(ExpectedObjectValue):
            Crs.from_dict({"type": "name", "properties": CRS84})

    def test_named_and_linked_differ(self):
        assert Named(name="x") != Linked(href="x")
