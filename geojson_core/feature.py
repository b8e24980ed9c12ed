"""Feature and FeatureCollection objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from geojson_core import util
from geojson_core.crs import Crs
from geojson_core.exceptions import (
    ExpectedStringValue,
    FeatureInvalidGeometryValue,
    GeoJsonUnknownType,
    PropertiesExpectedObjectOrNull,
)
from geojson_core.geometry import Geometry
from geojson_core.types import Bbox, FeatureId, JsonObject

_FEATURE_MEMBERS = ("type", "geometry", "properties", "id", "bbox", "crs")
_COLLECTION_MEMBERS = ("type", "features", "bbox", "crs")


def _expect_type(obj: JsonObject, expected: str) -> None:
    if util.type_of(obj) != expected:
        raise GeoJsonUnknownType()


def _get_geometry(obj: JsonObject) -> Geometry | None:
    value = obj.get("geometry")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise FeatureInvalidGeometryValue()
    return Geometry.from_dict(value)


def _get_properties(obj: JsonObject) -> JsonObject | None:
    value = obj.get("properties")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise PropertiesExpectedObjectOrNull()
    return value


def _get_id(obj: JsonObject) -> FeatureId | None:
    value = obj.get("id")
    if value is None or isinstance(value, str) or util.is_number(value):
        return value
    raise ExpectedStringValue("Expected a string or numeric 'id' value.")


# ---------------------------------------------------------------------------
# Feature
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Feature:
    """A spatially bounded entity: an optional geometry plus free-form properties.

    ``geometry`` and ``properties`` are always written out, as ``null`` when
    unset; ``id`` only when set.
    """

    geometry: Geometry | None = None
    properties: JsonObject | None = None
    id: FeatureId | None = None
    bbox: Bbox | None = None
    crs: Crs | None = None
    foreign_members: JsonObject | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return (
            self.geometry == other.geometry
            and self.properties == other.properties
            and self.id == other.id
            and type(self.id) is type(other.id)
            and self.bbox == other.bbox
            and self.crs == other.crs
            and util.same_members(self.foreign_members, other.foreign_members)
        )

    def get_property(self, key: str, default: Any = None) -> Any:
        """Return ``properties[key]``, or *default* if absent."""
        if self.properties is None:
            return default
        return self.properties.get(key, default)

    def to_dict(self) -> JsonObject:
        out = util.emit_common(self.crs, self.bbox, self.foreign_members)
        out["type"] = "Feature"
        out["geometry"] = None if self.geometry is None else self.geometry.to_dict()
        out["properties"] = None if self.properties is None else dict(self.properties)
        if self.id is not None:
            out["id"] = self.id
        return out

    @classmethod
    def from_dict(cls, obj: JsonObject) -> "Feature":
        """Parse a Feature object.

        Raises
        ------
        GeoJsonUnknownType
            If ``type`` is not ``"Feature"``.
        FeatureInvalidGeometryValue
            If ``geometry`` is neither an object nor ``null``.
        PropertiesExpectedObjectOrNull
            If ``properties`` is neither an object nor ``null``.
        """
        _expect_type(obj, "Feature")
        return cls(
            geometry=_get_geometry(obj),
            properties=_get_properties(obj),
            id=_get_id(obj),
            bbox=util.get_bbox(obj),
            crs=util.get_crs(obj),
            foreign_members=util.get_foreign_members(obj, _FEATURE_MEMBERS),
        )

    @property
    def __geo_interface__(self) -> JsonObject:
        return self.to_dict()


# ---------------------------------------------------------------------------
# FeatureCollection
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class FeatureCollection:
    """An ordered sequence of features."""

    features: list[Feature] = field(default_factory=list)
    bbox: Bbox | None = None
    crs: Crs | None = None
    foreign_members: JsonObject | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureCollection):
            return NotImplemented
        return (
            self.features == other.features
            and self.bbox == other.bbox
            and self.crs == other.crs
            and util.same_members(self.foreign_members, other.foreign_members)
        )

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    def to_dict(self) -> JsonObject:
        out = util.emit_common(self.crs, self.bbox, self.foreign_members)
        out["type"] = "FeatureCollection"
        out["features"] = [f.to_dict() for f in self.features]
        return out

    @classmethod
    def from_dict(cls, obj: JsonObject) -> "FeatureCollection":
        """Parse a FeatureCollection object.

        ``features`` is required; the first feature that fails to parse
        aborts the whole collection.
        """
        _expect_type(obj, "FeatureCollection")
        features = [
            Feature.from_dict(util.as_object(f))
            for f in util.as_array(util.require(obj, "features"))
        ]
        return cls(
            features=features,
            bbox=util.get_bbox(obj),
            crs=util.get_crs(obj),
            foreign_members=util.get_foreign_members(obj, _COLLECTION_MEMBERS),
        )

    @property
    def __geo_interface__(self) -> JsonObject:
        return self.to_dict()
