"""Geometry objects – the seven geometry kinds and the ``Geometry`` wrapper.

The coordinate payload lives on a *value* (one class per geometry kind)
while the wrapper carries what every GeoJSON object may carry: ``bbox``,
``crs`` and foreign members.

Usage::

    from geojson_core import Geometry, Point

    geometry = Geometry(Point([-120.66029, 35.2812]))
    geometry.to_dict()
    # {'type': 'Point', 'coordinates': [-120.66029, 35.2812]}
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Callable, ClassVar

from geojson_core import util
from geojson_core.crs import Crs
from geojson_core.exceptions import GeometryUnknownType
from geojson_core.types import Bbox, JsonObject, LineStringType, PolygonType, Position

# ---------------------------------------------------------------------------
# Geometry values
# ---------------------------------------------------------------------------


class Value:
    """Base of the seven geometry values.

    ``type_name`` is the GeoJSON ``type`` of the variant and ``payload_key``
    the member holding its payload.  Values hold lists and are unhashable.
    """

    __slots__ = ()

    type_name: ClassVar[str]
    payload_key: ClassVar[str] = "coordinates"

    def payload(self) -> list:
        """The JSON value stored under :attr:`payload_key`."""
        return copy.deepcopy(self.coordinates)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Point(Value):
    coordinates: Position
    type_name: ClassVar[str] = "Point"
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class MultiPoint(Value):
    coordinates: list[Position]
    type_name: ClassVar[str] = "MultiPoint"
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class LineString(Value):
    coordinates: LineStringType
    type_name: ClassVar[str] = "LineString"
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class MultiLineString(Value):
    coordinates: list[LineStringType]
    type_name: ClassVar[str] = "MultiLineString"
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Polygon(Value):
    """Linear rings – the exterior ring first, then any holes."""

    coordinates: PolygonType
    type_name: ClassVar[str] = "Polygon"
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class MultiPolygon(Value):
    coordinates: list[PolygonType]
    type_name: ClassVar[str] = "MultiPolygon"
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class GeometryCollection(Value):
    """Nested geometries, each a full :class:`Geometry` object."""

    geometries: list["Geometry"]
    type_name: ClassVar[str] = "GeometryCollection"
    payload_key: ClassVar[str] = "geometries"
    __hash__ = None  # type: ignore[assignment]

    def payload(self) -> list:
        return [g.to_dict() for g in self.geometries]


# type -> (value class, payload extractor)
_VALUE_PARSERS: dict[str, tuple[type[Value], Callable[[JsonObject], list]]] = {
    "Point": (Point, util.get_coords_one_pos),
    "MultiPoint": (MultiPoint, util.get_coords_1d_pos),
    "LineString": (LineString, util.get_coords_1d_pos),
    "MultiLineString": (MultiLineString, util.get_coords_2d_pos),
    "Polygon": (Polygon, util.get_coords_2d_pos),
    "MultiPolygon": (MultiPolygon, util.get_coords_3d_pos),
    "GeometryCollection": (GeometryCollection, util.get_geometries),
}

GEOMETRY_TYPES: frozenset[str] = frozenset(_VALUE_PARSERS)
"""The ``type`` strings of the seven geometry kinds."""


# ---------------------------------------------------------------------------
# Geometry wrapper
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Geometry:
    """A GeoJSON geometry object.

    Two geometries are equal when their values, ``bbox``, ``crs`` and
    foreign members (including member order) are equal.
    """

    value: Value
    bbox: Bbox | None = None
    crs: Crs | None = None
    foreign_members: JsonObject | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return (
            self.value == other.value
            and self.bbox == other.bbox
            and self.crs == other.crs
            and util.same_members(self.foreign_members, other.foreign_members)
        )

    @property
    def type_name(self) -> str:
        return self.value.type_name

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_dict(self) -> JsonObject:
        """Render as a JSON object.

        Members are emitted as ``crs``, ``bbox``, foreign members, ``type``
        and finally ``coordinates`` (or ``geometries``).
        """
        out = util.emit_common(self.crs, self.bbox, self.foreign_members)
        out["type"] = self.value.type_name
        out[self.value.payload_key] = self.value.payload()
        return out

    @classmethod
    def from_dict(cls, obj: JsonObject) -> "Geometry":
        """Parse a geometry object.

        Raises
        ------
        GeometryUnknownType
            If ``type`` is not one of the seven geometry kinds.
        ExpectedArrayValue, ExpectedF64Value, ExpectedProperty
            If the payload does not have the shape its kind requires.
        """
        geometry_type = util.type_of(obj)
        try:
            value_cls, extract = _VALUE_PARSERS[geometry_type]
        except KeyError:
            raise GeometryUnknownType() from None
        value = value_cls(extract(obj))

        reserved = ("type", value_cls.payload_key, "bbox", "crs")
        return cls(
            value=value,
            bbox=util.get_bbox(obj),
            crs=util.get_crs(obj),
            foreign_members=util.get_foreign_members(obj, reserved),
        )

    @property
    def __geo_interface__(self) -> JsonObject:
        return self.to_dict()
