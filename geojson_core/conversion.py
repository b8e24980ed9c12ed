"""Conversion between the typed model and shapely / pyproj objects."""

from __future__ import annotations

import logging
from typing import Any

import pyproj
from shapely import geometry as sg
from shapely.geometry.base import BaseGeometry

from geojson_core.crs import Crs, Linked, Named
from geojson_core.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Value,
)
from geojson_core.types import PolygonType, Position

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Typed model -> shapely
# ---------------------------------------------------------------------------


def _shapely_polygon(rings: PolygonType) -> sg.Polygon:
    if not rings:
        return sg.Polygon()
    return sg.Polygon(rings[0], rings[1:])


def to_shapely(geometry: Geometry | Value) -> BaseGeometry:
    """Convert a :class:`Geometry` (or a bare geometry value) to shapely.

    ``bbox``, ``crs`` and foreign members have no shapely counterpart and
    are dropped.
    """
    value = geometry.value if isinstance(geometry, Geometry) else geometry

    if isinstance(value, Point):
        return sg.Point(value.coordinates)
    if isinstance(value, MultiPoint):
        return sg.MultiPoint(value.coordinates)
    if isinstance(value, LineString):
        return sg.LineString(value.coordinates)
    if isinstance(value, MultiLineString):
        return sg.MultiLineString(value.coordinates)
    if isinstance(value, Polygon):
        return _shapely_polygon(value.coordinates)
    if isinstance(value, MultiPolygon):
        return sg.MultiPolygon([_shapely_polygon(p) for p in value.coordinates])
    if isinstance(value, GeometryCollection):
        return sg.GeometryCollection([to_shapely(g) for g in value.geometries])
    raise TypeError(f"Unsupported geometry value: {type(value).__name__}")


# ---------------------------------------------------------------------------
# shapely -> typed model
# ---------------------------------------------------------------------------


def _positions(coords: Any) -> list[Position]:
    return [[float(c) for c in xy] for xy in coords]


def _rings(polygon: sg.Polygon) -> PolygonType:
    if polygon.is_empty:
        return []
    return [_positions(polygon.exterior.coords)] + [
        _positions(ring.coords) for ring in polygon.interiors
    ]


def _value_from_shapely(geom: BaseGeometry) -> Value:
    geom_type = geom.geom_type

    if geom_type == "Point":
        if geom.is_empty:
            raise ValueError("An empty shapely Point has no GeoJSON position")
        return Point(_positions(geom.coords)[0])
    if geom_type == "MultiPoint":
        return MultiPoint([_positions(p.coords)[0] for p in geom.geoms])
    if geom_type in ("LineString", "LinearRing"):
        return LineString(_positions(geom.coords))
    if geom_type == "MultiLineString":
        return MultiLineString([_positions(line.coords) for line in geom.geoms])
    if geom_type == "Polygon":
        return Polygon(_rings(geom))
    if geom_type == "MultiPolygon":
        return MultiPolygon([_rings(p) for p in geom.geoms])
    if geom_type == "GeometryCollection":
        return GeometryCollection([from_shapely(g) for g in geom.geoms])
    raise TypeError(f"Unsupported shapely geometry type: {geom_type}")


def from_shapely(geom: BaseGeometry) -> Geometry:
    """Convert a shapely geometry to a :class:`Geometry`.

    Raises
    ------
    TypeError
        If *geom* is not a shapely geometry.
    ValueError
        If *geom* is an empty Point.
    """
    if not isinstance(geom, BaseGeometry):
        raise TypeError(f"Expected a shapely geometry, got {type(geom).__name__}")
    return Geometry(_value_from_shapely(geom))


# ---------------------------------------------------------------------------
# CRS <-> pyproj
# ---------------------------------------------------------------------------


def to_pyproj(crs: Crs) -> pyproj.CRS:
    """Resolve a named CRS with pyproj.

    Raises
    ------
    ValueError
        For a :class:`Linked` CRS – the referenced document is not fetched.
    pyproj.exceptions.CRSError
        If pyproj does not recognise the name.
    """
    if isinstance(crs, Linked):
        raise ValueError(f"Cannot resolve linked CRS {crs.href!r} without fetching it")
    if not isinstance(crs, Named):
        raise TypeError(f"Expected a Crs, got {type(crs).__name__}")
    logger.debug("Resolving named CRS %r", crs.name)
    return pyproj.CRS.from_user_input(crs.name)


def from_pyproj(crs: Any) -> Named:
    """Build a :class:`Named` CRS from anything pyproj accepts.

    Uses the ``AUTHORITY:CODE`` string when pyproj can determine one,
    otherwise the WKT.
    """
    resolved = pyproj.CRS.from_user_input(crs)
    authority = resolved.to_authority()
    if authority is not None:
        return Named(name=f"{authority[0]}:{authority[1]}")
    return Named(name=resolved.to_wkt())
