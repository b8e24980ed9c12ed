"""geojson-core – typed GeoJSON object model with strict parsing and round-trip serialization."""

from geojson_core.crs import Crs, Linked, Named
from geojson_core.exceptions import (
    BboxExpectedArray,
    BboxExpectedNumericValues,
    CrsExpectedObject,
    CrsUnknownType,
    ExpectedArrayValue,
    ExpectedF64Value,
    ExpectedObjectValue,
    ExpectedProperty,
    ExpectedStringValue,
    FeatureInvalidGeometryValue,
    GeoJsonError,
    GeoJsonExpectedObject,
    GeoJsonUnknownType,
    GeometryUnknownType,
    MalformedJson,
    PropertiesExpectedObjectOrNull,
)
from geojson_core.feature import Feature, FeatureCollection
from geojson_core.geojson import GeoJson, dumps, parse
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
from geojson_core.types import Bbox, Position

__all__ = [
    "GeoJson",
    "parse",
    "dumps",
    # Models
    "Geometry",
    "Value",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
    "Crs",
    "Named",
    "Linked",
    "Bbox",
    "Position",
    # Errors
    "GeoJsonError",
    "BboxExpectedArray",
    "BboxExpectedNumericValues",
    "CrsExpectedObject",
    "CrsUnknownType",
    "ExpectedArrayValue",
    "ExpectedF64Value",
    "ExpectedObjectValue",
    "ExpectedProperty",
    "ExpectedStringValue",
    "FeatureInvalidGeometryValue",
    "GeoJsonExpectedObject",
    "GeoJsonUnknownType",
    "GeometryUnknownType",
    "MalformedJson",
    "PropertiesExpectedObjectOrNull",
]

__version__ = "0.1.0"
