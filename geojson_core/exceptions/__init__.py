"""GeoJSON parse errors.

Every error raised while reading a document derives from
:class:`GeoJsonError`; the first structural violation aborts the parse.
"""

from geojson_core.exceptions.general import (
    ExpectedArrayValue,
    ExpectedF64Value,
    ExpectedObjectValue,
    ExpectedProperty,
    ExpectedStringValue,
    GeoJsonError,
    GeoJsonExpectedObject,
    GeoJsonUnknownType,
    MalformedJson,
)
from geojson_core.exceptions.geometry import (
    BboxExpectedArray,
    BboxExpectedNumericValues,
    CrsExpectedObject,
    CrsUnknownType,
    GeometryUnknownType,
)
from geojson_core.exceptions.feature import (
    FeatureInvalidGeometryValue,
    PropertiesExpectedObjectOrNull,
)

__all__ = [
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
