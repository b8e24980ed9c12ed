"""Field extraction – typed accessors over decoded JSON objects.

Every accessor either returns a value of the requested Python type or raises
the matching :mod:`geojson_core.exceptions` error.  None of them mutate their
input.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable

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
from geojson_core.types import Bbox, JsonObject, LineStringType, PolygonType, Position

if TYPE_CHECKING:
    from geojson_core.crs import Crs
    from geojson_core.geometry import Geometry


# ---------------------------------------------------------------------------
# Primitive projections
# ---------------------------------------------------------------------------


def require(obj: JsonObject, key: str) -> Any:
    """Return ``obj[key]``, raising ``ExpectedProperty`` if it is missing."""
    try:
        return obj[key]
    except KeyError:
        raise ExpectedProperty(f"Expected a GeoJSON 'property': missing {key!r}.") from None


def as_string(value: Any) -> str:
    if not isinstance(value, str):
        raise ExpectedStringValue()
    return value


def as_array(value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise ExpectedArrayValue()
    return value


def as_object(value: Any) -> JsonObject:
    if not isinstance(value, dict):
        raise ExpectedObjectValue()
    return value


def is_number(value: Any) -> bool:
    """JSON numbers only – ``bool`` is an ``int`` subclass but not a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _finite_float(value: Any) -> float | None:
    """Convert a JSON number to ``float``; ``None`` if it is not representable."""
    if not is_number(value):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def as_f64(value: Any) -> float:
    result = _finite_float(value)
    if result is None:
        raise ExpectedF64Value()
    return result


def type_of(obj: JsonObject) -> str:
    """Return the ``type`` discriminator of *obj*."""
    return as_string(require(obj, "type"))


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


def json_to_position(value: Any) -> Position:
    return [as_f64(v) for v in as_array(value)]


def json_to_1d_positions(value: Any) -> LineStringType:
    return [json_to_position(v) for v in as_array(value)]


def json_to_2d_positions(value: Any) -> PolygonType:
    return [json_to_1d_positions(v) for v in as_array(value)]


def json_to_3d_positions(value: Any) -> list[PolygonType]:
    return [json_to_2d_positions(v) for v in as_array(value)]


def get_coords_one_pos(obj: JsonObject) -> Position:
    return json_to_position(require(obj, "coordinates"))


def get_coords_1d_pos(obj: JsonObject) -> LineStringType:
    return json_to_1d_positions(require(obj, "coordinates"))


def get_coords_2d_pos(obj: JsonObject) -> PolygonType:
    return json_to_2d_positions(require(obj, "coordinates"))


def get_coords_3d_pos(obj: JsonObject) -> list[PolygonType]:
    return json_to_3d_positions(require(obj, "coordinates"))


def get_geometries(obj: JsonObject) -> list["Geometry"]:
    """Parse every member of ``geometries`` as a full Geometry object."""
    from geojson_core.geometry import Geometry

    return [Geometry.from_dict(as_object(v)) for v in as_array(require(obj, "geometries"))]


# ---------------------------------------------------------------------------
# Optional members shared by every object kind
# ---------------------------------------------------------------------------


def get_bbox(obj: JsonObject) -> Bbox | None:
    value = obj.get("bbox")
    if value is None:
        return None
    if not isinstance(value, list):
        raise BboxExpectedArray()
    bbox = [_finite_float(v) for v in value]
    if None in bbox:
        raise BboxExpectedNumericValues()
    return bbox


def get_crs(obj: JsonObject) -> "Crs | None":
    from geojson_core.crs import Crs

    value = obj.get("crs")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise CrsExpectedObject()
    return Crs.from_dict(value)


def get_foreign_members(obj: JsonObject, reserved: Iterable[str]) -> JsonObject | None:
    """Return the members of *obj* not in *reserved*, in input order.

    ``None`` when nothing is left over.
    """
    reserved = frozenset(reserved)
    members = {k: v for k, v in obj.items() if k not in reserved}
    return members or None


def same_members(a: JsonObject | None, b: JsonObject | None) -> bool:
    """Order-sensitive comparison of two foreign-member maps."""
    if not a or not b:
        return not a and not b
    return list(a.items()) == list(b.items())


def emit_common(
    crs: "Crs | None",
    bbox: Bbox | None,
    foreign_members: JsonObject | None,
) -> JsonObject:
    """Start an output object with ``crs``, ``bbox`` and foreign members."""
    out: JsonObject = {}
    if crs is not None:
        out["crs"] = crs.to_dict()
    if bbox is not None:
        out["bbox"] = list(bbox)
    if foreign_members:
        out.update(foreign_members)
    return out
