"""Top-level GeoJSON documents – parse from text, render back to text.

Usage::

    from geojson_core import parse

    doc = parse('{"type": "Point", "coordinates": [1.1, 2.1], "foo": "bar"}')
    doc.geometry.value             # Point(coordinates=[1.1, 2.1])
    doc.geometry.foreign_members   # {'foo': 'bar'}
    doc.to_json()
    # '{"foo":"bar","type":"Point","coordinates":[1.1,2.1]}'
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Union

from geojson_core import util
from geojson_core.exceptions import GeoJsonExpectedObject, GeoJsonUnknownType, MalformedJson
from geojson_core.feature import Feature, FeatureCollection
from geojson_core.geometry import GEOMETRY_TYPES, Geometry
from geojson_core.types import JsonObject

logger = logging.getLogger(__name__)

GeoJsonObject = Union[Geometry, Feature, FeatureCollection]
"""Any of the three object families a document can hold."""

_COMPACT = (",", ":")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON compliant number")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"{text} is out of range for a double")
    return value


def decode(text: str | bytes) -> JsonObject:
    """Decode *text* into a JSON object.

    Raises
    ------
    MalformedJson
        If *text* is not strict JSON or its top-level value is not an object.
    """
    try:
        value = json.loads(text, parse_float=_parse_float, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedJson() from exc
    if not isinstance(value, dict):
        raise MalformedJson()
    return value


def _render(obj: JsonObject, **kwargs: Any) -> str:
    kwargs.setdefault("allow_nan", False)
    if "indent" not in kwargs:
        kwargs.setdefault("separators", _COMPACT)
    return json.dumps(obj, **kwargs)


class GeoJson:
    """A GeoJSON document: exactly one Geometry, Feature or FeatureCollection.

    ``GeoJson(value)`` wraps any of the three and always succeeds for them;
    :meth:`from_str` and :meth:`from_dict` dispatch on the ``type`` member.
    """

    __slots__ = ("_value",)

    def __init__(self, value: GeoJsonObject) -> None:
        if isinstance(value, GeoJson):
            value = value.value
        if not isinstance(value, (Geometry, Feature, FeatureCollection)):
            raise TypeError(
                "GeoJson expects a Geometry, Feature or FeatureCollection, "
                f"got {type(value).__name__}"
            )
        self._value = value

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def value(self) -> GeoJsonObject:
        """The wrapped Geometry, Feature or FeatureCollection."""
        return self._value

    @property
    def geometry(self) -> Geometry | None:
        return self._value if isinstance(self._value, Geometry) else None

    @property
    def feature(self) -> Feature | None:
        return self._value if isinstance(self._value, Feature) else None

    @property
    def feature_collection(self) -> FeatureCollection | None:
        return self._value if isinstance(self._value, FeatureCollection) else None

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, obj: Any) -> "GeoJson":
        """Build a document from an already decoded JSON object.

        Raises
        ------
        GeoJsonExpectedObject
            If *obj* is not a JSON object.
        GeoJsonUnknownType
            If ``type`` names none of the nine GeoJSON object types.
        """
        if not isinstance(obj, dict):
            raise GeoJsonExpectedObject()

        object_type = util.type_of(obj)
        logger.debug("Dispatching GeoJSON object of type %r", object_type)
        if object_type in GEOMETRY_TYPES:
            return cls(Geometry.from_dict(obj))
        if object_type == "Feature":
            return cls(Feature.from_dict(obj))
        if object_type == "FeatureCollection":
            return cls(FeatureCollection.from_dict(obj))
        raise GeoJsonUnknownType()

    @classmethod
    def from_str(cls, text: str | bytes) -> "GeoJson":
        """Parse a GeoJSON document from JSON text."""
        return cls.from_dict(decode(text))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> JsonObject:
        return self._value.to_dict()

    def to_json(self, **kwargs: Any) -> str:
        """Render as JSON text.

        Keyword arguments are forwarded to :func:`json.dumps`; output is
        compact unless ``indent`` is given.
        """
        return _render(self.to_dict(), **kwargs)

    @property
    def __geo_interface__(self) -> JsonObject:
        return self.to_dict()

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"GeoJson({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoJson):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]


# Module-level convenience functions.


def parse(text: str | bytes) -> GeoJson:
    """Parse a GeoJSON document from JSON text.

    Delegates to :meth:`GeoJson.from_str`.
    """
    return GeoJson.from_str(text)


def dumps(obj: GeoJson | GeoJsonObject, **kwargs: Any) -> str:
    """Render a document, or any of the three object families, as JSON text."""
    return GeoJson(obj).to_json(**kwargs)
