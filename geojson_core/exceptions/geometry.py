"""Errors for geometry objects and the metadata shared by all objects."""

from __future__ import annotations

from geojson_core.exceptions.general import GeoJsonError


class GeometryUnknownType(GeoJsonError):
    """The geometry ``type`` is not one of the seven geometry kinds."""

    message = "Encountered unknown 'geometry' object type."
    description = "unknown 'geometry' object type"


class BboxExpectedArray(GeoJsonError):
    """``bbox`` must be a JSON array."""

    message = "Encountered non-array type for a 'bbox' object."
    description = "non-array 'bbox' type"


class BboxExpectedNumericValues(GeoJsonError):
    """Every ``bbox`` member must be a finite number."""

    message = "Encountered non-numeric value within 'bbox' array."
    description = "non-numeric 'bbox' array"


class CrsExpectedObject(GeoJsonError):
    """``crs`` must be a JSON object."""

    message = "Encountered non-object type for a 'crs' object."
    description = "non-object 'crs' type"


class CrsUnknownType(GeoJsonError):
    """The CRS ``type`` is neither ``"name"`` nor ``"link"``."""

    description = "unknown 'crs' type"

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Encountered unknown type '{type_name}' for a 'crs' object.")
