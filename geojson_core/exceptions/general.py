"""General GeoJSON errors – malformed documents and field extraction."""

from __future__ import annotations


class GeoJsonError(Exception):
    """Base class for every error raised while reading GeoJSON."""

    message = "Encountered invalid GeoJSON."
    description = "invalid GeoJSON"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MalformedJson(GeoJsonError):
    """The text is not JSON, or its top-level value is not an object."""

    message = "Encountered malformed JSON."
    description = "malformed JSON"


class GeoJsonExpectedObject(GeoJsonError):
    """A GeoJSON value was expected to be a JSON object."""

    message = "Encountered non-object type for GeoJSON."
    description = "non-object GeoJSON type"


class GeoJsonUnknownType(GeoJsonError):
    """The top-level ``type`` discriminator is not a GeoJSON object type."""

    message = "Encountered unknown GeoJSON object type."
    description = "unknown GeoJSON object type"


class ExpectedStringValue(GeoJsonError):
    """A string was expected."""

    message = "Expected a string value."
    description = "expected a string value"


class ExpectedProperty(GeoJsonError):
    """A required member is missing from a JSON object."""

    message = "Expected a GeoJSON 'property'."
    description = "expected a GeoJSON 'property'"


class ExpectedF64Value(GeoJsonError):
    """A JSON number representable as a finite double was expected."""

    message = "Expected a floating-point value."
    description = "expected a floating-point value"


class ExpectedArrayValue(GeoJsonError):
    """A JSON array was expected."""

    message = "Expected an array."
    description = "expected an array"


class ExpectedObjectValue(GeoJsonError):
    """A JSON object was expected."""

    message = "Expected an object."
    description = "expected an object"
