"""Errors for Feature objects."""


from geojson_core.exceptions.general import GeoJsonError


class PropertiesExpectedObjectOrNull(GeoJsonError):
    """``properties`` must be a JSON object or ``null``."""

    message = "Encountered neither object type nor null type for 'properties' object."
    description = "neither object type nor null type for 'properties' object"


class FeatureInvalidGeometryValue(GeoJsonError):
    """A Feature's ``geometry`` must be a JSON object or ``null``."""

    message = (
        "Encountered neither object type nor null type for "
        "'geometry' field on 'feature' object."
    )
    description = "neither object type nor null type for 'geometry' field on 'feature' object"
