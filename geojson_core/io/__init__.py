"""I/O sub-package – bridges to tabular geospatial libraries."""

from geojson_core.io.geodataframe import (
    DEFAULT_CRS,
    DefaultGeoDataFrameConverter,
    GeoDataFrameConverter,
    from_geodataframe,
    to_geodataframe,
)

__all__ = [
    "DEFAULT_CRS",
    "DefaultGeoDataFrameConverter",
    "GeoDataFrameConverter",
    "from_geodataframe",
    "to_geodataframe",
]
