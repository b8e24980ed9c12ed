"""GeoDataFrame bridge – FeatureCollections to and from geopandas."""

from __future__ import annotations

import logging
from typing import Any, Protocol, Union, runtime_checkable

import geopandas as gpd

from geojson_core.conversion import from_pyproj, from_shapely, to_pyproj
from geojson_core.crs import Named
from geojson_core.feature import Feature, FeatureCollection
from geojson_core.geojson import GeoJson

logger = logging.getLogger(__name__)

DEFAULT_CRS = "EPSG:4326"
"""CRS assigned when neither the caller nor the document names one."""

FeatureSource = Union[GeoJson, FeatureCollection, Feature]


def _as_collection(source: FeatureSource) -> FeatureCollection:
    value = source.value if isinstance(source, GeoJson) else source
    if isinstance(value, FeatureCollection):
        return value
    if isinstance(value, Feature):
        return FeatureCollection(features=[value], crs=value.crs)
    raise TypeError(
        f"Expected a Feature or FeatureCollection, got {type(value).__name__}"
    )


@runtime_checkable
class GeoDataFrameConverter(Protocol):
    """Protocol for GeoDataFrame converters."""

    def to_geodataframe(
        self,
        source: FeatureSource,
        *,
        crs: Any | None = None,
    ) -> gpd.GeoDataFrame:
        ...

    def from_geodataframe(
        self,
        gdf: gpd.GeoDataFrame,
        *,
        drop_id: bool = False,
        include_crs: bool = True,
    ) -> FeatureCollection:
        ...


class DefaultGeoDataFrameConverter:
    """Default converter built on ``GeoDataFrame.from_features``."""

    def to_geodataframe(
        self,
        source: FeatureSource,
        *,
        crs: Any | None = None,
    ) -> gpd.GeoDataFrame:
        """Build a GeoDataFrame with one row per feature.

        Parameters
        ----------
        source : GeoJson | FeatureCollection | Feature
            Features to tabulate.  Property keys become columns.
        crs : Any | None
            Optional CRS to assign (e.g. ``"EPSG:3857"``).  If *None* the
            document's named CRS is used, falling back to :data:`DEFAULT_CRS`.
        """
        collection = _as_collection(source)

        if crs is None and isinstance(collection.crs, Named):
            crs = to_pyproj(collection.crs)
        if crs is None:
            crs = DEFAULT_CRS

        if not collection.features:
            return gpd.GeoDataFrame(geometry=[], crs=crs)

        gdf = gpd.GeoDataFrame.from_features(
            [f.to_dict() for f in collection.features]
        )
        gdf = gdf.set_crs(crs, allow_override=True)

        logger.debug("Built GeoDataFrame with %d rows", len(gdf))
        return gdf

    def from_geodataframe(
        self,
        gdf: gpd.GeoDataFrame,
        *,
        drop_id: bool = False,
        include_crs: bool = True,
    ) -> FeatureCollection:
        """Build a FeatureCollection from the rows of *gdf*.

        Non-geometry columns become properties; the index becomes each
        feature's ``id`` unless *drop_id* is set.
        """
        rows = gdf.iterfeatures(na="null", drop_id=drop_id)
        features = []
        for row, geom in zip(rows, gdf.geometry):
            features.append(
                Feature(
                    geometry=None if geom is None else from_shapely(geom),
                    properties=row["properties"],
                    id=row.get("id"),
                )
            )

        crs = None
        if include_crs and gdf.crs is not None:
            crs = from_pyproj(gdf.crs)

        logger.debug("Built FeatureCollection with %d features", len(features))
        return FeatureCollection(features=features, crs=crs)


# Module-level convenience functions using the default converter.
_default = DefaultGeoDataFrameConverter()


def to_geodataframe(source: FeatureSource, *, crs: Any | None = None) -> gpd.GeoDataFrame:
    """Convert features into a :class:`~geopandas.GeoDataFrame`.

    Delegates to :class:`DefaultGeoDataFrameConverter`.
    """
    return _default.to_geodataframe(source, crs=crs)


def from_geodataframe(
    gdf: gpd.GeoDataFrame,
    *,
    drop_id: bool = False,
    include_crs: bool = True,
) -> FeatureCollection:
    """Convert a :class:`~geopandas.GeoDataFrame` into a FeatureCollection.

    Delegates to :class:`DefaultGeoDataFrameConverter`.
    """
    return _default.from_geodataframe(gdf, drop_id=drop_id, include_crs=include_crs)
