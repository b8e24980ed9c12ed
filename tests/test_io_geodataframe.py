"""Tests for the GeoDataFrame bridge."""

import geopandas as gpd
from shapely.geometry import Point as ShapelyPoint

from geojson_core import Feature, FeatureCollection, Geometry, Named, Point, dumps, parse
from geojson_core.io import (
    DEFAULT_CRS,
    DefaultGeoDataFrameConverter,
    GeoDataFrameConverter,
    from_geodataframe,
    to_geodataframe,
)

COLLECTION = """
{
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [10, 50]},
            "properties": {"name": "A"}
        },
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [11, 51]},
            "properties": {"name": "B"}
        }
    ]
}
"""


class TestToGeoDataFrame:
    def test_from_document(self):
        gdf = to_geodataframe(parse(COLLECTION))
        assert isinstance(gdf, gpd.GeoDataFrame)
        assert len(gdf) == 2
        assert list(gdf["name"]) == ["A", "B"]
        assert gdf.crs == DEFAULT_CRS

    def test_with_crs_override(self):
        feature = Feature(geometry=Geometry(Point([0.0, 0.0])), properties={})
        gdf = to_geodataframe(feature, crs="EPSG:3857")
        assert gdf.crs.to_epsg() == 3857

    def test_document_crs_used(self):
        collection = parse(COLLECTION).feature_collection
        collection = FeatureCollection(
            features=collection.features, crs=Named(name="EPSG:3857")
        )
        gdf = to_geodataframe(collection)
        assert gdf.crs.to_epsg() == 3857

    def test_empty_collection(self):
        gdf = to_geodataframe(FeatureCollection())
        assert len(gdf) == 0
        assert gdf.crs == DEFAULT_CRS


class TestFromGeoDataFrame:
    def _gdf(self):
        return gpd.GeoDataFrame(
            {"name": ["A", "B"], "value": [1, 2]},
            geometry=[ShapelyPoint(10, 50), ShapelyPoint(11, 51)],
            crs="EPSG:4326",
        )

    def test_features(self):
        collection = from_geodataframe(self._gdf())
        assert len(collection) == 2
        first = collection.features[0]
        assert first.geometry == Geometry(Point([10.0, 50.0]))
        assert first.properties == {"name": "A", "value": 1}
        assert first.id == "0"
        assert collection.crs == Named(name="EPSG:4326")

    def test_drop_id_and_crs(self):
        collection = from_geodataframe(self._gdf(), drop_id=True, include_crs=False)
        assert all(f.id is None for f in collection)
        assert collection.crs is None

    def test_round_trips_through_text(self):
        collection = from_geodataframe(self._gdf())
        assert parse(dumps(collection)).feature_collection == collection


class TestProtocol:
    def test_default_converter_satisfies_protocol(self):
        assert isinstance(DefaultGeoDataFrameConverter(), GeoDataFrameConverter)
