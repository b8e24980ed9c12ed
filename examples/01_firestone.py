from geojson_core import Feature, GeoJson, Geometry, Point, parse
from geojson_core.conversion import to_shapely

# Parse a Feature and read it back through the typed model
doc = parse(
    """
    {
        "type": "Feature",
        "properties": {"name": "Firestone Grill"},
        "geometry": {"type": "Point", "coordinates": [-120.66029, 35.2812]},
        "marker-color": "#7e7e7e"
    }
    """
)

feature = doc.feature
print(f"Parsed {feature.get_property('name')!r} at {feature.geometry.value.coordinates}")
print(f"Foreign members kept: {feature.foreign_members}")

# Build the same Feature programmatically and render it
built = GeoJson(
    Feature(
        geometry=Geometry(Point([-120.66029, 35.2812])),
        properties={"name": "Firestone Grill"},
        foreign_members={"marker-color": "#7e7e7e"},
    )
)
print(built.to_json(indent=2))
print(f"Equal to parsed document: {built == doc}")

# Hand the geometry to shapely for geometric work
print(f"Buffered area: {to_shapely(feature.geometry).buffer(1.0).area:.3f}")
