"""Tests for services/encoder.py — GeoJSONEncoder."""

from __future__ import annotations

import json

import pytest
from shapely.geometry import LineString, Point


class TestGeoJSONEncoder:
    """Geometries and envelopes nested in ordinary JSON."""

    def test_nested_geometry(self):
        from geojson_codec.services.encoder import GeoJSONEncoder
        text = json.dumps({"site": Point(1, 2), "route": [LineString([(0, 0), (1, 1)])]}, cls=GeoJSONEncoder)
        assert json.loads(text) == {
            "site": {"type": "Point", "coordinates": [1, 2]},
            "route": [{"type": "LineString", "coordinates": [[0, 0], [1, 1]]}],
        }

    def test_feature_with_dict_properties(self):
        from geojson_codec.services.encoder import GeoJSONEncoder
        from geojson_codec.services.envelopes import Feature
        feature = Feature(geometry=Point(1, 2), properties={"origin": Point(0, 0)})
        node = json.loads(json.dumps(feature, cls=GeoJSONEncoder))
        assert node["type"] == "Feature"
        assert node["properties"]["origin"] == {"type": "Point", "coordinates": [0, 0]}

    def test_collection_with_property_encoder(self, animal_collection):
        from geojson_codec.services.encoder import GeoJSONEncoder
        text = json.dumps(
            {"layer": animal_collection},
            cls=GeoJSONEncoder,
            property_encoder=lambda p: p.model_dump(),
            separators=(",", ":"),
        )
        assert '"type":"FeatureCollection"' in text
        node = json.loads(text)
        assert [f["properties"]["name"] for f in node["layer"]["features"]] == ["Brutus", "Tweety"]

    def test_unknown_object(self):
        from geojson_codec.services.encoder import GeoJSONEncoder
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=GeoJSONEncoder)
