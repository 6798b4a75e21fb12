"""Tests for services/properties.py — property payload codecs."""

from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass
class Tree:
    species: str
    height_m: float


class TestMappingProperties:
    """Test MAPPING_PROPERTIES."""

    def test_copies(self):
        from geojson_codec.services.properties import MAPPING_PROPERTIES
        source = {"a": 1}
        result = MAPPING_PROPERTIES.decode(source)
        assert result == source
        assert result is not source

    def test_rejects_non_mapping(self):
        from geojson_codec.services.properties import MAPPING_PROPERTIES
        with pytest.raises(TypeError):
            MAPPING_PROPERTIES.decode(["a"])


class TestModelProperties:
    """Test model_properties()."""

    def test_pydantic_model(self, animal_type):
        from geojson_codec.services.properties import model_properties
        codec = model_properties(animal_type)
        animal = codec.decode({"name": "Brutus", "age": 4})
        assert isinstance(animal, animal_type)
        assert codec.encode(animal) == {"name": "Brutus", "age": 4}

    def test_dataclass(self):
        from geojson_codec.services.properties import model_properties
        codec = model_properties(Tree)
        tree = codec.decode({"species": "spruce", "height_m": 21.5})
        assert tree == Tree("spruce", 21.5)
        assert codec.encode(tree) == {"species": "spruce", "height_m": 21.5}

    def test_invalid_payload(self):
        from pydantic import ValidationError
        from geojson_codec.services.properties import model_properties
        with pytest.raises(ValidationError):
            model_properties(Tree).decode({"species": "spruce"})

    def test_codec_is_cached(self):
        from geojson_codec.services.properties import model_properties
        assert model_properties(Tree) is model_properties(Tree)

    def test_feature_round_trip_with_dataclass(self):
        from shapely.geometry import Point
        from geojson_codec.services.envelopes import Feature, decode_feature, encode_feature
        from geojson_codec.services.properties import model_properties
        codec = model_properties(Tree)
        feature = Feature(geometry=Point(8.0, 58.15), properties=Tree("pine", 18.0), id="t1")
        result = decode_feature(encode_feature(feature, codec.encode), codec.decode)
        assert result == feature
