"""
json.JSONEncoder that knows about geometries and envelopes.

Lets shapely geometries, Features and FeatureCollections appear anywhere in
an ordinary JSON document:

    json.dumps({"site": point, "area": feature}, cls=GeoJSONEncoder)
"""

from __future__ import annotations

import json

from shapely.geometry.base import BaseGeometry

from geojson_codec.services.envelopes import (
    Feature, FeatureCollection, feature_collection_to_dict, feature_to_dict,
)
from geojson_codec.services.geometry_codec import geometry_to_dict


class GeoJSONEncoder(json.JSONEncoder):
    """
    JSON encoder for shapely geometries, Feature and FeatureCollection.

    Feature properties go through ``property_encoder`` when given; otherwise
    they are left for the encoder to serialise as-is (so nested geometries
    and envelopes inside properties are handled too).
    """

    def __init__(self, *args, property_encoder=None, codec_config=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.property_encoder = property_encoder or _passthrough
        self.codec_config = codec_config

    def default(self, obj):
        if isinstance(obj, BaseGeometry):
            return geometry_to_dict(obj)
        if isinstance(obj, Feature):
            return feature_to_dict(obj, self.property_encoder, self.codec_config)
        if isinstance(obj, FeatureCollection):
            return feature_collection_to_dict(obj, self.property_encoder, self.codec_config)
        return super().default(obj)


def _passthrough(value):
    return value
