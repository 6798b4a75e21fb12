"""
GeoJSON codec for shapely geometries and typed Feature envelopes.

Geometries:
- encode_geometry / decode_geometry: shapely geometry <-> GeoJSON text
- geometry_to_dict / geometry_from_dict: same, on parsed JSON objects

Envelopes (properties go through caller-supplied encoder/decoder callables):
- encode_feature / decode_feature
- encode_feature_collection / decode_feature_collection
- decode_envelope: Feature or FeatureCollection, chosen by "type"

Errors are GeoJSONError subclasses carrying the JSON path of the bad node.
"""

from geojson_codec.config import CodecConfig, CODEC_CONFIG
from geojson_codec.services.errors import (
    GeoJSONError, MalformedJSON, UnknownGeometryType, UnknownEnvelopeType,
    MalformedCoordinates, MissingFeaturesArray, PropertyDecodeError, InvalidFeatureId,
)
from geojson_codec.services.geometry_codec import (
    geometry_to_dict, geometry_from_dict, encode_geometry, decode_geometry, geometry_equals,
)
from geojson_codec.services.envelopes import (
    Feature, FeatureCollection,
    feature_to_dict, feature_from_dict, encode_feature, decode_feature,
    feature_collection_to_dict, feature_collection_from_dict,
    encode_feature_collection, decode_feature_collection,
    decode_envelope,
)
from geojson_codec.services.properties import PropertyCodec, MAPPING_PROPERTIES, model_properties
from geojson_codec.services.encoder import GeoJSONEncoder

encode = encode_geometry
decode = decode_geometry

__all__ = [
    "CodecConfig", "CODEC_CONFIG",
    "GeoJSONError", "MalformedJSON", "UnknownGeometryType", "UnknownEnvelopeType",
    "MalformedCoordinates", "MissingFeaturesArray", "PropertyDecodeError", "InvalidFeatureId",
    "geometry_to_dict", "geometry_from_dict", "encode_geometry", "decode_geometry",
    "geometry_equals", "encode", "decode",
    "Feature", "FeatureCollection",
    "feature_to_dict", "feature_from_dict", "encode_feature", "decode_feature",
    "feature_collection_to_dict", "feature_collection_from_dict",
    "encode_feature_collection", "decode_feature_collection",
    "decode_envelope",
    "PropertyCodec", "MAPPING_PROPERTIES", "model_properties",
    "GeoJSONEncoder",
]
