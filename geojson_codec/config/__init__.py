"""
Codec configuration package.

Re-exports configuration values from sub-modules so that
``from geojson_codec.config import X`` works for all of them.

Configuration is split into focused modules:
- geometry_kinds: COORDINATE_DEPTH, RING_TYPES, GEOMETRY_TYPES, ENVELOPE_TYPES, tag names
- codec: CodecConfig, CODEC_CONFIG (env-loaded rendering/strictness options)
"""

# Geometry / envelope tags and the coordinate shape table
from geojson_codec.config.geometry_kinds import (
    COORDINATE_DEPTH, GEOMETRY_COLLECTION, GEOMETRY_TYPES,
    FEATURE, FEATURE_COLLECTION, ENVELOPE_TYPES,
    MIN_DIMENSION, MAX_DIMENSION,
    RING_TYPES, MIN_RING_POSITIONS,
)

# Serialization settings
from geojson_codec.config.codec import CodecConfig, CODEC_CONFIG
