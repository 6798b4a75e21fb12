"""
Feature and FeatureCollection envelopes.

A Feature pairs an optional geometry with an optional, caller-typed property
payload and an optional id. A FeatureCollection is an ordered sequence of
Features. Property payloads are encoded and decoded only through the
caller-supplied callables (see services.properties); the envelope never
inspects them.

Member order on output is fixed:
- Feature: type, id, geometry, properties
- FeatureCollection: type, features
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Real
from typing import ClassVar, Generic, Iterator, Optional, TypeVar, Union

from shapely.geometry.base import BaseGeometry

from geojson_codec.config.codec import CodecConfig, CODEC_CONFIG
from geojson_codec.config.geometry_kinds import FEATURE, FEATURE_COLLECTION
from geojson_codec.services.dispatcher import TypeDispatcher
from geojson_codec.services.errors import (
    InvalidFeatureId, MissingFeaturesArray, PropertyDecodeError, UnknownEnvelopeType,
)
from geojson_codec.services.geometry_codec import geometry_from_dict, geometry_to_dict
from geojson_codec.services.json_io import dump_json, load_json
from geojson_codec.services.properties import (
    MAPPING_PROPERTIES, PropertyDecoder, PropertyEncoder,
)

logger = logging.getLogger(__name__)

P = TypeVar("P")

FeatureId = Union[str, int, float]


@dataclass(frozen=True)
class Feature(Generic[P]):
    """A geometry with its property payload."""

    type: ClassVar[str] = FEATURE

    geometry: Optional[BaseGeometry] = None
    properties: Optional[P] = None
    id: Optional[FeatureId] = None


@dataclass(frozen=True)
class FeatureCollection(Generic[P]):
    """Ordered Features under one wrapper. Order is kept exactly as given."""

    type: ClassVar[str] = FEATURE_COLLECTION

    features: tuple[Feature[P], ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "features", tuple(self.features))

    def size(self) -> int:
        return len(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature[P]]:
        return iter(self.features)

    def __getitem__(self, index):
        return self.features[index]


def _check_id(value, path: str):
    # bool is a Real subclass but not a valid id
    if isinstance(value, bool) or not isinstance(value, (str, Real)):
        raise InvalidFeatureId(
            f"Feature id must be a string or number, got {type(value).__name__}", path,
        )
    return value


# ---------------------------------------------------------------------------
# Feature
# ---------------------------------------------------------------------------

def feature_to_dict(
    feature: Feature,
    property_encoder: Optional[PropertyEncoder] = None,
    config: Optional[CodecConfig] = None,
    path: str = "$",
) -> dict:
    """
    Encode a Feature as a GeoJSON Feature object.

    "id" is written only when set. An absent geometry or properties payload is
    written as null, or left out when config.emit_null_members is false.

    Args:
        feature: The Feature to encode
        property_encoder: Callable turning the payload into a JSON value
            (defaults to a plain dict copy)
        config: Codec settings (defaults to CODEC_CONFIG)
    """
    config = config or CODEC_CONFIG
    property_encoder = property_encoder or MAPPING_PROPERTIES.encode

    out: dict = {"type": FEATURE}
    if feature.id is not None:
        out["id"] = _check_id(feature.id, f"{path}.id")

    if feature.geometry is not None:
        out["geometry"] = geometry_to_dict(feature.geometry)
    elif config.emit_null_members:
        out["geometry"] = None

    if feature.properties is not None:
        out["properties"] = property_encoder(feature.properties)
    elif config.emit_null_members:
        out["properties"] = None

    return out


def _decode_feature(
    node: dict,
    path: str,
    property_decoder: Optional[PropertyDecoder],
    config: CodecConfig,
) -> Feature:
    property_decoder = property_decoder or MAPPING_PROPERTIES.decode

    feature_id = node.get("id")
    if feature_id is not None:
        _check_id(feature_id, f"{path}.id")

    geometry = None
    if node.get("geometry") is not None:
        geometry = geometry_from_dict(node["geometry"], config, f"{path}.geometry")

    properties = None
    if node.get("properties") is not None:
        try:
            properties = property_decoder(node["properties"])
        except Exception as e:
            logger.warning(f"Property decoder failed at {path}.properties: {e}")
            raise PropertyDecodeError(e, f"{path}.properties") from e

    return Feature(geometry=geometry, properties=properties, id=feature_id)


def _expect_type(node, expected: str, path: str):
    tag = node.get("type") if isinstance(node, dict) else None
    if tag != expected:
        raise UnknownEnvelopeType(tag, path, expected=expected)


def feature_from_dict(
    node,
    property_decoder: Optional[PropertyDecoder] = None,
    config: Optional[CodecConfig] = None,
    path: str = "$",
) -> Feature:
    """
    Decode a GeoJSON Feature object.

    A null or missing "geometry" / "properties" gives None; neither is an error.

    Raises:
        UnknownEnvelopeType: "type" is not "Feature"
        PropertyDecodeError: property_decoder raised (original error chained)
        InvalidFeatureId, UnknownGeometryType, MalformedCoordinates
    """
    _expect_type(node, FEATURE, path)
    return _decode_feature(node, path, property_decoder, config or CODEC_CONFIG)


def encode_feature(
    feature: Feature,
    property_encoder: Optional[PropertyEncoder] = None,
    config: Optional[CodecConfig] = None,
) -> str:
    """Encode a Feature as GeoJSON text."""
    return dump_json(feature_to_dict(feature, property_encoder, config), config)


def decode_feature(
    text,
    property_decoder: Optional[PropertyDecoder] = None,
    config: Optional[CodecConfig] = None,
) -> Feature:
    """Decode GeoJSON text holding a single Feature."""
    return feature_from_dict(load_json(text), property_decoder, config)


# ---------------------------------------------------------------------------
# FeatureCollection
# ---------------------------------------------------------------------------

def feature_collection_to_dict(
    collection: FeatureCollection,
    property_encoder: Optional[PropertyEncoder] = None,
    config: Optional[CodecConfig] = None,
) -> dict:
    """Encode a FeatureCollection, each Feature in its original order."""
    return {
        "type": FEATURE_COLLECTION,
        "features": [
            feature_to_dict(feature, property_encoder, config, f"$.features[{i}]")
            for i, feature in enumerate(collection.features)
        ],
    }


def _decode_collection(
    node: dict,
    path: str,
    property_decoder: Optional[PropertyDecoder],
    config: CodecConfig,
) -> FeatureCollection:
    members = node.get("features")
    if not isinstance(members, list):
        raise MissingFeaturesArray(
            "FeatureCollection needs a \"features\" array", f"{path}.features",
        )

    features = [
        feature_from_dict(member, property_decoder, config, f"{path}.features[{i}]")
        for i, member in enumerate(members)
    ]
    logger.debug(f"Decoded FeatureCollection with {len(features)} features at {path}")
    return FeatureCollection(features)


def feature_collection_from_dict(
    node,
    property_decoder: Optional[PropertyDecoder] = None,
    config: Optional[CodecConfig] = None,
    path: str = "$",
) -> FeatureCollection:
    """
    Decode a GeoJSON FeatureCollection object, keeping feature order.

    Raises:
        UnknownEnvelopeType: "type" is not "FeatureCollection", or a member
            is not a Feature
        MissingFeaturesArray: "features" is absent or not an array
    """
    _expect_type(node, FEATURE_COLLECTION, path)
    return _decode_collection(node, path, property_decoder, config or CODEC_CONFIG)


def encode_feature_collection(
    collection: FeatureCollection,
    property_encoder: Optional[PropertyEncoder] = None,
    config: Optional[CodecConfig] = None,
) -> str:
    """Encode a FeatureCollection as GeoJSON text."""
    return dump_json(feature_collection_to_dict(collection, property_encoder, config), config)


def decode_feature_collection(
    text,
    property_decoder: Optional[PropertyDecoder] = None,
    config: Optional[CodecConfig] = None,
) -> FeatureCollection:
    """Decode GeoJSON text holding a FeatureCollection."""
    return feature_collection_from_dict(load_json(text), property_decoder, config)


# ---------------------------------------------------------------------------
# Either envelope
# ---------------------------------------------------------------------------

ENVELOPE_DISPATCHER = TypeDispatcher(
    "envelope",
    {
        FEATURE: _decode_feature,
        FEATURE_COLLECTION: _decode_collection,
    },
    UnknownEnvelopeType,
)


def decode_envelope(
    text,
    property_decoder: Optional[PropertyDecoder] = None,
    config: Optional[CodecConfig] = None,
) -> Union[Feature, FeatureCollection]:
    """Decode GeoJSON text holding either a Feature or a FeatureCollection."""
    return ENVELOPE_DISPATCHER.dispatch(
        load_json(text), "$", property_decoder, config or CODEC_CONFIG,
    )
