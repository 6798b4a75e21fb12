"""
Geometry codec.

Encodes shapely geometries to GeoJSON geometry objects and decodes them back:
- Point, LineString, LinearRing, MultiPoint, Polygon, MultiLineString,
  MultiPolygon -> {"type": ..., "coordinates": [...]}
- GeometryCollection -> {"type": "GeometryCollection", "geometries": [...]}

Coordinate nesting per kind comes from config.geometry_kinds.COORDINATE_DEPTH.
Coordinates are passed through as Python floats without rounding. Decoding is
structural only: rings are not closed or checked for validity.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional

from shapely.errors import ShapelyError
from shapely.geometry import GeometryCollection
from shapely.geometry.base import BaseGeometry

from geojson_codec.config.codec import CodecConfig, CODEC_CONFIG
from geojson_codec.config.geometry_kinds import COORDINATE_DEPTH, GEOMETRY_COLLECTION, RING_TYPES
from geojson_codec.services.dispatcher import TypeDispatcher
from geojson_codec.services.errors import MalformedCoordinates, UnknownGeometryType
from geojson_codec.services.json_io import dump_json, load_json
from geojson_codec.services.utils.geojson import build_geometry, shape_coordinates
from geojson_codec.services.validators import validate_coordinates

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def geometry_to_dict(geom: BaseGeometry) -> dict:
    """
    Encode a shapely geometry as a GeoJSON geometry object.

    Args:
        geom: Any shapely geometry of a supported kind

    Returns:
        Dict with "type" followed by "coordinates" (or "geometries")

    Raises:
        UnknownGeometryType: If the value is not a supported geometry
    """
    if not isinstance(geom, BaseGeometry):
        raise UnknownGeometryType(type(geom).__name__)

    kind = geom.geom_type
    if kind == GEOMETRY_COLLECTION:
        return {
            "type": GEOMETRY_COLLECTION,
            "geometries": [geometry_to_dict(child) for child in geom.geoms],
        }
    if kind not in COORDINATE_DEPTH:
        raise UnknownGeometryType(kind)

    return {"type": kind, "coordinates": shape_coordinates(geom)}


def encode_geometry(geom: BaseGeometry, config: Optional[CodecConfig] = None) -> str:
    """Encode a shapely geometry as GeoJSON text."""
    return dump_json(geometry_to_dict(geom), config)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _decode_shaped(kind: str, node: dict, path: str, config: CodecConfig) -> BaseGeometry:
    coordinates = validate_coordinates(
        node.get("coordinates"),
        COORDINATE_DEPTH[kind],
        path=f"{path}.coordinates",
        max_dimension=config.max_dimension,
        allow_nan=config.allow_nan,
        rings=kind in RING_TYPES,
    )
    try:
        return build_geometry(kind, coordinates)
    except (ValueError, TypeError, ShapelyError) as e:
        logger.warning(f"shapely rejected {kind} coordinates at {path}: {e}")
        raise MalformedCoordinates(f"Invalid {kind} coordinates: {e}", f"{path}.coordinates") from e


def _decode_collection(node: dict, path: str, config: CodecConfig) -> GeometryCollection:
    members = node.get("geometries")
    if not isinstance(members, list):
        raise MalformedCoordinates(
            "GeometryCollection needs a \"geometries\" array", f"{path}.geometries",
        )

    children = [
        geometry_from_dict(child, config, f"{path}.geometries[{i}]")
        for i, child in enumerate(members)
    ]
    return GeometryCollection(children) if children else GeometryCollection()


GEOMETRY_DISPATCHER = TypeDispatcher(
    "geometry",
    {
        **{kind: partial(_decode_shaped, kind) for kind in COORDINATE_DEPTH},
        GEOMETRY_COLLECTION: _decode_collection,
    },
    UnknownGeometryType,
)


def geometry_from_dict(node, config: Optional[CodecConfig] = None, path: str = "$") -> BaseGeometry:
    """
    Decode a GeoJSON geometry object into a shapely geometry.

    Args:
        node: Parsed JSON object
        config: Codec settings (defaults to CODEC_CONFIG)
        path: JSON path of the node, used in error messages

    Raises:
        UnknownGeometryType: Missing or unrecognised "type"
        MalformedCoordinates: Coordinates do not fit the geometry kind
    """
    return GEOMETRY_DISPATCHER.dispatch(node, path, config or CODEC_CONFIG)


def decode_geometry(text, config: Optional[CodecConfig] = None) -> BaseGeometry:
    """Decode GeoJSON text into a shapely geometry."""
    return geometry_from_dict(load_json(text), config)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def geometry_equals(a: BaseGeometry, b: BaseGeometry) -> bool:
    """
    Exact structural equality: same kind, same coordinates (z included) in
    the same order, and for collections the same children in order.
    """
    if a.geom_type != b.geom_type:
        return False
    if a.geom_type == GEOMETRY_COLLECTION:
        if len(a.geoms) != len(b.geoms):
            return False
        return all(geometry_equals(x, y) for x, y in zip(a.geoms, b.geoms))
    return shape_coordinates(a) == shape_coordinates(b)
