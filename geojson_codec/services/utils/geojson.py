"""
Coordinate shaping helpers.

Converts between shapely geometries and the nested coordinate arrays of the
GeoJSON "coordinates" member: extraction of position lists from coordinate
sequences, per-kind nesting, and construction of geometries from validated
nested lists.
"""

from __future__ import annotations

import numpy as np
from shapely.geometry import (
    LinearRing, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)
from shapely.geometry.base import BaseGeometry


def extract_positions(coords) -> list[list[float]]:
    """
    Extract [x, y(, z)] position lists from a shapely coordinate sequence.

    Args:
        coords: shapely CoordinateSequence (or anything numpy can read as Nx2 / Nx3)

    Returns:
        List of positions as native Python floats
    """
    return np.asarray(coords, dtype=float).tolist()


def shape_coordinates(geom: BaseGeometry) -> list:
    """
    Build the nested "coordinates" array for a non-collection geometry.

    Point gives [x, y], LineString / LinearRing / MultiPoint a list of
    positions, Polygon / MultiLineString a list of position lists and
    MultiPolygon a list of polygons. Empty geometries give [].
    """
    if geom.is_empty:
        return []

    kind = geom.geom_type
    if kind == "Point":
        return extract_positions(geom.coords)[0]
    if kind in ("LineString", "LinearRing"):
        return extract_positions(geom.coords)
    if kind == "Polygon":
        rings = [geom.exterior, *geom.interiors]
        return [extract_positions(ring.coords) for ring in rings]
    if kind in ("MultiPoint", "MultiLineString", "MultiPolygon"):
        return [shape_coordinates(part) for part in geom.geoms]

    raise TypeError(f"No coordinate shape for geometry type {kind!r}")


def build_geometry(kind: str, coordinates: list) -> BaseGeometry:
    """
    Construct a shapely geometry of the given kind from validated coordinates.

    Raises whatever shapely raises for coordinates it cannot accept
    (for example a LineString with a single position).
    """
    if kind == "Point":
        return Point(coordinates) if coordinates else Point()
    if kind == "LineString":
        return LineString(coordinates)
    if kind == "LinearRing":
        return LinearRing(coordinates)
    if kind == "MultiPoint":
        return MultiPoint(coordinates) if coordinates else MultiPoint()
    if kind == "Polygon":
        return _make_polygon(coordinates)
    if kind == "MultiLineString":
        return MultiLineString(coordinates) if coordinates else MultiLineString()
    if kind == "MultiPolygon":
        if not coordinates:
            return MultiPolygon()
        return MultiPolygon([_make_polygon(rings) for rings in coordinates])

    raise TypeError(f"Cannot build geometry of type {kind!r} from coordinates")


def _make_polygon(rings: list) -> Polygon:
    if not rings:
        return Polygon()
    return Polygon(rings[0], rings[1:])
