"""
Structural validation of GeoJSON coordinate arrays.

Checks that a "coordinates" node has the nesting depth required by its
geometry kind and that every position is an array of 2 or 3 finite numbers.
Linear rings must be closed and hold at least 4 positions; they are never
repaired. No geometric checks are made (self-intersection, orientation, ...).
"""

from __future__ import annotations

import math
from numbers import Real

from geojson_codec.config.geometry_kinds import MIN_DIMENSION, MAX_DIMENSION, MIN_RING_POSITIONS
from geojson_codec.services.errors import MalformedCoordinates


def _is_number(value) -> bool:
    # bool is a subclass of int, but true/false are not coordinates
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_position(
    position,
    path: str = "$",
    max_dimension: int = MAX_DIMENSION,
    allow_nan: bool = False,
) -> list[float]:
    """
    Validate a single position.

    Args:
        position: Decoded JSON value expected to be [x, y] or [x, y, z]
        path: JSON path of the node, used in error messages
        max_dimension: Largest accepted arity
        allow_nan: Accept NaN / Infinity components

    Returns:
        The position as a list of floats

    Raises:
        MalformedCoordinates: If the position is not a valid numeric tuple
    """
    if not isinstance(position, list):
        raise MalformedCoordinates(
            f"Expected a position array, got {type(position).__name__}", path,
        )

    if not MIN_DIMENSION <= len(position) <= max_dimension:
        raise MalformedCoordinates(
            f"Position must have {MIN_DIMENSION} to {max_dimension} values, "
            f"got {len(position)}",
            path,
        )

    values = []
    for i, value in enumerate(position):
        if not _is_number(value):
            raise MalformedCoordinates(
                f"Position value must be a number, got {type(value).__name__}",
                f"{path}[{i}]",
            )
        try:
            value = float(value)
        except OverflowError as e:
            raise MalformedCoordinates(
                "Position value is too large for a double", f"{path}[{i}]",
            ) from e
        if not allow_nan and not math.isfinite(value):
            raise MalformedCoordinates(f"Position value must be finite, got {value}", f"{path}[{i}]")
        values.append(value)
    return values


def validate_coordinates(
    coordinates,
    depth: int,
    path: str = "$.coordinates",
    max_dimension: int = MAX_DIMENSION,
    allow_nan: bool = False,
    rings: bool = False,
) -> list:
    """
    Validate a coordinates array against the nesting depth of its geometry kind.

    Depth 1 is a single position, depth 2 a list of positions, depth 3 a list
    of position lists and depth 4 a list of those. An empty array is accepted
    at the top level only (an empty geometry). All positions in one geometry
    must share the same arity.

    With ``rings`` set, every position list (depth 2 level) is a linear ring:
    at least 4 positions with the first equal to the last. Rings are never
    closed or padded here.

    Returns:
        The coordinates as nested lists of floats

    Raises:
        MalformedCoordinates: On wrong nesting, arity, value types or bad rings
    """
    if coordinates is None:
        raise MalformedCoordinates("Geometry has no \"coordinates\" member", path)

    if isinstance(coordinates, list) and not coordinates:
        return []

    dimensions: set[int] = set()
    result = _validate_level(coordinates, depth, path, max_dimension, allow_nan, rings, dimensions)

    if len(dimensions) > 1:
        raise MalformedCoordinates(
            f"Mixed position dimensions {sorted(dimensions)} in one geometry", path,
        )
    return result


def _validate_level(node, depth, path, max_dimension, allow_nan, rings, dimensions):
    if depth == 1:
        position = validate_position(node, path, max_dimension, allow_nan)
        dimensions.add(len(position))
        return position

    if not isinstance(node, list):
        raise MalformedCoordinates(
            f"Expected an array nested {depth} levels deep, got {type(node).__name__}", path,
        )
    if not node:
        raise MalformedCoordinates("Nested coordinate array must not be empty", path)

    result = [
        _validate_level(child, depth - 1, f"{path}[{i}]", max_dimension, allow_nan, rings, dimensions)
        for i, child in enumerate(node)
    ]
    if rings and depth == 2:
        _check_ring(result, path)
    return result


def _check_ring(ring: list, path: str):
    if len(ring) < MIN_RING_POSITIONS:
        raise MalformedCoordinates(
            f"Linear ring needs at least {MIN_RING_POSITIONS} positions, got {len(ring)}", path,
        )
    if ring[0] != ring[-1]:
        raise MalformedCoordinates("Linear ring is not closed (first position != last)", path)
