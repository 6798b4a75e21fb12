"""Geometry kind tables for the GeoJSON codec."""

# Nesting depth of the "coordinates" array for each geometry tag.
# Depth 1 is a single position [x, y], depth 2 a list of positions, and so on.
# Both encode and decode read this table; GeometryCollection has no entry
# because it carries "geometries" instead of "coordinates".
COORDINATE_DEPTH: dict[str, int] = {
    "Point":           1,
    "LineString":      2,
    "LinearRing":      2,
    "MultiPoint":      2,
    "Polygon":         3,
    "MultiLineString": 3,
    "MultiPolygon":    4,
}

GEOMETRY_COLLECTION = "GeometryCollection"

# Every tag the geometry dispatcher accepts
GEOMETRY_TYPES: tuple[str, ...] = (*COORDINATE_DEPTH, GEOMETRY_COLLECTION)

FEATURE = "Feature"
FEATURE_COLLECTION = "FeatureCollection"

ENVELOPE_TYPES: tuple[str, ...] = (FEATURE, FEATURE_COLLECTION)

# Position arity: x, y and an optional z
MIN_DIMENSION = 2
MAX_DIMENSION = 3

# Kinds whose position lists are linear rings, and the smallest closed ring
RING_TYPES: tuple[str, ...] = ("LinearRing", "Polygon", "MultiPolygon")
MIN_RING_POSITIONS = 4
