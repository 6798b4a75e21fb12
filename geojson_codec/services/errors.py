"""
Codec error types.

Every decode failure is raised as a subclass of GeoJSONError, which is also
a ValueError. Each error records the JSON path of the offending node
(``$``, ``$.geometry.coordinates[0][1]``, ``$.features[2].properties``)
so malformed external input can be traced back to its source.
"""

from __future__ import annotations

from typing import Optional


class GeoJSONError(ValueError):
    """Base class for all codec errors."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{message} (at {path})")


class MalformedJSON(GeoJSONError):
    """The input text is not JSON, or its top level is not an object."""


class UnknownGeometryType(GeoJSONError):
    """A geometry node has a missing or unrecognised "type" tag."""

    def __init__(self, type_tag, path: str = "$"):
        self.type_tag = type_tag
        if type_tag is None:
            message = "Geometry has no \"type\" member"
        else:
            message = f"Unknown geometry type {type_tag!r}"
        super().__init__(message, path)


class UnknownEnvelopeType(GeoJSONError):
    """A top-level node is not the expected Feature / FeatureCollection."""

    def __init__(self, type_tag, path: str = "$", expected: Optional[str] = None):
        self.type_tag = type_tag
        self.expected = expected
        if expected:
            message = f"Expected type {expected!r}, got {type_tag!r}"
        else:
            message = f"Unknown envelope type {type_tag!r}"
        super().__init__(message, path)


class MalformedCoordinates(GeoJSONError):
    """Coordinate nesting depth or position arity does not fit the geometry kind."""


class MissingFeaturesArray(GeoJSONError):
    """A FeatureCollection has no "features" array."""


class InvalidFeatureId(GeoJSONError):
    """A Feature id is neither a string nor a number."""


class PropertyDecodeError(GeoJSONError):
    """The caller-supplied property decoder rejected the properties node."""

    def __init__(self, cause: Exception, path: str = "$.properties"):
        self.cause = cause
        super().__init__(f"Could not decode properties: {cause}", path)
