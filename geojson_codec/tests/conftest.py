"""
Shared test fixtures for the GeoJSON codec test suite.

Provides WKT-built geometries (parsed with shapely.wkt), a small pydantic
property model, and ready-made Features / FeatureCollections.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import BaseModel
from shapely import wkt
from shapely.geometry import Point

# Ensure the repository root is on sys.path so package imports work uninstalled
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------

GEOMETRY_WKT = {
    "point": "POINT(15 20)",
    "linestring": "LINESTRING(0 0, 10 10, 20 25, 50 60)",
    "polygon": "POLYGON((0 0,10 0,10 10,0 10,0 0),(5 5,7 5,7 7,5 7, 5 5))",
    "multipoint": "MULTIPOINT(0 0, 20 20, 60 60)",
    "multilinestring": "MULTILINESTRING((10 10, 20 20), (15 15, 30 15))",
    "multipolygon": "MULTIPOLYGON(((0 0,10 0,10 10,0 10,0 0)),((5 5,7 5,7 7,5 7, 5 5)))",
    "geometrycollection": "GEOMETRYCOLLECTION(POINT(10 10), POINT(30 30), LINESTRING(15 15, 20 20))",
}


@pytest.fixture(params=sorted(GEOMETRY_WKT))
def any_geometry(request):
    """Each of the seven geometry kinds, built from WKT."""
    return wkt.loads(GEOMETRY_WKT[request.param])


@pytest.fixture(params=sorted(k for k in GEOMETRY_WKT if k != "geometrycollection"))
def any_simple_geometry(request):
    """Each geometry kind that carries "coordinates", built from WKT."""
    return wkt.loads(GEOMETRY_WKT[request.param])


@pytest.fixture
def polygon_with_hole():
    """Square with one square hole."""
    return wkt.loads(GEOMETRY_WKT["polygon"])


@pytest.fixture
def mixed_collection():
    """Two points and a line string."""
    return wkt.loads(GEOMETRY_WKT["geometrycollection"])


# ---------------------------------------------------------------------------
# Property / Feature fixtures
# ---------------------------------------------------------------------------

class Animal(BaseModel):
    name: str = ""
    age: int = 0


@pytest.fixture
def animal_type():
    """Property payload model with a name and an age."""
    return Animal


@pytest.fixture
def brutus():
    """Feature: a dog at (32.6, 12.3)."""
    from geojson_codec import Feature
    return Feature(geometry=Point(32.6, 12.3), properties=Animal(name="Brutus", age=4))


@pytest.fixture
def animal_collection(brutus):
    """FeatureCollection of two animals, in a fixed order."""
    from geojson_codec import Feature, FeatureCollection
    tweety = Feature(geometry=Point(45.1, 19.8), properties=Animal(name="Tweety", age=2))
    return FeatureCollection([brutus, tweety])
