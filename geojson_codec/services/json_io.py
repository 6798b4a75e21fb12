"""JSON text boundary: parsing into node trees and rendering them back to text."""

from __future__ import annotations

import json
from typing import Optional

from geojson_codec.config.codec import CodecConfig, CODEC_CONFIG
from geojson_codec.services.errors import MalformedJSON


def load_json(text) -> dict:
    """
    Parse GeoJSON text into a JSON object node.

    Args:
        text: str, bytes or bytearray holding one JSON object

    Returns:
        The parsed top-level object

    Raises:
        MalformedJSON: If the text is not valid JSON or not an object
    """
    try:
        node = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueErrors
        raise MalformedJSON(f"Invalid JSON: {e}") from e
    except TypeError as e:
        raise MalformedJSON(f"Cannot parse {type(text).__name__} as JSON") from e

    if not isinstance(node, dict):
        raise MalformedJSON(f"Expected a JSON object, got {type(node).__name__}")
    return node


def dump_json(node, config: Optional[CodecConfig] = None) -> str:
    """Render a JSON node tree as text using the codec's rendering settings."""
    config = config or CODEC_CONFIG
    return json.dumps(node, **config.dumps_kwargs())
