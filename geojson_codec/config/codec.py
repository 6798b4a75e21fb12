"""Serialization settings.

Controls how encoded GeoJSON text is rendered and how strictly numeric
input is checked on decode:
- compact: no whitespace after separators (``"type":"Feature"``)
- indent: pretty-print with this many spaces (overrides compact)
- allow_nan: accept NaN / Infinity coordinates (not valid strict JSON)
- ensure_ascii: escape non-ASCII characters in property strings
- emit_null_members: render absent Feature geometry/properties as null
- max_dimension: largest accepted position arity (2 or 3)
"""

import os
from dataclasses import dataclass
from typing import Optional

from geojson_codec.config.geometry_kinds import MAX_DIMENSION, MIN_DIMENSION


@dataclass(frozen=True)
class CodecConfig:
    """Text rendering and strictness options for the codec."""

    compact: bool = True
    indent: Optional[int] = None
    allow_nan: bool = False
    ensure_ascii: bool = False
    emit_null_members: bool = True
    max_dimension: int = MAX_DIMENSION

    def __post_init__(self):
        if not MIN_DIMENSION <= self.max_dimension <= MAX_DIMENSION:
            raise ValueError(
                f"max_dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}, "
                f"got {self.max_dimension}"
            )

    def dumps_kwargs(self) -> dict:
        """Keyword arguments for ``json.dumps`` matching these settings."""
        if self.indent is not None:
            separators = (",", ": ")
        elif self.compact:
            separators = (",", ":")
        else:
            separators = (", ", ": ")
        return {
            "indent": self.indent,
            "separators": separators,
            "allow_nan": self.allow_nan,
            "ensure_ascii": self.ensure_ascii,
        }


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _load_config() -> CodecConfig:
    """Load codec settings from GEOJSON_CODEC_* environment variables."""
    indent = os.getenv("GEOJSON_CODEC_INDENT", "").strip()
    return CodecConfig(
        compact=_env_flag("GEOJSON_CODEC_COMPACT", True),
        indent=int(indent) if indent else None,
        allow_nan=_env_flag("GEOJSON_CODEC_ALLOW_NAN", False),
        ensure_ascii=_env_flag("GEOJSON_CODEC_ENSURE_ASCII", False),
        emit_null_members=_env_flag("GEOJSON_CODEC_EMIT_NULL_MEMBERS", True),
        max_dimension=int(os.getenv("GEOJSON_CODEC_MAX_DIMENSION", str(MAX_DIMENSION))),
    )


# Global instance (loaded from env at import time)
CODEC_CONFIG = _load_config()
