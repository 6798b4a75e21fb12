"""
Property payload delegation.

Feature envelopes never look inside their properties. Callers supply an
encoder (payload -> JSON value) and a decoder (JSON value -> payload), either
as plain callables or bundled in a PropertyCodec.

Two ready-made codecs are provided:
- MAPPING_PROPERTIES: properties are a plain dict, copied in and out
- model_properties(T): any type pydantic can validate (BaseModel subclass,
  dataclass, TypedDict, ...) via pydantic.TypeAdapter
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Generic, Mapping, TypeVar

from pydantic import TypeAdapter

P = TypeVar("P")

PropertyEncoder = Callable[[Any], Any]
PropertyDecoder = Callable[[Any], Any]


@dataclass(frozen=True)
class PropertyCodec(Generic[P]):
    """Encode/decode pair for one property payload type."""

    encode: Callable[[P], Any]
    decode: Callable[[Any], P]


def _mapping_in(node) -> dict:
    if not isinstance(node, Mapping):
        raise TypeError(f"properties must be a JSON object, got {type(node).__name__}")
    return dict(node)


MAPPING_PROPERTIES: PropertyCodec[dict] = PropertyCodec(encode=_mapping_in, decode=_mapping_in)


@lru_cache(maxsize=None)
def model_properties(model_type) -> PropertyCodec:
    """
    Build a property codec for a type pydantic knows how to validate.

    Args:
        model_type: pydantic model class, dataclass, TypedDict or other
            TypeAdapter-compatible type

    Returns:
        PropertyCodec whose decoder raises pydantic.ValidationError on bad input
    """
    adapter = TypeAdapter(model_type)
    return PropertyCodec(
        encode=lambda value: adapter.dump_python(value, mode="json"),
        decode=adapter.validate_python,
    )
