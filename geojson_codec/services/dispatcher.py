"""
Type dispatch on the GeoJSON "type" member.

A TypeDispatcher holds a read-only table mapping a tag string to the routine
that decodes nodes of that type. The table is built once when the owning
module is imported and never changes afterwards, so concurrent decodes can
share a dispatcher without locking.

The "type" member is only read to select the routine; the whole node
(including "type") is passed on unchanged.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)


class TypeDispatcher:
    """Immutable tag -> decode routine table."""

    def __init__(
        self,
        name: str,
        routines: Mapping[str, Callable[..., Any]],
        unknown_error: Callable[[Any, str], Exception],
    ):
        """
        Args:
            name: Label used in log messages ("geometry", "envelope")
            routines: Decode routine per tag; each is called as routine(node, path, *args)
            unknown_error: Factory for the exception raised on a missing or unknown tag
        """
        self.name = name
        self._routines = MappingProxyType(dict(routines))
        self._unknown_error = unknown_error

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._routines)

    def __contains__(self, tag) -> bool:
        return isinstance(tag, str) and tag in self._routines

    def resolve(self, node, path: str = "$") -> Callable[..., Any]:
        """
        Select the decode routine for a node from its "type" member.

        Raises:
            The configured unknown-type error if the node is not an object,
            has no "type", or the tag is not registered
        """
        tag = node.get("type") if isinstance(node, dict) else None
        if tag not in self:
            logger.warning(f"Unrecognised {self.name} type {tag!r} at {path}")
            raise self._unknown_error(tag, path)

        logger.debug(f"Dispatching {self.name} type {tag!r} at {path}")
        return self._routines[tag]

    def dispatch(self, node, path: str = "$", *args, **kwargs):
        """Resolve the routine for ``node`` and run it."""
        routine = self.resolve(node, path)
        return routine(node, path, *args, **kwargs)
