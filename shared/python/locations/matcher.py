"""
Location Matcher

Expands a free-text location into every alias that should be OR-matched
against stored location text.

Resolution is exact (normalized equality) and runs in passes:
1. canonical key
2. alias or code of a node (first owner in registry order)
3. unknown text: the normalized text itself is the only alias

A resolved node expands to its own aliases plus the aliases of every node
below it. Cities are leaves, so a city search never pulls in sibling
cities; a country search reaches every city through its states and
regions.

Substring matching is left to the caller's SQL LIKE comparison. The
matcher never raises and keeps no state between calls.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from observability import get_logger

from .registry import LocationNode, LocationRegistry, normalize_location

logger = get_logger(__name__)


class MatchSource(str, enum.Enum):
    """How a location query was resolved."""

    EMPTY = "empty"
    KEY = "key"
    ALIAS = "alias"
    LITERAL = "literal"


@dataclass(frozen=True)
class LocationExpansion:
    """Result of expanding one location query."""

    query: str
    source: MatchSource
    aliases: tuple[str, ...] = ()
    node: Optional[LocationNode] = None

    @property
    def matched(self) -> bool:
        """False only for blank input, which means no location filter at all."""
        return self.source is not MatchSource.EMPTY

    def as_pair(self) -> tuple[bool, tuple[str, ...]]:
        return self.matched, self.aliases


class LocationMatcher:
    """Resolve and expand location queries against a registry."""

    def __init__(self, registry: LocationRegistry):
        self.registry = registry

    def resolve(self, query: Optional[str]) -> LocationExpansion:
        """
        Resolve a location query to its expansion.

        Args:
            query: Free text as typed by the user (case and surrounding
                whitespace are ignored)

        Returns:
            LocationExpansion with de-duplicated aliases (the resolved
            node's own aliases first, then descendants depth-first)
        """
        normalized = normalize_location(query)
        if not normalized:
            return LocationExpansion(query=normalized, source=MatchSource.EMPTY)

        node = self.registry.get(normalized)
        source = MatchSource.KEY
        if node is None:
            node = self.registry.owner_of(normalized)
            source = MatchSource.ALIAS

        if node is None:
            logger.debug("Unregistered location, using literal text", extra={"location": normalized})
            return LocationExpansion(query=normalized, source=MatchSource.LITERAL, aliases=(normalized,))

        return LocationExpansion(
            query=normalized,
            source=source,
            aliases=self._collect_aliases(node),
            node=node,
        )

    def expand(self, query: Optional[str]) -> tuple[bool, tuple[str, ...]]:
        """Return (matched, aliases) for a location query."""
        return self.resolve(query).as_pair()

    def _collect_aliases(self, node: LocationNode) -> tuple[str, ...]:
        aliases = dict.fromkeys(node.aliases)
        for descendant in self.registry.descendants(node.key):
            aliases.update(dict.fromkeys(descendant.aliases))
        return tuple(aliases)
