"""
Location Registry

Immutable lookup tables compiled once from the location hierarchy
configuration table. Built at service startup and shared read-only by
every request; no method mutates state after construction.

Structural rules enforced at build time (violations raise RegistryError):
- keys are unique
- every child reference resolves to a registered node
- a node has at most one parent
- countries contain states, regions or cities; states and regions
  contain cities; cities are leaves

Together these keep the hierarchy a forest at most three levels deep, so
cycles cannot occur.

Alias collisions (one string claimed by two nodes) are a configuration
mistake but not fatal: the first node in registry order keeps the alias
and the collision is logged and exposed via `collisions`.
"""

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, NamedTuple, Optional

from observability import get_logger

logger = get_logger(__name__)


class LocationKind(str, enum.Enum):
    """Level of a node in the hierarchy."""

    COUNTRY = "country"
    STATE = "state"
    REGION = "region"
    CITY = "city"


_ALLOWED_CHILD_KINDS = {
    LocationKind.COUNTRY: {LocationKind.STATE, LocationKind.REGION, LocationKind.CITY},
    LocationKind.STATE: {LocationKind.CITY},
    LocationKind.REGION: {LocationKind.CITY},
    LocationKind.CITY: set(),
}


class RegistryError(ValueError):
    """Raised when the location hierarchy configuration is structurally invalid."""


class AliasCollision(NamedTuple):
    """An alias claimed by more than one node."""

    alias: str
    kept: str
    ignored: str


def normalize_location(value: Optional[str]) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    if not value:
        return ""
    return " ".join(value.split()).lower()


@dataclass(frozen=True)
class LocationNode:
    """A named geographic entity."""

    key: str
    kind: LocationKind
    aliases: tuple[str, ...]
    children: tuple[str, ...] = ()
    codes: tuple[str, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @classmethod
    def create(
        cls,
        key: str,
        kind: str,
        aliases: Iterable[str] = (),
        children: Iterable[str] = (),
        codes: Iterable[str] = (),
    ) -> "LocationNode":
        """
        Build a node with normalized strings.

        The key is always the first alias; duplicate aliases are dropped
        and blank entries ignored.
        """
        norm_key = normalize_location(key)
        if not norm_key:
            raise RegistryError("Location key must not be empty")

        try:
            node_kind = LocationKind(kind)
        except ValueError:
            raise RegistryError(f"Location '{norm_key}' has unknown kind '{kind}'") from None

        norm_aliases = dict.fromkeys([norm_key])
        norm_aliases.update(dict.fromkeys(a for a in map(normalize_location, aliases) if a))

        norm_codes = dict.fromkeys(c for c in map(normalize_location, codes) if c and c not in norm_aliases)

        return cls(
            key=norm_key,
            kind=node_kind,
            aliases=tuple(norm_aliases),
            children=tuple(dict.fromkeys(c for c in map(normalize_location, children) if c)),
            codes=tuple(norm_codes),
        )


class LocationRegistry:
    """
    Read-only registry of location nodes.

    Lookups:
        get(key)        exact canonical key
        owner_of(text)  node owning an alias or code (first in registry order)
        descendants(key) every node below key, depth-first in child order
    """

    def __init__(self, nodes: Iterable[LocationNode]):
        by_key: dict[str, LocationNode] = {}
        for node in nodes:
            if node.key in by_key:
                raise RegistryError(f"Duplicate location key '{node.key}'")
            by_key[node.key] = node

        parents: dict[str, str] = {}
        for node in by_key.values():
            allowed = _ALLOWED_CHILD_KINDS[node.kind]
            for child_key in node.children:
                child = by_key.get(child_key)
                if child is None:
                    raise RegistryError(f"Location '{node.key}' references unknown child '{child_key}'")
                if child.kind not in allowed:
                    raise RegistryError(
                        f"Location '{node.key}' ({node.kind.value}) cannot contain "
                        f"'{child_key}' ({child.kind.value})"
                    )
                if child_key in parents:
                    raise RegistryError(
                        f"Location '{child_key}' has two parents: '{parents[child_key]}' and '{node.key}'"
                    )
                parents[child_key] = node.key

        owners: dict[str, str] = {key: key for key in by_key}
        collisions: list[AliasCollision] = []
        for node in by_key.values():
            for alias in node.aliases + node.codes:
                if alias == node.key:
                    continue
                kept = owners.setdefault(alias, node.key)
                if kept != node.key:
                    # Canonical keys always win over aliases of other nodes
                    collisions.append(AliasCollision(alias, kept, node.key))

        for collision in collisions:
            logger.warning(
                "Location alias claimed by more than one node",
                extra={"alias": collision.alias, "kept": collision.kept, "ignored": collision.ignored},
            )

        self._nodes: Mapping[str, LocationNode] = MappingProxyType(by_key)
        self._owners: Mapping[str, str] = MappingProxyType(owners)
        self._parents: Mapping[str, str] = MappingProxyType(parents)
        self._collisions: tuple[AliasCollision, ...] = tuple(collisions)

    @classmethod
    def from_config(cls, table: Mapping[str, Mapping]) -> "LocationRegistry":
        """
        Build a registry from a configuration table.

        Args:
            table: Mapping of key -> {"kind", "aliases", "children", "codes"}

        Raises:
            RegistryError: If an entry is malformed or the hierarchy is invalid
        """
        nodes = []
        for key, entry in table.items():
            if "kind" not in entry:
                raise RegistryError(f"Location '{key}' is missing 'kind'")
            nodes.append(
                LocationNode.create(
                    key,
                    entry["kind"],
                    aliases=entry.get("aliases", ()),
                    children=entry.get("children", ()),
                    codes=entry.get("codes", ()),
                )
            )

        registry = cls(nodes)
        logger.info(
            "Location registry built",
            extra={"node_count": len(registry), "collision_count": len(registry.collisions)},
        )
        return registry

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[LocationNode]:
        return iter(self._nodes.values())

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    @property
    def collisions(self) -> tuple[AliasCollision, ...]:
        return self._collisions

    def get(self, key: str) -> Optional[LocationNode]:
        return self._nodes.get(key)

    def owner_of(self, alias: str) -> Optional[LocationNode]:
        owner_key = self._owners.get(alias)
        return self._nodes[owner_key] if owner_key else None

    def parent_of(self, key: str) -> Optional[LocationNode]:
        parent_key = self._parents.get(key)
        return self._nodes[parent_key] if parent_key else None

    def descendants(self, key: str) -> Iterator[LocationNode]:
        node = self._nodes.get(key)
        if node is None:
            return
        for child_key in node.children:
            child = self._nodes[child_key]
            yield child
            yield from self.descendants(child_key)

    def nodes_of_kind(self, kind: LocationKind) -> list[LocationNode]:
        return [node for node in self._nodes.values() if node.kind == kind]
