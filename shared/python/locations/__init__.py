"""
Hierarchical location matching shared by equipment and manpower search.

Usage:
    from locations import LocationMatcher, build_default_registry

    matcher = LocationMatcher(build_default_registry())
    matched, aliases = matcher.expand("Tamil Nadu")
"""

from .hierarchy import LOCATION_HIERARCHY
from .matcher import LocationExpansion, LocationMatcher, MatchSource
from .registry import (
    AliasCollision,
    LocationKind,
    LocationNode,
    LocationRegistry,
    RegistryError,
    normalize_location,
)


def build_default_registry() -> LocationRegistry:
    """Compile the bundled hierarchy table into a registry."""
    return LocationRegistry.from_config(LOCATION_HIERARCHY)


__all__ = [
    "LOCATION_HIERARCHY",
    "AliasCollision",
    "LocationExpansion",
    "LocationKind",
    "LocationMatcher",
    "LocationNode",
    "LocationRegistry",
    "MatchSource",
    "RegistryError",
    "build_default_registry",
    "normalize_location",
]
