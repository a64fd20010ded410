"""FastAPI dependencies."""

from .locations import get_location_matcher

__all__ = ["get_location_matcher"]
