"""Configuration management module."""

from .settings import Settings, settings
from .constants import SERVICE_VERSION, QueryLimits, Timeouts

__all__ = [
    "Settings",
    "settings",
    "Timeouts",
    "QueryLimits",
    "SERVICE_VERSION",
]
