"""
Shared configuration constants for the marketplace search service.

This module centralizes magic numbers and default values. Values can be
overridden via environment variables.

Usage:
    from config.constants import QueryLimits, Timeouts

    await asyncio.wait_for(probe(), timeout=Timeouts.DB_HEALTH_CHECK)
"""

import os

SERVICE_VERSION = "1.0.0"
"""Release version reported by the API, its metrics and the package metadata."""


class Timeouts:
    """Operation timeout constants (in seconds)."""

    DB_HEALTH_CHECK = float(os.getenv("DB_HEALTH_CHECK_TIMEOUT", "3.0"))
    """Timeout for the database connectivity probe."""


class QueryLimits:
    """Database query limit defaults."""

    MAX = int(os.getenv("QUERY_LIMIT_MAX", "1000"))
    """Maximum allowed query limit."""
