"""
Observability module for the marketplace search service.

Provides:
- Prometheus metrics (metrics.py)
- Structured JSON logging (logging.py)
"""

from .logging import (
    setup_logging,
    get_logger,
    LogContext,
    set_trace_id,
    get_trace_id,
    clear_trace_id,
)

from .metrics import (
    record_api_request,
    record_location_expansion,
    record_search_error,
    record_search_operation,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "LogContext",
    "set_trace_id",
    "get_trace_id",
    "clear_trace_id",
    # Helper functions
    "record_api_request",
    "record_location_expansion",
    "record_search_error",
    "record_search_operation",
]
