"""
Prometheus Metrics for the API Service

Centralized metrics definitions for:
- API endpoints (request count and latency)
- Search operations (equipment, manpower)
- Location expansion outcomes

All modules import metrics from this module to ensure consistency.
"""

import logging

from prometheus_client import Counter, Histogram, Info

from config.constants import SERVICE_VERSION

logger = logging.getLogger(__name__)

# =============================================================================
# SERVICE INFORMATION
# =============================================================================

api_service_info = Info("marketplace_api", "API Service Information")
api_service_info.info(
    {
        "version": SERVICE_VERSION,
        "service": "api",
        "description": "Equipment and manpower search with hierarchical location matching",
    }
)

# =============================================================================
# API METRICS
# =============================================================================

# HTTP requests
api_requests_total = Counter(
    "marketplace_api_requests_total",
    "Total API requests",
    ["method", "endpoint", "status_code"],
)

api_request_duration_seconds = Histogram(
    "marketplace_api_request_duration_seconds",
    "API request duration",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1, 2, 5],
)

# Search operations
search_operations_total = Counter(
    "marketplace_search_operations_total",
    "Total search operations",
    ["search_type"],  # equipment, manpower
)

search_results_count = Histogram(
    "marketplace_search_results_count",
    "Number of results returned per search",
    ["search_type"],
    buckets=[0, 1, 5, 10, 25, 50, 100, 500],
)

search_errors_total = Counter(
    "marketplace_search_errors_total",
    "Searches that failed at the data store",
    ["search_type"],
)

# Location matching
location_expansions_total = Counter(
    "marketplace_location_expansions_total",
    "Location filter expansions by how the query was resolved",
    ["source"],  # empty, key, alias, literal
)

location_expansion_size = Histogram(
    "marketplace_location_expansion_size",
    "Number of aliases produced per location expansion",
    buckets=[1, 2, 5, 10, 25, 50, 100, 250],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def record_api_request(
    method: str, endpoint: str, status_code: int, duration_seconds: float
) -> None:
    """Record API request."""
    api_requests_total.labels(
        method=method,
        endpoint=endpoint,
        status_code=str(status_code),
    ).inc()
    api_request_duration_seconds.labels(
        method=method,
        endpoint=endpoint,
    ).observe(duration_seconds)


def record_search_operation(search_type: str, result_count: int) -> None:
    """Record search operation."""
    search_operations_total.labels(search_type=search_type).inc()
    search_results_count.labels(search_type=search_type).observe(result_count)


def record_search_error(search_type: str) -> None:
    """Record a search that failed at the data store."""
    search_errors_total.labels(search_type=search_type).inc()


def record_location_expansion(source: str, alias_count: int) -> None:
    """Record how a location filter was resolved and how wide it expanded."""
    location_expansions_total.labels(source=source).inc()
    if alias_count:
        location_expansion_size.observe(alias_count)
