"""Tests for the Prometheus collectors and their module identity."""
import sys

from prometheus_client import REGISTRY

import observability
from observability import metrics


def test_test_modules_resolve_under_the_package_name():
    """Shared packages load once, so collectors register only once."""
    assert __name__ == "observability.tests.test_metrics"
    assert sys.modules["observability.metrics"] is metrics
    assert not [name for name in sys.modules if name.startswith("shared.python")]


def test_helpers_come_from_the_loaded_metrics_module():
    assert observability.record_search_operation is metrics.record_search_operation
    assert observability.record_location_expansion is metrics.record_location_expansion


def test_record_search_error_increments_counter():
    labels = {"search_type": "equipment"}
    before = REGISTRY.get_sample_value("marketplace_search_errors_total", labels) or 0.0

    metrics.record_search_error("equipment")

    assert REGISTRY.get_sample_value("marketplace_search_errors_total", labels) == before + 1
