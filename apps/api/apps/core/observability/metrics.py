"""
Metrics instrumentation wrapper around prometheus_client.
"""
from functools import wraps
import time

from prometheus_client import Counter, Histogram


class MetricsRegistry:
    """
    Central metrics registry for the warranty tracker.

    Provides typed access to all application metrics.
    """

    def __init__(self):
        """Initialize metrics registry."""
        self._setup_metrics()

    def _create_counter(self, name, description, labels=None):
        """Create a counter metric."""
        return Counter(name, description, labels or [])

    def _create_histogram(self, name, description, labels=None, buckets=None):
        """Create a histogram metric."""
        if buckets:
            return Histogram(name, description, labels or [], buckets=buckets)
        return Histogram(name, description, labels or [])

    def _setup_metrics(self):
        """Setup all application metrics."""

        # ===================================================================
        # Warranty Status Metrics
        # ===================================================================
        self.warranty_status_computed_total = self._create_counter(
            'warranty_status_computed_total',
            'Warranty status computations on save',
            ['status']
        )

        self.warranty_status_transitions_total = self._create_counter(
            'warranty_status_transitions_total',
            'Warranty status changes detected on save',
            ['from_status', 'to_status']
        )

        self.warranty_status_refreshed_total = self._create_counter(
            'warranty_status_refreshed_total',
            'Stale warranty statuses rewritten by the refresh command'
        )

        # ===================================================================
        # Document Metrics
        # ===================================================================
        self.warranty_documents_total = self._create_counter(
            'warranty_documents_total',
            'Warranty document operations',
            ['action', 'result']  # action: upload|delete, result: success|rejected|missing_file
        )

        # ===================================================================
        # Aggregation Metrics
        # ===================================================================
        self.aggregation_query_duration_seconds = self._create_histogram(
            'aggregation_query_duration_seconds',
            'Duration of aggregation/report queries',
            ['query'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
        )

        self.aggregation_failures_total = self._create_counter(
            'aggregation_failures_total',
            'Aggregation queries that raised',
            ['query']
        )

        # ===================================================================
        # Admin Metrics
        # ===================================================================
        self.admin_audit_logs_total = self._create_counter(
            'admin_audit_logs_total',
            'Admin audit log entries created',
            ['resource_type', 'action']
        )

    def track_duration(self, histogram_metric, **labels):
        """
        Decorator to track function duration.

        Usage:
            @metrics.track_duration(metrics.aggregation_query_duration_seconds, query='user_totals')
            def get_user_totals(user):
                ...
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                try:
                    return func(*args, **kwargs)
                finally:
                    duration = time.time() - start_time
                    target = histogram_metric.labels(**labels) if labels else histogram_metric
                    target.observe(duration)
            return wrapper
        return decorator


# Global metrics instance
metrics = MetricsRegistry()
