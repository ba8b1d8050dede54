"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, CollectorRegistry

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

addresses_resolved = Counter(
    'addresses_resolved_total',
    'Total coordinate pairs resolved to an address',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')


def endpoint_label(request) -> str:
    route = request.scope.get("route")
    return route.path if route is not None else "unmatched"
