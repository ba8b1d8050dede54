"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry

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

cache_hits = Counter(
    'cache_hits_total',
    'Total price cache hits',
    registry=registry
)

cache_misses = Counter(
    'cache_misses_total',
    'Total price cache misses',
    registry=registry
)

redis_connected = Gauge(
    'redis_connected',
    'Redis connection status (1=connected, 0=disconnected)',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')


def endpoint_label(request) -> str:
    """Route pattern for the request, so path parameters share one series"""
    route = request.scope.get("route")
    return route.path if route is not None else "unmatched"
