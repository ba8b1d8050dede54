"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, CollectorRegistry
import time
from functools import wraps
from typing import Callable

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

upstream_requests = Counter(
    'upstream_requests_total',
    'Total outbound calls to pricing and maps services',
    ['service', 'status'],
    registry=registry
)

upstream_duration = Histogram(
    'upstream_request_duration_seconds',
    'Outbound call duration in seconds',
    ['service'],
    registry=registry
)


def track_upstream_call(service: str):
    """Decorator to track outbound call metrics"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                upstream_requests.labels(service=service, status='success').inc()
                return result
            except Exception:
                upstream_requests.labels(service=service, status='error').inc()
                raise
            finally:
                upstream_duration.labels(service=service).observe(time.time() - start_time)
        return wrapper
    return decorator


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    from prometheus_client import generate_latest
    return generate_latest(registry).decode('utf-8')


def endpoint_label(request) -> str:
    """Route pattern for the request, so path parameters share one series"""
    route = request.scope.get("route")
    return route.path if route is not None else "unmatched"
