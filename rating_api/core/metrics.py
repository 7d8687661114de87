"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, generate_latest

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

quotes_issued = Counter(
    'quotes_issued_total',
    'Total quotes issued',
    ['state', 'business'],
    registry=registry
)

quote_rejections = Counter(
    'quote_rejections_total',
    'Total quote requests rejected',
    ['error'],
    registry=registry
)

cache_hits = Counter(
    'premium_cache_hits_total',
    'Total premium cache hits',
    registry=registry
)

cache_misses = Counter(
    'premium_cache_misses_total',
    'Total premium cache misses',
    registry=registry
)

redis_connected = Gauge(
    'redis_connected',
    'Redis connection status (1=connected, 0=disconnected)',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    return generate_latest(registry).decode('utf-8')
