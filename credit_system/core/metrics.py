"""Prometheus metrics for the Credit System service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- credit_customers_registered_total: Customers registered
- credit_customers_deleted_total: Customers deleted
- credit_credits_created_total: Credits created
- credit_credit_value: Distribution of credit values

Technical Metrics (for Engineering/SRE):
- credit_domain_errors_total: Domain errors by code
- credit_http_requests_total: HTTP requests by endpoint/status
- credit_http_request_latency_seconds: HTTP latency by endpoint
"""

from decimal import Decimal

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

customers_registered = Counter(
    "credit_customers_registered_total",
    "Total number of customers registered",
)

customers_deleted = Counter(
    "credit_customers_deleted_total",
    "Total number of customers deleted",
)

credits_created = Counter(
    "credit_credits_created_total",
    "Total number of credits created",
)

credit_value = Histogram(
    "credit_credit_value",
    "Value of created credits",
    buckets=[500, 1_000, 5_000, 10_000, 50_000, 100_000, 500_000],
)

credit_installments = Histogram(
    "credit_credit_installments",
    "Number of installments of created credits",
    buckets=[1, 6, 12, 24, 36, 48],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

domain_errors = Counter(
    "credit_domain_errors_total",
    "Total number of domain errors returned to clients",
    ["code"],
)

http_requests_total = Counter(
    "credit_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_customer_registered() -> None:
    """Record a customer registration."""
    customers_registered.inc()


def record_customer_deleted() -> None:
    """Record a customer deletion."""
    customers_deleted.inc()


def record_credit_created(value: Decimal, number_of_installments: int) -> None:
    """Record a created credit."""
    credits_created.inc()
    credit_value.observe(float(value))
    credit_installments.observe(number_of_installments)


def record_domain_error(code: str) -> None:
    """Record a domain error surfaced to a client."""
    domain_errors.labels(code=code).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
