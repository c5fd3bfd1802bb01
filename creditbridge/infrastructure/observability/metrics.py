"""Prometheus metrics for score distribution, risk tiers and offer volume"""

from prometheus_client import Counter, Histogram

from creditbridge.domain.scoring import score_band

# Analytics metrics
analytics_counter = Counter(
    "creditbridge_analytics_generated_total",
    "Analytics runs completed",
    ["risk_profile"],  # low | medium | high
)

score_band_counter = Counter(
    "creditbridge_score_band",
    "Final scores issued by band",
    ["band"],  # poor | fair | good | excellent
)

score_calculation_counter = Counter(
    "creditbridge_score_calculations_total",
    "Score calculations by entry point",
    ["endpoint"],  # analytics | calculator
)

loan_offers_counter = Counter(
    "creditbridge_loan_offers_total",
    "Synthetic loan offers issued",
    ["loan_type"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(score: int, endpoint: str) -> None:
    score_calculation_counter.labels(endpoint=endpoint).inc()
    score_band_counter.labels(band=score_band(score)).inc()


def record_analytics(score: int, risk_profile: str, loan_types: list[str]) -> None:
    """Record a completed analytics run"""
    analytics_counter.labels(risk_profile=risk_profile).inc()
    record_score(score, "analytics")
    for loan_type in loan_types:
        loan_offers_counter.labels(loan_type=loan_type).inc()
