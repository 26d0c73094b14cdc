"""Prometheus metrics for monitoring approval rates and offered loans"""

from prometheus_client import Counter, Histogram

from loan_decision.domain.models import Decision

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | failure kind
)

approved_amount_bucket_counter = Counter(
    "loan_decision_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000, 2001-5000, 5001-9999, 10000
)

approved_period_histogram = Histogram(
    "loan_decision_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 36, 48, 60],
)


def amount_bucket(amount: int) -> str:
    if amount <= 2000:
        return "2000"
    elif amount <= 5000:
        return "2001-5000"
    elif amount < 10000:
        return "5001-9999"
    else:
        return "10000"


def record_decision(decision: Decision) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    if not decision.is_approved:
        decision_counter.labels(outcome=decision.failure.value).inc()
        return

    decision_counter.labels(outcome="approved").inc()
    approved_amount_bucket_counter.labels(bucket=amount_bucket(decision.approved_amount)).inc()
    approved_period_histogram.observe(decision.approved_period_months)
