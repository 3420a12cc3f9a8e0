"""Prometheus metrics for the order admission service.

Defines and exposes operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter

# Order admission metrics
order_validations_total = Counter(
    "mealplan_order_validations_total",
    "Total order admission checks",
    ["result"]  # result: valid|invalid
)

order_validation_errors_total = Counter(
    "mealplan_order_validation_errors_total",
    "Total business rule violations reported to customers"
)

# Rate limiting metrics
rate_limited_total = Counter(
    "mealplan_rate_limited_total",
    "Requests refused by the rate limiter",
    ["function"]
)
