"""Application metrics."""

from prometheus_client import Counter

# Trip lifecycle metrics
trips_started = Counter(
    "roadbook_trips_started_total",
    "Total number of trips started",
    ["direction"],
)

trips_finished = Counter(
    "roadbook_trips_finished_total",
    "Total number of trips finished",
    ["direction"],
)

km_inconsistency = Counter(
    "roadbook_km_inconsistency_total",
    "Odometer inconsistencies detected on finish",
    ["outcome"],
)

# Use case metrics
use_case_errors = Counter(
    "roadbook_use_case_errors_total",
    "Total number of use case failures",
    ["operation", "kind"],
)

# Health metrics
health_ready_checks_total = Counter(
    "roadbook_health_ready_checks_total",
    "Total number of readiness checks",
    ["result", "reason"],
)
