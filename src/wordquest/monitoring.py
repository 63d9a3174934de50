"""Prometheus metrics for the learning engine."""
from prometheus_client import Counter, start_http_server

# Learning metrics
answers_recorded = Counter(
    "wordquest_answers_recorded_total",
    "Total number of answers recorded by the adaptive engine",
    ["category", "result"],
)

bosses_completed = Counter(
    "wordquest_bosses_completed_total",
    "Total number of boss challenges completed",
    ["category"],
)

mock_tests_completed = Counter(
    "wordquest_mock_tests_completed_total",
    "Total number of mock tests completed",
)

achievements_unlocked = Counter(
    "wordquest_achievements_unlocked_total",
    "Total number of achievements unlocked",
    ["achievement_id"],
)

# Hint metrics
hint_results = Counter(
    "wordquest_hint_results_total",
    "Total number of coach hints served",
    ["source"],
)

hint_fallbacks = Counter(
    "wordquest_hint_fallbacks_total",
    "Total number of coach hints replaced by a canned hint",
    ["reason"],
)

# Storage metrics
storage_errors = Counter(
    "wordquest_storage_errors_total",
    "Total number of swallowed storage errors",
    ["operation"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
