"""Tests for metrics."""
from unittest.mock import patch

import httpx
from prometheus_client import REGISTRY

from wordquest import monitoring
from wordquest.config import CoachSettings
from wordquest.models.hint_models import CoachRequest
from wordquest.services.coach_service import CoachService


def sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_fallback_is_counted() -> None:
    """Test that each canned fallback is counted with its reason."""
    before = sample("wordquest_hint_fallbacks_total", {"reason": "http_status"})
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(502)))
    service = CoachService(coach_settings=CoachSettings(api_key="test-key"), client=client)
    service.get_hint(CoachRequest(task_type="boss", word="kitchen"))
    service.close()
    assert sample("wordquest_hint_fallbacks_total", {"reason": "http_status"}) == before + 1


def test_start_monitoring() -> None:
    """Test that the metrics server is started on the given port."""
    with patch("wordquest.monitoring.start_http_server") as start_http_server:
        monitoring.start_monitoring(9191)
    start_http_server.assert_called_once_with(9191)
