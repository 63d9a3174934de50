"""Coach hints from an external text generator, with a canned fallback.

The generator is untrusted. A hint goes through four stages:

1. request  - one HTTP call with a bounded timeout, no retries
2. parse    - the reply must contain a JSON object with a ``hint`` string
3. safety   - the hint must pass the safety filter and the curriculum check
4. fallback - any failure above is replaced by a canned hint

``CoachService.get_hint`` never raises.
"""
import json
import logging
import random
import re
import time
from typing import Any, Dict, Optional

import httpx

from wordquest.config import CoachSettings, settings
from wordquest.models.hint_models import CoachRequest, CoachResponse, HintResult
from wordquest import monitoring
from wordquest.services import local_hints
from wordquest.services.content_validator import ContentValidator, extract_english_words, get_validator
from wordquest.services.hint_safety import HINT_ALLOWED_WORDS, HintSafetyFilter, get_filter

logger = logging.getLogger(__name__)

DEFAULT_EMOJI = "💡"
JSON_OBJECT_PATTERN = re.compile(r"\{[^{}]+\}")


class CoachServiceError(Exception):
    """A generated hint could not be used."""


class MalformedHintError(CoachServiceError):
    """The generator replied with something that is not a hint."""


class UnsafeHintError(CoachServiceError):
    """The hint would reveal the answer or leave the curriculum."""


class CoachService:
    """Service for fetching safe coach hints."""

    def __init__(
        self,
        coach_settings: Optional[CoachSettings] = None,
        client: Optional[httpx.Client] = None,
        safety_filter: Optional[HintSafetyFilter] = None,
        validator: Optional[ContentValidator] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the service; the HTTP client can be injected for tests."""
        self.settings = coach_settings or settings.coach
        self.client = client or httpx.Client(timeout=self.settings.timeout)
        self.safety_filter = safety_filter or get_filter()
        self.validator = validator or get_validator()
        self.rng = rng or random.Random()

    def close(self) -> None:
        self.client.close()

    def get_hint(self, request: CoachRequest) -> HintResult:
        """Get a hint for the request, falling back to a canned one on any failure."""
        if not self.settings.enabled:
            return self._fallback(request, "disabled")

        try:
            payload = self._request_hint(request)
            response = self._parse_response(payload)
            self._check_safety(response, request)
        except httpx.TimeoutException as e:
            logger.warning(f"Coach request timed out: {e}")
            return self._fallback(request, "timeout")
        except httpx.HTTPStatusError as e:
            logger.warning(f"Coach request failed with status {e.response.status_code}")
            return self._fallback(request, "http_status")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Coach request failed: {e}")
            return self._fallback(request, "transport")
        except UnsafeHintError as e:
            logger.warning(f"Rejected unsafe coach hint: {e}")
            return self._fallback(request, "unsafe")
        except MalformedHintError as e:
            logger.warning(f"Malformed coach reply: {e}")
            return self._fallback(request, "malformed")
        except Exception as e:
            logger.error(f"Unexpected coach failure: {e}")
            return self._fallback(request, "error")

        monitoring.hint_results.labels(source="generated").inc()
        return HintResult.ok(response)

    def _request_hint(self, request: CoachRequest) -> Dict[str, Any]:
        """Call the generator and return its JSON body.

        httpx applies ``timeout`` to each phase separately, so the body is
        streamed and the whole call is held to a single deadline.
        """
        deadline = time.monotonic() + self.settings.timeout
        with self.client.stream(
            "POST",
            self.settings.api_url,
            headers={
                "content-type": "application/json",
                "x-api-key": self.settings.api_key,
                "anthropic-version": self.settings.api_version,
            },
            json={
                "model": self.settings.model,
                "max_tokens": self.settings.max_tokens,
                "messages": [{"role": "user", "content": self._build_prompt(request)}],
            },
            timeout=self.settings.timeout,
        ) as response:
            response.raise_for_status()
            body = bytearray()
            for chunk in response.iter_bytes():
                body.extend(chunk)
                if time.monotonic() > deadline:
                    raise httpx.ReadTimeout(
                        f"reply took longer than {self.settings.timeout}s",
                        request=response.request,
                    )
        try:
            return json.loads(body)
        except ValueError as e:
            raise MalformedHintError(f"reply is not JSON: {e}") from e

    def _build_prompt(self, request: CoachRequest) -> str:
        word_list = ", ".join(sorted(self.validator.allow_list()))
        lines = [
            "אתה מורה לאנגלית לילד בן 9. תן רמז קצר (שורה-שתיים בעברית) למשימה:",
            f"סוג: {request.task_type}",
            f"מילה: {request.word}",
        ]
        if request.child_choice:
            lines.append(f"הילד בחר: {request.child_choice}")
        if request.recent_errors:
            lines.append(f"טעויות אחרונות: {', '.join(request.recent_errors)}")
        if request.attempt_count:
            lines.append(f"ניסיון מספר: {request.attempt_count}")
        lines.extend([
            "",
            "חוקים קשיחים:",
            f"- רק עברית. אם חייב אנגלית, רק מהרשימה: {word_list}",
            "- אסור לגלות את התשובה או את התרגום שלה",
            "- קצר, עם דימוי או אימוג'י",
            "",
            'תחזיר JSON: {"hint": "...", "emoji": "..."}',
        ])
        return "\n".join(lines)

    def _parse_response(self, payload: Dict[str, Any]) -> CoachResponse:
        """Extract the hint object from the generator reply."""
        try:
            text = payload["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedHintError(f"unexpected reply shape: {e}") from e
        if not isinstance(text, str):
            raise MalformedHintError("reply text is not a string")

        match = JSON_OBJECT_PATTERN.search(text)
        if match is None:
            raise MalformedHintError("no JSON object in reply")
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise MalformedHintError(f"invalid JSON object: {e}") from e

        hint = data.get("hint") if isinstance(data, dict) else None
        if not isinstance(hint, str) or not hint.strip():
            raise MalformedHintError("missing hint")
        hint = hint.strip()
        if len(hint) > self.settings.max_hint_length:
            raise MalformedHintError(f"hint too long ({len(hint)} characters)")

        emoji = data.get("emoji")
        if not isinstance(emoji, str) or not emoji.strip():
            emoji = DEFAULT_EMOJI
        return CoachResponse(hint=hint, emoji=emoji.strip())

    def _check_safety(self, response: CoachResponse, request: CoachRequest) -> None:
        violations = self.safety_filter.find_violations(response.hint, request.module, request.word)
        if violations:
            raise UnsafeHintError("; ".join(violations))

        off_curriculum = [
            word for word in extract_english_words(response.hint)
            if word.lower() not in HINT_ALLOWED_WORDS and not self.validator.is_allowed(word)
        ]
        if off_curriculum:
            raise UnsafeHintError(f"words outside the curriculum: {off_curriculum}")

    def _fallback(self, request: CoachRequest, reason: str) -> HintResult:
        trigger = local_hints.trigger_for_attempts(request.attempt_count)
        hint = local_hints.get_hint(request.module, trigger, self.rng)
        monitoring.hint_fallbacks.labels(reason=reason).inc()
        monitoring.hint_results.labels(source="fallback").inc()
        return HintResult.fallback(CoachResponse(hint=hint, emoji=DEFAULT_EMOJI), reason)
