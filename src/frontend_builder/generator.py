"""HTTP adapter for the chat-completion service and its failure classification."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from frontend_builder.config import Settings
from frontend_builder.errors import ErrorKind, GenerationError
from frontend_builder.models import Completion, GenerationRequest, GenerationResult
from frontend_builder.parsing import build_result
from frontend_builder.prompting import CONNECTION_CHECK_PROMPT, build_messages

logger = logging.getLogger(__name__)

USER_AGENT = "Frontend-Builder/1.0.0"


def _preview(text: str, limit: int = 100) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


def _upstream_error_message(response: requests.Response) -> str | None:
    """Pull ``error.message`` out of an error body when the service sent one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    if isinstance(error, str) and error:
        return error
    return None


def classify_http_error(response: requests.Response) -> GenerationError:
    """Translate a non-2xx response into a ``GenerationError``."""
    status = response.status_code
    detail = _upstream_error_message(response)

    if status == 401:
        return GenerationError(
            ErrorKind.AUTH,
            "Invalid API key - please check your Cursor AI credentials",
            detail=detail,
        )
    if status == 429:
        return GenerationError(
            ErrorKind.RATE_LIMITED,
            "Rate limit exceeded - please try again later",
            detail=detail,
        )
    if 500 <= status < 600:
        return GenerationError(
            ErrorKind.SERVICE_UNAVAILABLE,
            "Cursor AI service is temporarily unavailable",
            detail=detail,
        )
    return GenerationError(
        ErrorKind.UNKNOWN,
        f"Cursor AI API error: {detail or f'HTTP {status}'}",
        detail=detail,
    )


def parse_completion(payload: Any) -> Completion:
    """Validate the success body shape and extract the reply text.

    Raises:
        GenerationError: With kind ``MALFORMED_UPSTREAM_RESPONSE`` when the
            payload has no ``choices[0].message`` or the message has no
            string ``content``.
    """
    choices = payload.get("choices") if isinstance(payload, dict) else None
    first = choices[0] if isinstance(choices, list) and choices else None
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        raise GenerationError(
            ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
            "Invalid response format from Cursor AI",
        )

    content = message.get("content")
    if not isinstance(content, str):
        raise GenerationError(
            ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
            "Cursor AI response message has no text content",
        )

    usage = payload.get("usage")
    model = payload.get("model")
    return Completion(
        text=content,
        usage=usage if isinstance(usage, dict) else None,
        model=model if isinstance(model, str) and model else None,
    )


class CodeGenerationClient:
    """Thin adapter around an OpenAI-style chat-completions endpoint."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        """Create a client bound to ``settings``.

        Args:
            settings: Read-only service configuration.
            session: Optional HTTP session; tests pass a stub here.
        """
        self.settings = settings
        self.session = session or requests.Session()

    def build_request(self, prompt: str) -> GenerationRequest:
        return GenerationRequest(
            model=self.settings.model,
            messages=build_messages(prompt),
            max_tokens=self.settings.max_tokens,
            temperature=self.settings.temperature,
            top_p=self.settings.top_p,
            frequency_penalty=self.settings.frequency_penalty,
            presence_penalty=self.settings.presence_penalty,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def _ensure_configured(self) -> None:
        if not self.settings.has_real_api_key:
            raise GenerationError(ErrorKind.CONFIGURATION, "Cursor AI API key not configured")
        if not self.settings.api_url:
            raise GenerationError(ErrorKind.CONFIGURATION, "Cursor AI API URL not configured")

    def complete(self, prompt: str) -> Completion:
        """Send one completion request and return the validated reply.

        Args:
            prompt: Sanitized prompt text.

        Returns:
            Reply text plus usage and model metadata as sent by the service.

        Raises:
            GenerationError: Classified by configuration, transport, HTTP
                status, or body shape. No retry is attempted.
        """
        self._ensure_configured()
        request = self.build_request(prompt)

        logger.info("Sending request to Cursor AI: %s", _preview(prompt))
        start = time.perf_counter()
        try:
            response = self.session.post(
                self.settings.api_url,
                json=request.to_payload(),
                headers=self._headers(),
                timeout=self.settings.timeout_seconds,
            )
        except requests.Timeout as exc:
            logger.warning("Cursor AI request timed out after %ss", self.settings.timeout_seconds)
            raise GenerationError(
                ErrorKind.TIMEOUT,
                "Request timeout - Cursor AI took too long to respond",
                detail=str(exc),
            ) from exc
        except requests.ConnectionError as exc:
            logger.warning("Cursor AI connection failed: %s", exc)
            raise GenerationError(
                ErrorKind.SERVICE_UNAVAILABLE,
                "Unable to connect to Cursor AI service",
                detail=str(exc),
            ) from exc
        except requests.RequestException as exc:
            logger.error("Cursor AI request failed: %s", exc)
            raise GenerationError(
                ErrorKind.UNKNOWN,
                f"Cursor AI request failed: {exc}",
                detail=str(exc),
            ) from exc

        latency_ms = int((time.perf_counter() - start) * 1000)
        if not 200 <= response.status_code < 300:
            error = classify_http_error(response)
            logger.error(
                "Cursor AI returned HTTP %s (%s) in %sms",
                response.status_code,
                error.kind.value,
                latency_ms,
            )
            raise error

        try:
            payload = response.json()
        except ValueError as exc:
            raise GenerationError(
                ErrorKind.MALFORMED_UPSTREAM_RESPONSE,
                "Cursor AI returned a non-JSON response",
                detail=response.text[:200],
            ) from exc

        completion = parse_completion(payload)
        logger.info("Cursor AI replied in %sms (model=%s)", latency_ms, completion.model or "unknown")
        return completion

    def generate_code(self, prompt: str) -> GenerationResult:
        """Generate frontend code for an already-sanitized prompt."""
        return build_result(prompt, self.complete(prompt))

    def check_connection(self) -> bool:
        """Return True when a small test generation round-trips successfully."""
        try:
            self.generate_code(CONNECTION_CHECK_PROMPT)
        except GenerationError as exc:
            logger.error("Connection test failed: %s", exc)
            return False
        return True
