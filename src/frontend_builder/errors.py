"""Closed error taxonomy shared by validation, the model client, and the HTTP layer."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure category carried by every ``GenerationError``."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    TIMEOUT = "timeout"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    MALFORMED_UPSTREAM_RESPONSE = "malformed_upstream_response"
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        """Whether callers may retry the same request after a backoff."""
        return self in _RETRYABLE_KINDS


_RETRYABLE_KINDS = frozenset(
    {
        ErrorKind.TIMEOUT,
        ErrorKind.RATE_LIMITED,
        ErrorKind.SERVICE_UNAVAILABLE,
    }
)

# Every kind must have an entry; tests enforce this.
HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFIGURATION: 503,
    ErrorKind.TIMEOUT: 502,
    ErrorKind.AUTH: 502,
    ErrorKind.RATE_LIMITED: 502,
    ErrorKind.SERVICE_UNAVAILABLE: 502,
    ErrorKind.MALFORMED_UPSTREAM_RESPONSE: 502,
    ErrorKind.UNKNOWN: 502,
}


def http_status_for(kind: ErrorKind) -> int:
    """Map an error kind to the status code the HTTP layer should answer with."""
    return HTTP_STATUS_BY_KIND[kind]


class GenerationError(RuntimeError):
    """A classified failure scoped to one generation request."""

    def __init__(self, kind: ErrorKind, message: str, detail: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"kind": self.kind.value, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        return payload


class PromptValidationError(GenerationError):
    """Raised when a raw prompt fails one of the input checks."""

    def __init__(
        self,
        message: str,
        field: str = "prompt",
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        current_length: int | None = None,
    ):
        super().__init__(ErrorKind.VALIDATION, message)
        self.field = field
        self.min_length = min_length
        self.max_length = max_length
        self.current_length = current_length

    def to_dict(self) -> dict[str, object]:
        payload = super().to_dict()
        payload["field"] = self.field
        if self.min_length is not None:
            payload["minLength"] = self.min_length
        if self.max_length is not None:
            payload["maxLength"] = self.max_length
        if self.current_length is not None:
            payload["currentLength"] = self.current_length
        return payload
