"""Prompt validation and sanitization applied before any model call."""

from __future__ import annotations

import re

from frontend_builder.errors import PromptValidationError

PROMPT_FIELD = "prompt"
MIN_PROMPT_LENGTH = 10
MAX_PROMPT_LENGTH = 5000

HARMFUL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),
    re.compile(r"eval\s*\(", re.IGNORECASE),
    re.compile(r"document\.cookie", re.IGNORECASE),
)

_WHITESPACE_RUN = re.compile(r"\s+")


def validate_prompt(raw: object) -> str:
    """Validate raw user input and return the sanitized prompt.

    Checks run in a fixed order and the first failure wins:
    presence, type, blankness, maximum length, minimum length, harmful content.
    Lengths are measured on the whitespace-normalized text, so the returned
    prompt always satisfies the length bounds.

    Args:
        raw: Value taken from the request body.

    Returns:
        The sanitized prompt text.

    Raises:
        PromptValidationError: If any check fails.
    """
    # Falsy values such as 0, False, [] and {} count as missing.
    if not raw:
        raise PromptValidationError("Prompt is required", PROMPT_FIELD)

    if not isinstance(raw, str):
        raise PromptValidationError("Prompt must be a string", PROMPT_FIELD)

    if not raw.strip():
        raise PromptValidationError("Prompt cannot be empty", PROMPT_FIELD)

    normalized = _normalize_whitespace(raw)
    length = len(normalized)
    if length > MAX_PROMPT_LENGTH:
        raise PromptValidationError(
            f"Prompt is too long (maximum {MAX_PROMPT_LENGTH} characters)",
            PROMPT_FIELD,
            max_length=MAX_PROMPT_LENGTH,
            current_length=length,
        )

    if length < MIN_PROMPT_LENGTH:
        raise PromptValidationError(
            f"Prompt is too short (minimum {MIN_PROMPT_LENGTH} characters)",
            PROMPT_FIELD,
            min_length=MIN_PROMPT_LENGTH,
            current_length=length,
        )

    if contains_harmful_content(raw):
        raise PromptValidationError("Prompt contains potentially harmful content", PROMPT_FIELD)

    return sanitize_prompt(raw)


def contains_harmful_content(text: str) -> bool:
    """Return True when any harmful-content pattern matches ``text``."""
    return any(pattern.search(text) for pattern in HARMFUL_PATTERNS)


def _normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text.strip())


def sanitize_prompt(text: str) -> str:
    """Trim, collapse whitespace runs, and bound the prompt length."""
    collapsed = _normalize_whitespace(text)
    # rstrip keeps the result stable when the cut lands on a space.
    return collapsed[:MAX_PROMPT_LENGTH].rstrip()
