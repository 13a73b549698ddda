"""Runtime settings resolved from the environment, an optional ``.env`` file, and a key file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from frontend_builder.errors import ErrorKind, GenerationError

DEFAULT_KEY_FILE = Path(".api_keys/Cursor.md")
DEFAULT_API_URL = "https://api.cursor.sh/v1/chat/completions"
PLACEHOLDER_API_KEY = "your_real_cursor_ai_api_key"

# Settings field -> environment variable.
ENV_VARS: dict[str, str] = {
    "api_url": "CURSOR_API_URL",
    "timeout_seconds": "CURSOR_API_TIMEOUT",
    "model": "CURSOR_MODEL",
    "max_tokens": "CURSOR_MAX_TOKENS",
    "temperature": "CURSOR_TEMPERATURE",
    "frontend_url": "FRONTEND_URL",
    "port": "PORT",
    "environment": "APP_ENV",
}

ENV_TEMPLATE = f"""# Cursor AI API Configuration
CURSOR_API_KEY={PLACEHOLDER_API_KEY}
CURSOR_API_URL={DEFAULT_API_URL}

# Server Configuration
PORT=3001
APP_ENV=development

# CORS Configuration
FRONTEND_URL=http://localhost:3000
"""


class Settings(BaseModel):
    """Read-only service configuration.

    Generation parameters default to the values the service has always sent;
    each can be overridden through the variables listed in ``ENV_VARS``.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    api_url: str | None = DEFAULT_API_URL
    timeout_seconds: float = Field(default=30.0, gt=0)
    model: str = "gpt-4"
    max_tokens: int = Field(default=2000, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    frontend_url: str = "http://localhost:3000"
    port: int = 3001
    environment: str = "development"

    @property
    def has_real_api_key(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    @property
    def is_configured(self) -> bool:
        return self.has_real_api_key and bool(self.api_url)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def describe_problems(self) -> list[str]:
        """List human-readable reasons the service cannot call the model API."""
        problems: list[str] = []
        if not self.api_key:
            problems.append("CURSOR_API_KEY is not set")
        elif self.api_key == PLACEHOLDER_API_KEY:
            problems.append("CURSOR_API_KEY still uses the placeholder value")
        if not self.api_url:
            problems.append("CURSOR_API_URL is not set")
        return problems


def resolve_api_key(
    env: Mapping[str, str] | None = None,
    key_file: Path = DEFAULT_KEY_FILE,
) -> str | None:
    """Find the Cursor AI key for this process.

    ``CURSOR_API_KEY`` wins when it holds anything besides whitespace. Local
    runs without a ``.env`` can instead keep the bare key in ``key_file``
    (``.api_keys/Cursor.md`` by default). Tests pass ``env`` to avoid reading
    the real process environment.
    """
    environ = os.environ if env is None else env
    from_env = environ.get("CURSOR_API_KEY", "").strip()
    if from_env:
        return from_env

    if not key_file.is_file():
        return None
    return key_file.read_text(encoding="utf-8").strip() or None


def load_settings(
    env: Mapping[str, str] | None = None,
    key_file: Path = DEFAULT_KEY_FILE,
    dotenv: bool = True,
) -> Settings:
    """Build ``Settings`` from environment variables.

    Args:
        env: Explicit environment mapping. When omitted, ``.env`` is loaded
            (unless ``dotenv`` is False) and ``os.environ`` is used.
        key_file: Fallback file for the API key.
        dotenv: Whether to load a ``.env`` file before reading ``os.environ``.

    Raises:
        GenerationError: With kind ``CONFIGURATION`` if a value is malformed.
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    values: dict[str, object] = {"api_key": resolve_api_key(env, key_file=key_file)}
    for field_name, var_name in ENV_VARS.items():
        raw = env.get(var_name)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise GenerationError(
            ErrorKind.CONFIGURATION,
            f"Invalid service configuration: {exc.error_count()} bad value(s)",
            detail=str(exc),
        ) from exc
