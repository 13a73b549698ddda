"""Typer-based CLI for generating frontend code and running the HTTP service."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from frontend_builder.config import ENV_TEMPLATE, load_settings
from frontend_builder.errors import GenerationError
from frontend_builder.generator import CodeGenerationClient
from frontend_builder.models import GenerationResult
from frontend_builder.pipeline import GenerationPipeline

app = typer.Typer(add_completion=False, help="frontend-builder: generate UI code from natural-language prompts")

DEFAULT_ENV_PATH = Path(".env")


def _echo_step(step: int, total: int, message: str) -> None:
    """Print a normalized progress step line."""
    typer.echo(f"[{step}/{total}] {message}")


def _fail(exc: GenerationError) -> None:
    typer.echo(f"{exc.kind.value}: {exc.message}", err=True)
    if exc.detail:
        typer.echo(f"    detail: {exc.detail}", err=True)
    raise typer.Exit(code=1)


def _echo_result(result: GenerationResult) -> None:
    typer.echo(f"model={result.model} blocks={len(result.code_blocks)}")
    for index, block in enumerate(result.code_blocks, start=1):
        typer.echo(f"\n--- block {index} ({block.language}) ---")
        typer.echo(block.code)
    if result.suggestions:
        typer.echo("\nSuggestions:")
        for suggestion in result.suggestions:
            typer.echo(f"- {suggestion}")


@app.command("generate")
def generate(
    prompt: str = typer.Argument(..., help="Description of the UI to generate"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    """Validate a prompt, call the model, and print code blocks with suggestions."""
    try:
        _echo_step(1, 2, "Loading configuration")
        settings = load_settings()
        pipeline = GenerationPipeline(CodeGenerationClient(settings))

        _echo_step(2, 2, f"Calling model {settings.model}")
        result = pipeline.generate(prompt)
    except GenerationError as exc:
        _fail(exc)
        return

    if as_json:
        typer.echo(json.dumps(result.to_response(), indent=2, ensure_ascii=False))
    else:
        _echo_result(result)


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: int | None = typer.Option(None, help="Port; defaults to PORT or 3001"),
    log_level: str = typer.Option("info", help="Logging level"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from frontend_builder.api import create_app

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        settings = load_settings()
    except GenerationError as exc:
        _fail(exc)
        return

    bind_port = port or settings.port
    typer.echo(f"Server running on http://{host}:{bind_port} (health: /health, generate: /api/generate)")
    uvicorn.run(create_app(settings=settings), host=host, port=bind_port, log_level=log_level.lower())


@app.command("doctor")
def doctor() -> None:
    """Print configuration diagnostics used by the service."""
    try:
        settings = load_settings()
    except GenerationError as exc:
        _fail(exc)
        return

    typer.echo(f"API URL: {settings.api_url}")
    typer.echo(f"API key set: {settings.has_real_api_key}")
    typer.echo(f"Model: {settings.model} (timeout={settings.timeout_seconds}s)")
    for problem in settings.describe_problems():
        typer.echo(f"problem: {problem}")


@app.command("check-connection")
def check_connection() -> None:
    """Send a small test prompt and report whether the model API answered."""
    try:
        settings = load_settings()
    except GenerationError as exc:
        _fail(exc)
        return

    ok = CodeGenerationClient(settings).check_connection()
    typer.echo(f"Connection ok: {ok}")
    if not ok:
        raise typer.Exit(code=1)


@app.command("init-env")
def init_env(
    path: Path = typer.Option(DEFAULT_ENV_PATH, "--path", help="Where to write the .env template"),
) -> None:
    """Write a .env template with placeholder credentials if none exists."""
    if path.exists():
        typer.echo(f".env already exists: {path}")
        return

    path.write_text(ENV_TEMPLATE, encoding="utf-8")
    typer.echo(f".env created: {path}")
    typer.echo("Next: set CURSOR_API_KEY in the file, then run `frontend-builder serve`.")


if __name__ == "__main__":
    app()
