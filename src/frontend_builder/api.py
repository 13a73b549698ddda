"""FastAPI application exposing the generation pipeline over HTTP."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from frontend_builder.config import Settings, load_settings
from frontend_builder.errors import ErrorKind, GenerationError, PromptValidationError, http_status_for
from frontend_builder.models import GenerateBody
from frontend_builder.pipeline import GenerationPipeline, build_pipeline

logger = logging.getLogger(__name__)

BAD_BODY_MESSAGE = "Request body must be a JSON object with a prompt field"

API_DOCS: dict[str, Any] = {
    "title": "Frontend Builder API Documentation",
    "version": "1.0.0",
    "description": "API for Frontend Builder with Cursor AI integration",
    "endpoints": [
        {
            "method": "POST",
            "path": "/api/generate",
            "description": "Generate code using Cursor AI",
            "requestBody": {
                "type": "application/json",
                "schema": {
                    "prompt": {
                        "type": "string",
                        "required": True,
                        "description": "The prompt to send to Cursor AI",
                        "example": "Create a responsive navbar component",
                    }
                },
            },
            "responses": {
                "200": {"description": "Successful response"},
                "400": {"description": "Bad request - invalid input"},
                "502": {"description": "AI service error"},
                "503": {"description": "AI service not configured"},
                "500": {"description": "Internal server error"},
            },
        }
    ],
    "examples": {
        "request": {"prompt": "Create a modern login form with validation"},
        "response": {
            "success": True,
            "data": {"generatedCode": "...", "codeBlocks": [], "suggestions": []},
            "message": "Code generated successfully",
        },
    },
}


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_response(exc: GenerationError) -> JSONResponse:
    status = http_status_for(exc.kind)
    body: dict[str, Any] = {"success": False, "timestamp": _timestamp()}

    if isinstance(exc, PromptValidationError):
        details = exc.to_dict()
        body["error"] = exc.message
        body["field"] = exc.field
        for key in ("minLength", "maxLength", "currentLength"):
            if key in details:
                body[key] = details[key]
    elif exc.kind is ErrorKind.CONFIGURATION:
        body["error"] = "AI service not configured"
        body["details"] = exc.message
        body["kind"] = exc.kind.value
    else:
        body["error"] = "AI service temporarily unavailable"
        body["details"] = exc.message
        body["kind"] = exc.kind.value
        body["retryable"] = exc.kind.retryable

    return JSONResponse(status_code=status, content=body)


def create_app(
    pipeline: GenerationPipeline | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the HTTP application.

    Args:
        pipeline: Pipeline to serve; built from ``settings`` when omitted.
        settings: Service configuration; loaded from the environment when omitted.
    """
    settings = settings or load_settings()
    pipeline = pipeline or build_pipeline(settings)
    started_at = time.monotonic()

    if not settings.is_configured:
        for problem in settings.describe_problems():
            logger.warning("Configuration problem: %s", problem)

    app = FastAPI(title="Frontend Builder Backend", version="1.0.0", docs_url=None, redoc_url=None)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(GenerationError)
    async def handle_generation_error(request: Request, exc: GenerationError) -> JSONResponse:
        logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind.value, exc)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("%s %s rejected an unreadable body", request.method, request.url.path)
        return _error_response(PromptValidationError(BAD_BODY_MESSAGE, "prompt"))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error", "timestamp": _timestamp()},
        )

    router = APIRouter()

    @router.get("/docs")
    def docs() -> dict[str, Any]:
        return API_DOCS

    @router.post("/generate")
    def generate(body: GenerateBody) -> dict[str, Any]:
        result = pipeline.generate(body.prompt)
        return {
            "success": True,
            "data": result.to_response(),
            "message": "Code generated successfully",
            "timestamp": _timestamp(),
        }

    app.include_router(router, prefix="/api")

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {
            "status": "OK",
            "timestamp": _timestamp(),
            "uptime": round(time.monotonic() - started_at, 3),
            "environment": settings.environment,
        }

    @app.get("/")
    def root() -> dict[str, Any]:
        return {
            "message": "Frontend Builder Backend API",
            "version": "1.0.0",
            "endpoints": {"health": "/health", "generate": "/api/generate", "docs": "/api/docs"},
        }

    return app
