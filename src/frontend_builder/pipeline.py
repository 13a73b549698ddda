"""Validate -> call -> parse -> suggest, for one prompt at a time."""

from __future__ import annotations

from typing import Protocol

from frontend_builder.config import Settings, load_settings
from frontend_builder.generator import CodeGenerationClient
from frontend_builder.models import GenerationResult
from frontend_builder.validation import validate_prompt


class CodeGenerator(Protocol):
    def generate_code(self, prompt: str) -> GenerationResult:
        ...


class GenerationPipeline:
    """Stateless orchestration around an injected code generator."""

    def __init__(self, client: CodeGenerator):
        self.client = client

    def generate(self, raw_prompt: object) -> GenerationResult:
        # Validation failures raise here, before any network call.
        prompt = validate_prompt(raw_prompt)
        return self.client.generate_code(prompt)


def build_pipeline(settings: Settings | None = None) -> GenerationPipeline:
    """Create a pipeline backed by the HTTP client."""
    return GenerationPipeline(CodeGenerationClient(settings or load_settings()))
