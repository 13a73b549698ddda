"""Pydantic models shared across the client, parser, and HTTP layers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One turn of a chat-completion conversation."""

    role: str
    content: str


class GenerationRequest(BaseModel):
    """Request body sent to the chat-completion endpoint."""

    model_config = ConfigDict(frozen=True)

    model: str
    messages: list[ChatMessage]
    max_tokens: int = Field(gt=0)
    temperature: float = Field(ge=0.0, le=2.0)
    top_p: float = Field(ge=0.0, le=1.0)
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class Completion(BaseModel):
    """Validated upstream reply before post-processing."""

    text: str
    usage: dict[str, Any] | None = None
    model: str | None = None


class CodeBlock(BaseModel):
    """A single fenced code excerpt with its declared language tag."""

    model_config = ConfigDict(frozen=True)

    language: str = "text"
    code: str


class GenerationResult(BaseModel):
    """Structured outcome of one generation run.

    Field names are snake_case in Python; ``model_dump(by_alias=True)`` yields
    the camelCase keys used in JSON responses.
    """

    generated_code: str = Field(serialization_alias="generatedCode")
    code_blocks: list[CodeBlock] = Field(default_factory=list, serialization_alias="codeBlocks")
    suggestions: list[str] = Field(default_factory=list)
    usage: dict[str, Any] | None = None
    model: str = "unknown"

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class GenerateBody(BaseModel):
    """Inbound JSON body for the generate endpoint.

    ``prompt`` is left untyped so that type errors surface through the prompt
    validator with its own messages rather than as a framework 422.
    """

    prompt: Any = None
