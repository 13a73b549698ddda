"""Post-processing of raw model replies into structured generation results."""

from __future__ import annotations

import re

from frontend_builder.models import CodeBlock, Completion, GenerationResult
from frontend_builder.suggestions import generate_suggestions

DEFAULT_LANGUAGE = "text"

# Nested fences are not supported: the first closing ``` ends the block.
_FENCED_BLOCK = re.compile(r"```(\w+)?[ \t]*\n(.*?)```", re.DOTALL)


def extract_code_blocks(text: str) -> list[CodeBlock]:
    """Extract fenced code blocks from model output in order of appearance.

    Args:
        text: Raw model response text.

    Returns:
        One ``CodeBlock`` per fenced region. Blocks without a language tag are
        labelled ``"text"``. Bodies are trimmed at both ends only.
    """
    if not text:
        return []

    return [
        CodeBlock(language=match.group(1) or DEFAULT_LANGUAGE, code=match.group(2).strip())
        for match in _FENCED_BLOCK.finditer(text)
    ]


def build_result(prompt: str, completion: Completion) -> GenerationResult:
    """Assemble the final result from a sanitized prompt and upstream reply."""
    return GenerationResult(
        generated_code=completion.text,
        code_blocks=extract_code_blocks(completion.text),
        suggestions=generate_suggestions(prompt, completion.text),
        usage=completion.usage,
        model=completion.model or "unknown",
    )
