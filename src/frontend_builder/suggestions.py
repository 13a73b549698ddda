"""Heuristic quality checks over generated frontend code."""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple


class SuggestionCheck(NamedTuple):
    name: str
    triggered: Callable[[str, str], bool]
    message: str


def _lacks_all(text: str, *markers: str) -> bool:
    return not any(marker in text for marker in markers)


SUGGESTION_CHECKS: tuple[SuggestionCheck, ...] = (
    SuggestionCheck(
        name="responsive",
        triggered=lambda prompt, text: _lacks_all(text, "@media", "responsive"),
        message="Consider adding responsive design with CSS media queries",
    ),
    SuggestionCheck(
        name="accessibility",
        triggered=lambda prompt, text: _lacks_all(text, "aria-", "alt=", "role="),
        message="Add accessibility features like ARIA labels and alt text",
    ),
    SuggestionCheck(
        name="layout",
        triggered=lambda prompt, text: _lacks_all(text, "grid", "flex"),
        message="Consider using CSS Grid or Flexbox for better layouts",
    ),
    SuggestionCheck(
        name="interactivity",
        triggered=lambda prompt, text: "interactive" in prompt.lower()
        and _lacks_all(text, "addEventListener"),
        message="Add JavaScript for interactive functionality",
    ),
)


def generate_suggestions(
    prompt: str,
    generated_text: str,
    checks: tuple[SuggestionCheck, ...] = SUGGESTION_CHECKS,
) -> list[str]:
    """Return improvement hints for ``generated_text`` in check order.

    Marker matching is case-sensitive on the generated text; only the
    interactivity check looks at the prompt, case-insensitively.
    """
    return [check.message for check in checks if check.triggered(prompt, generated_text)]
