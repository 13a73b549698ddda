from __future__ import annotations

import pytest

from frontend_builder.errors import ErrorKind, PromptValidationError
from frontend_builder.validation import (
    MAX_PROMPT_LENGTH,
    MIN_PROMPT_LENGTH,
    contains_harmful_content,
    sanitize_prompt,
    validate_prompt,
)


def test_validate_prompt_given_valid_text_when_validated_then_sanitized_prompt_is_returned() -> None:
    # Given
    raw = "   Create a   responsive\n\tnavbar component   "

    # When
    prompt = validate_prompt(raw)

    # Then
    assert prompt == "Create a responsive navbar component"


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        (None, "Prompt is required"),
        ("", "Prompt is required"),
        (0, "Prompt is required"),
        (False, "Prompt is required"),
        ([], "Prompt is required"),
        ({}, "Prompt is required"),
        (12345678901, "Prompt must be a string"),
        (["a list prompt"], "Prompt must be a string"),
        ("     ", "Prompt cannot be empty"),
        ("\n\t  \n", "Prompt cannot be empty"),
    ],
)
def test_validate_prompt_given_missing_or_blank_input_when_validated_then_fails_with_message(
    raw: object,
    message: str,
) -> None:
    # When
    with pytest.raises(PromptValidationError) as excinfo:
        validate_prompt(raw)

    # Then
    assert excinfo.value.message == message
    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert excinfo.value.field == "prompt"


def test_validate_prompt_given_nine_characters_when_validated_then_too_short_reports_lengths() -> None:
    # Given
    raw = "123456789"

    # When
    with pytest.raises(PromptValidationError) as excinfo:
        validate_prompt(raw)

    # Then
    error = excinfo.value
    assert "too short" in error.message
    assert error.min_length == MIN_PROMPT_LENGTH
    assert error.current_length == 9
    assert error.max_length is None


def test_validate_prompt_given_5001_characters_when_validated_then_too_long_reports_lengths() -> None:
    # Given
    raw = "a" * (MAX_PROMPT_LENGTH + 1)

    # When
    with pytest.raises(PromptValidationError) as excinfo:
        validate_prompt(raw)

    # Then
    error = excinfo.value
    assert "too long" in error.message
    assert error.max_length == MAX_PROMPT_LENGTH
    assert error.current_length == 5001
    assert error.to_dict()["maxLength"] == 5000


def test_validate_prompt_given_boundary_lengths_when_validated_then_both_pass() -> None:
    # Given
    shortest = "a" * MIN_PROMPT_LENGTH
    longest = "b" * MAX_PROMPT_LENGTH

    # When / Then
    assert validate_prompt(shortest) == shortest
    assert validate_prompt(longest) == longest


@pytest.mark.parametrize(
    "raw",
    [
        "Build a page with <script>alert(1)</script> inside",
        "Build a page with <SCRIPT type='x'>\nalert(1)\n</ScRiPt> inside",
        "Add a link to JavaScript:alert(1) for the menu",
        'Add a button with onclick="doThing()" handler',
        "Add a button with ONMOUSEOVER = 'x' handler",
        "Please call eval (userInput) somewhere",
        "Read the Document.Cookie and show it on screen",
    ],
)
def test_validate_prompt_given_harmful_pattern_when_validated_then_fails_regardless_of_case(raw: str) -> None:
    # When
    with pytest.raises(PromptValidationError) as excinfo:
        validate_prompt(raw)

    # Then
    assert excinfo.value.message == "Prompt contains potentially harmful content"


def test_contains_harmful_content_given_plain_request_when_checked_then_false() -> None:
    assert contains_harmful_content("Create a pricing table with three tiers") is False


def test_validate_prompt_given_short_text_padded_with_spaces_when_validated_then_too_short() -> None:
    # Given
    raw = "Hi" + " " * 8

    # When
    with pytest.raises(PromptValidationError) as excinfo:
        validate_prompt(raw)

    # Then
    assert "too short" in excinfo.value.message
    assert excinfo.value.current_length == 2


def test_validate_prompt_given_internal_whitespace_runs_when_validated_then_collapsed_length_counts() -> None:
    # Given
    raw = "ab" + " " * 10 + "cd"

    # When
    with pytest.raises(PromptValidationError) as excinfo:
        validate_prompt(raw)

    # Then
    assert excinfo.value.current_length == len("ab cd")


def test_validate_prompt_given_long_text_with_leading_padding_when_validated_then_accepted() -> None:
    # Given
    raw = " " * 10 + "a" * 4995

    # When
    prompt = validate_prompt(raw)

    # Then
    assert prompt == "a" * 4995
    assert MIN_PROMPT_LENGTH <= len(prompt) <= MAX_PROMPT_LENGTH


@pytest.mark.parametrize(
    "text",
    [
        "  Create   a navbar  ",
        "line one\n\n\nline two\t\tend",
        "word " * 1200,
    ],
)
def test_sanitize_prompt_given_any_text_when_resanitized_then_result_is_stable(text: str) -> None:
    # When
    once = sanitize_prompt(text)
    twice = sanitize_prompt(once)

    # Then
    assert once == twice
    assert len(once) <= MAX_PROMPT_LENGTH
    assert "  " not in once
