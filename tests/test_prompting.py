from __future__ import annotations

from frontend_builder.prompting import build_messages, build_system_prompt


def test_build_system_prompt_given_no_args_when_called_then_core_requirements_exist() -> None:
    # When
    prompt = build_system_prompt()

    # Then
    assert "expert frontend developer" in prompt
    assert "Complete HTML structure" in prompt
    assert "Accessibility (ARIA labels, semantic HTML)" in prompt
    assert "Clean, commented code" in prompt


def test_build_messages_given_prompt_when_called_then_system_turn_precedes_user_turn() -> None:
    # When
    messages = build_messages("Create a hero section")

    # Then
    assert [message.role for message in messages] == ["system", "user"]
    assert messages[1].content == "Create a hero section"
