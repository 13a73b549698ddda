from __future__ import annotations

from frontend_builder.models import ChatMessage

CONNECTION_CHECK_PROMPT = 'Generate a simple "Hello World" HTML page'


def build_system_prompt() -> str:
    return """You are an expert frontend developer. Generate clean, modern, and responsive code based on user prompts.
Always provide:
1. Complete HTML structure
2. CSS with modern styling (use CSS Grid, Flexbox, custom properties)
3. JavaScript for interactivity if needed
4. Responsive design considerations
5. Accessibility features
6. Clean, commented code

Focus on:
- Modern CSS (Grid, Flexbox, custom properties)
- Responsive design
- Accessibility (ARIA labels, semantic HTML)
- Performance optimization
- Clean, maintainable code
"""


def build_messages(prompt: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=build_system_prompt()),
        ChatMessage(role="user", content=prompt),
    ]
