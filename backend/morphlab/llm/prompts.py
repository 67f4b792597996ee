"""Prompt templates for the transformation model."""

from __future__ import annotations

_TRANSFORM_TEMPLATE = """You are an expert SVG animator and designer.
I will give you an SVG file. I want you to transform it by applying the following action/animation: "{action}".

OUTPUT RULES:
- Return ONLY the raw transformed SVG code. No markdown formatting like ```xml or ```svg.
- Just the pure raw SVG string starting with <svg> and ending with </svg>.
- Animate using standard SVG <animate>, <animateTransform>, or CSS embedded inside the SVG.
- Keep the original viewBox and scaling intact, but make it visually execute the requested action.

=== ORIGINAL SVG ===
{svg}"""

_TEMPLATES = {
    "transform": _TRANSFORM_TEMPLATE,
}

# Preset actions offered next to the free-text action field
PRESET_ACTIONS: dict[str, str] = {
    "Dance": "make it dance with lively movements",
    "Jump": "make it jump up and down smoothly",
    "Spin": "make it spin continuously in a circle",
    "Pulse Colors": "pulse its colors radiantly",
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES.get(task, _TRANSFORM_TEMPLATE)


def get_all_templates() -> dict[str, str]:
    """Return all prompt templates keyed by task name."""
    return dict(_TEMPLATES)
