"""LangChain ChatAnthropic wrapper for the "animate this SVG" transformation."""

from __future__ import annotations

import asyncio
import logging
import re

from morphlab.config import Settings, settings as default_settings
from morphlab.llm.prompts import get_prompt_template

logger = logging.getLogger(__name__)


class TransformationError(RuntimeError):
    """The transformation service failed or returned nothing usable."""


def extract_svg(text: str) -> str:
    """Extract SVG from LLM output, stripping markdown fences and surrounding text."""
    stripped = re.sub(r"^```(?:xml|svg|html)?\s*\n?", "", text.strip())
    stripped = re.sub(r"\n?```\s*$", "", stripped)
    stripped = stripped.strip()

    match = re.search(r"(<svg[\s\S]*</svg>)", stripped, re.IGNORECASE)
    if match:
        return match.group(1).strip()

    return stripped


async def transform_svg(svg: str, action: str, settings: Settings | None = None) -> str:
    """Ask the model to apply ``action`` to ``svg``; returns the raw result SVG text."""
    settings = settings or default_settings
    if not settings.anthropic_api_key:
        logger.error("ANTHROPIC_API_KEY not set")
        raise TransformationError("ANTHROPIC_API_KEY not set")

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    llm = ChatAnthropic(
        model=settings.model_transform,
        api_key=settings.anthropic_api_key,
        max_tokens=settings.transform_max_tokens,
        temperature=settings.transform_temperature,
    )

    system_msg = get_prompt_template("transform").format(svg=svg, action=action)
    messages: list = [SystemMessage(content=system_msg), HumanMessage(content=action)]

    logger.info("Sending transform request to %s (%d bytes)", settings.model_transform, len(svg))
    try:
        response = await asyncio.wait_for(llm.ainvoke(messages), timeout=settings.transform_timeout_s)
    except asyncio.TimeoutError as e:
        logger.error("Transform timed out after %.0fs", settings.transform_timeout_s)
        raise TransformationError("Failed to transform SVG: Model error or timeout") from e
    except Exception as e:
        logger.error("Model error: %s", e)
        raise TransformationError("Failed to transform SVG: Model error or timeout") from e

    result = extract_svg(_content_text(response.content))
    if not result:
        raise TransformationError("Empty response from model")

    logger.info("Received transformed SVG (%d bytes)", len(result))
    return result


def _content_text(content: object) -> str:
    if isinstance(content, str):
        return content
    # Block-list content: keep the text blocks
    parts: list[str] = []
    for block in content or []:
        if isinstance(block, dict) and block.get("type") == "text":
            parts.append(str(block.get("text", "")))
        elif isinstance(block, str):
            parts.append(block)
    return "".join(parts)
