"""Prompt template rendering for the three generation engines.

Each engine has one fixed natural-language template.  Request fields are
interpolated as-is; a missing field renders as the literal ``undefined``
rather than raising, so the upstream model still receives a complete
prompt.  The router resolves each engine's builder from
:data:`PROMPT_BUILDERS`.

Language Directive
------------------
The brand and content templates carry a language directive selected by the
request's ``lang`` flag:

- ``"ne"`` selects ``"Respond only in Nepali language."``
- anything else, including a missing flag, selects
  ``"Respond only in English."``

Usage
-----
::

    prompt = build_prompt("brand", BrandRequest(name="Acme", lang="ne"))
"""

from __future__ import annotations

from collections.abc import Callable

from jark.api.models import BrandRequest, ContentRequest, LogoRequest

NEPALI_DIRECTIVE = "Respond only in Nepali language."
ENGLISH_DIRECTIVE = "Respond only in English."

# Rendered in place of any field the caller left out.
MISSING_FIELD = "undefined"

_BRAND_TEMPLATE = """
You are a senior branding strategist.
{lang_rule}

Company: {name}
Industry: {industry}
Core Problem: {problem}
Brand Tone: {tone}

Deliver:
1. Brand Personality
2. Positioning Statement
3. Slogan
4. Logo Style
5. Content Direction
6. Do's & Don'ts
"""

_CONTENT_TEMPLATE = """
You are a content growth expert.
{lang_rule}

Brand:
{brand_data}

Platform: {platform}
Goal: {goal}
"""

_LOGO_TEMPLATE = "Minimal modern logo for {name}, industry {industry}, tone {tone}"


def _field(value: str | None) -> str:
    return MISSING_FIELD if value is None else value


def language_directive(lang: str | None) -> str:
    """Return the response-language instruction for a language flag.

    Args:
        lang: The request's language flag.  Only the exact value ``"ne"``
            selects Nepali.

    Returns:
        The Nepali or English directive sentence.
    """
    return NEPALI_DIRECTIVE if lang == "ne" else ENGLISH_DIRECTIVE


def build_brand_prompt(req: BrandRequest) -> str:
    """Render the branding-strategist prompt."""
    return _BRAND_TEMPLATE.format(
        lang_rule=language_directive(req.lang),
        name=_field(req.name),
        industry=_field(req.industry),
        problem=_field(req.problem),
        tone=_field(req.tone),
    )


def build_content_prompt(req: ContentRequest) -> str:
    """Render the content-growth prompt around a brand blueprint."""
    return _CONTENT_TEMPLATE.format(
        lang_rule=language_directive(req.lang),
        brand_data=_field(req.brand_data),
        platform=_field(req.platform),
        goal=_field(req.goal),
    )


def build_logo_prompt(req: LogoRequest) -> str:
    """Render the one-line logo description sent to image generation.

    The logo engine has no language flag; image models take the English
    description directly.
    """
    return _LOGO_TEMPLATE.format(
        name=_field(req.name),
        industry=_field(req.industry),
        tone=_field(req.tone),
    )


PROMPT_BUILDERS: dict[str, Callable] = {
    "brand": build_brand_prompt,
    "content": build_content_prompt,
    "logo": build_logo_prompt,
}


def build_prompt(engine: str, req: BrandRequest | ContentRequest | LogoRequest) -> str:
    """Render the prompt for *engine* from its request model.

    Args:
        engine: One of ``"brand"``, ``"content"`` or ``"logo"``.
        req: The request model matching *engine*.

    Returns:
        The rendered prompt.  Identical inputs always produce an identical
        string.

    Raises:
        ValueError: If *engine* is not a known engine name.
    """
    try:
        builder = PROMPT_BUILDERS[engine]
    except KeyError:
        raise ValueError(f"Unknown engine: {engine}") from None
    return builder(req)
