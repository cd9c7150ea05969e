"""Pydantic request models for the JARK AI Platform API.

Every field is optional.  The service accepts whatever the form sends and
lets missing values flow into the prompt templates, so these models only
normalise types; they do not enforce presence.

Models
------
BrandRequest
    Payload for ``POST /api/brand``.
ContentRequest
    Payload for ``POST /api/content``.
LogoRequest
    Payload for ``POST /api/logo``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def render_json_value(value: Any, *, in_array: bool = False) -> str:
    """Render a decoded JSON value as a JavaScript template literal would.

    - ``null`` renders as ``"null"`` (an empty string inside an array).
    - Booleans render as ``"true"``/``"false"``.
    - Integral numbers drop the fraction (``5.0`` renders as ``"5"``).
    - Arrays join their rendered items with ``","``.
    - Objects render as ``"[object Object]"``.

    Args:
        value: A value produced by JSON decoding.
        in_array: ``True`` when rendering an element of an array.

    Returns:
        The rendered text.
    """
    if value is None:
        return "" if in_array else "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return ",".join(render_json_value(item, in_array=True) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


class _EngineRequest(BaseModel):
    """Shared behaviour for engine request bodies.

    Every supplied value, including an explicit ``null``, is rendered to
    text by :func:`render_json_value`.  Only an absent field stays ``None``.
    Unknown fields are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        return render_json_value(value)


class BrandRequest(_EngineRequest):
    """Request body for the ``POST /api/brand`` endpoint.

    Attributes:
        name: Company name.
        industry: Industry, sent by the form as ``type``.
        problem: Core business problem the brand should address.
        tone: Desired brand tone.
        lang: Language flag; ``"ne"`` selects Nepali.
    """

    name: str | None = Field(default=None, description="Company name.")
    industry: str | None = Field(
        default=None,
        alias="type",
        description="Industry the company operates in.",
    )
    problem: str | None = Field(default=None, description="Core problem to solve.")
    tone: str | None = Field(default=None, description="Brand tone.")
    lang: str | None = Field(default=None, description="Language flag ('ne' for Nepali).")


class ContentRequest(_EngineRequest):
    """Request body for the ``POST /api/content`` endpoint.

    Attributes:
        brand_data: Brand blueprint text, typically the output of the brand
            engine.  Sent as ``brandData``.
        platform: Target publishing platform.
        goal: Content goal.
        lang: Language flag; ``"ne"`` selects Nepali.
    """

    brand_data: str | None = Field(
        default=None,
        alias="brandData",
        description="Brand blueprint text.",
    )
    platform: str | None = Field(default=None, description="Target platform.")
    goal: str | None = Field(default=None, description="Content goal.")
    lang: str | None = Field(default=None, description="Language flag ('ne' for Nepali).")


class LogoRequest(_EngineRequest):
    """Request body for the ``POST /api/logo`` endpoint."""

    name: str | None = Field(default=None, description="Company name.")
    industry: str | None = Field(
        default=None,
        alias="type",
        description="Industry the company operates in.",
    )
    tone: str | None = Field(default=None, description="Brand tone.")
