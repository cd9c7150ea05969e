"""Upstream generative-AI client for the JARK AI Platform.

This module is the single boundary between the application and the external
generative service.  It exposes two operations, text completion and image
generation, and never raises for upstream failures.  Every call returns a
:class:`GenerationResult` that either carries the generated value or an
:class:`UpstreamError`, and the router consumes that result explicitly.

Client Hierarchy
----------------
:class:`GenerationClient`
    Abstract interface used by the router.  Tests substitute a stub.
:class:`OpenAIGenerationClient`
    Production implementation built on the official ``openai`` async SDK.

Usage
-----
::

    from jark.core.config import config
    from jark.core.generation_client import OpenAIGenerationClient

    client = OpenAIGenerationClient.from_config(config)
    result = await client.complete_text("Write a slogan.", temperature=0.6)
    if result.ok:
        print(result.text)

    await client.aclose()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from openai import AsyncOpenAI

from jark.core.config import JarkConfig

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Any failure reported by, or while talking to, the generative service.

    Network failures, authentication failures, malformed responses and empty
    result lists all collapse into this one kind.  The originating SDK
    exception, when there is one, is chained as ``__cause__``.
    """

    pass


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single upstream call.

    Exactly one of ``text``, ``image_url`` or ``error`` is set.

    Attributes:
        text: Completion text returned by :meth:`GenerationClient.complete_text`.
        image_url: Image URL returned by :meth:`GenerationClient.generate_image`.
        error: The upstream failure, or ``None`` on success.
    """

    text: str | None = None
    image_url: str | None = None
    error: UpstreamError | None = None

    @property
    def ok(self) -> bool:
        """``True`` when the call produced a value."""
        return self.error is None

    @classmethod
    def failure(cls, message: str, cause: BaseException | None = None) -> GenerationResult:
        """Build a failed result, chaining *cause* onto the error."""
        error = UpstreamError(message)
        error.__cause__ = cause
        return cls(error=error)


class GenerationClient(ABC):
    """Abstract interface for the generative service.

    Implementations must be safe for unlimited concurrent use and must
    report failures through :class:`GenerationResult` rather than raising.
    """

    @abstractmethod
    async def complete_text(self, prompt: str, temperature: float) -> GenerationResult:
        """Send *prompt* as a single user message and return the first choice."""

    @abstractmethod
    async def generate_image(self, prompt: str) -> GenerationResult:
        """Generate one square image for *prompt* and return its URL."""

    async def aclose(self) -> None:
        """Release any network resources held by the client."""
        return None


class OpenAIGenerationClient(GenerationClient):
    """Generation client backed by :class:`openai.AsyncOpenAI`.

    The SDK client is created once and shared by every request.  When no API
    key is configured the SDK client is not created at all and each call
    returns a failed result, so a missing credential surfaces at the
    upstream boundary rather than at startup.

    Attributes:
        completion_model: Model identifier for chat completions.
        image_model: Model identifier for image generation.
        image_size: Size string passed to image generation (e.g. ``"1024x1024"``).
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        completion_model: str = "gpt-4o-mini",
        image_model: str = "gpt-image-1",
        image_size: str = "1024x1024",
        client: Any | None = None,
    ) -> None:
        """Initialise the client.

        Args:
            api_key: Credential for the generative service, or ``None``.
            completion_model: Chat-completion model identifier.
            image_model: Image-generation model identifier.
            image_size: Fixed image resolution.
            client: Pre-built SDK client.  When given, *api_key* is ignored.
        """
        self.completion_model = completion_model
        self.image_model = image_model
        self.image_size = image_size

        if client is not None:
            self._client = client
        elif api_key:
            self._client = AsyncOpenAI(api_key=api_key)
        else:
            self._client = None
            logger.warning("OPENAI_API_KEY not set; generation requests will fail.")

    @classmethod
    def from_config(cls, config: JarkConfig) -> OpenAIGenerationClient:
        """Build a client from the application configuration."""
        return cls(
            config.openai_api_key,
            completion_model=config.completion_model,
            image_model=config.image_model,
            image_size=config.image_size,
        )

    async def complete_text(self, prompt: str, temperature: float) -> GenerationResult:
        if self._client is None:
            return GenerationResult.failure("API key is not configured")

        try:
            response = await self._client.chat.completions.create(
                model=self.completion_model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
            )
        except Exception as e:
            return GenerationResult.failure(f"chat completion failed: {e}", e)

        choices = getattr(response, "choices", None) or []
        if not choices:
            return GenerationResult.failure("chat completion returned no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if content is None:
            return GenerationResult.failure("chat completion returned an empty message")

        return GenerationResult(text=content)

    async def generate_image(self, prompt: str) -> GenerationResult:
        if self._client is None:
            return GenerationResult.failure("API key is not configured")

        try:
            response = await self._client.images.generate(
                model=self.image_model,
                prompt=prompt,
                size=self.image_size,
            )
        except Exception as e:
            return GenerationResult.failure(f"image generation failed: {e}", e)

        data = getattr(response, "data", None) or []
        if not data:
            return GenerationResult.failure("image generation returned no images")

        # Some image models return inline base64 instead of a hosted URL.
        url = getattr(data[0], "url", None)
        if url:
            return GenerationResult(image_url=url)
        b64 = getattr(data[0], "b64_json", None)
        if b64:
            return GenerationResult(image_url=f"data:image/png;base64,{b64}")

        return GenerationResult.failure("image generation returned neither url nor b64_json")

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
