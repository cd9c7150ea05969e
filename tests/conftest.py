"""Shared pytest fixtures for JARK tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from jark.api.main import create_app
from jark.core.config import JarkConfig
from jark.core.generation_client import GenerationClient, GenerationResult


class StubGenerationClient(GenerationClient):
    """In-memory generation client that records every call.

    Attributes:
        text: Completion text returned on success.
        image_url: Image URL returned on success.
        error: When set, every call fails with this message instead.
        calls: ``(operation, prompt, temperature)`` tuples in call order.
        closed: ``True`` once :meth:`aclose` has run.
    """

    def __init__(
        self,
        text: str = "X",
        image_url: str = "http://img/1",
        error: str | None = None,
    ) -> None:
        self.text = text
        self.image_url = image_url
        self.error = error
        self.calls: list[tuple[str, str, float | None]] = []
        self.closed = False

    async def complete_text(self, prompt: str, temperature: float) -> GenerationResult:
        self.calls.append(("complete_text", prompt, temperature))
        if self.error:
            return GenerationResult.failure(self.error, RuntimeError(self.error))
        return GenerationResult(text=self.text)

    async def generate_image(self, prompt: str) -> GenerationResult:
        self.calls.append(("generate_image", prompt, None))
        if self.error:
            return GenerationResult.failure(self.error, RuntimeError(self.error))
        return GenerationResult(image_url=self.image_url)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def test_config() -> JarkConfig:
    """Create a configuration isolated from the process environment and .env.

    Returns:
        JarkConfig instance for testing
    """
    return JarkConfig(
        _env_file=None,
        openai_api_key="sk-test",
        completion_model="gpt-4o-mini",
        image_model="gpt-image-1",
        server_port=3000,
    )


@pytest.fixture
def stub_client() -> StubGenerationClient:
    """Generation client that succeeds with ``"X"`` and ``"http://img/1"``."""
    return StubGenerationClient()


@pytest.fixture
def failing_client() -> StubGenerationClient:
    """Generation client whose every call fails with a sensitive message."""
    return StubGenerationClient(error="401 invalid api key sk-secret")


@pytest.fixture
def test_client(
    test_config: JarkConfig, stub_client: StubGenerationClient
) -> Generator[TestClient, None, None]:
    """FastAPI TestClient over an app wired to :func:`stub_client`.

    Yields:
        TestClient with the application lifespan running
    """
    app = create_app(test_config, stub_client)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failing_test_client(
    test_config: JarkConfig, failing_client: StubGenerationClient
) -> Generator[TestClient, None, None]:
    """FastAPI TestClient over an app whose upstream always fails."""
    app = create_app(test_config, failing_client)
    with TestClient(app) as client:
        yield client
