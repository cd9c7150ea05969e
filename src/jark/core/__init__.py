"""Core functionality for the JARK AI Platform.

- **JarkConfig / config**: Configuration management using Pydantic Settings.
- **GenerationClient**: Interface to the upstream generative-AI service, with
  the OpenAI-backed :class:`OpenAIGenerationClient` implementation.
- **GenerationResult / UpstreamError**: Explicit success-or-failure values
  returned by every upstream call.
"""

from jark.core.config import JarkConfig, config
from jark.core.generation_client import (
    GenerationClient,
    GenerationResult,
    OpenAIGenerationClient,
    UpstreamError,
)

__all__ = [
    "GenerationClient",
    "GenerationResult",
    "JarkConfig",
    "OpenAIGenerationClient",
    "UpstreamError",
    "config",
]
