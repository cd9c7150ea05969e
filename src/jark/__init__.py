"""JARK AI Platform - brand, content and logo generation over a generative-AI service."""

__version__ = "0.1.0"

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
