"""Configuration management for the JARK AI Platform.

This module provides centralized configuration management using Pydantic
Settings.  Configuration is loaded from environment variables with the
``JARK_`` prefix, allowing deployment-specific tuning without code changes.

Environment Variable Loading
----------------------------
Configuration values are loaded in the following priority order:

1. Environment variables (``JARK_*`` prefix)
2. ``.env`` file in the working directory
3. Default values defined in :class:`JarkConfig`

Two settings also honour the conventional unprefixed names used by hosting
platforms:

- ``OPENAI_API_KEY`` for :attr:`JarkConfig.openai_api_key`
- ``PORT`` for :attr:`JarkConfig.server_port`

Empty values are ignored, so ``PORT=""`` keeps the default port.

Example .env file::

    OPENAI_API_KEY=sk-...
    PORT=8080
    JARK_COMPLETION_MODEL=gpt-4o-mini
    JARK_LOG_LEVEL=DEBUG

Missing Credentials
-------------------
A missing API key is *not* a startup error.  The application boots normally
and every generation call fails at the upstream boundary instead, which
keeps ``GET /health`` answering on a misconfigured deployment.

Global Configuration Instance
-----------------------------
A global ``config`` instance is created automatically at module import
time::

    from jark.core.config import config

    print(config.completion_model)
    print(config.server_port)
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JarkConfig(BaseSettings):
    """Main configuration for the JARK AI Platform.

    Attributes
    ----------
    Upstream Settings:
        openai_api_key : str | None
            Credential for the generative-AI service.  ``None`` disables
            generation without failing startup.
        completion_model : str
            Chat-completion model used by the brand and content engines.
        image_model : str
            Image-generation model used by the logo engine.
        image_size : str
            Fixed square resolution requested for logos.

    Engine Settings:
        brand_temperature : float
            Sampling temperature for the brand engine.
        content_temperature : float
            Sampling temperature for the content engine.

    Server Settings:
        server_host : str
            Bind address for uvicorn.
        server_port : int
            Bind port for uvicorn (1-65535).
        cors_allow_origins : list[str]
            Origins allowed by the CORS middleware.
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
            Root log level configured by the CLI entry point.

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = JarkConfig(
        ...     openai_api_key="sk-test",
        ...     server_port=8080,
        ...     _env_file=None,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JARK_",
        case_sensitive=False,
        populate_by_name=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Upstream settings
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "JARK_OPENAI_API_KEY"),
        description="API credential for the generative-AI service",
    )
    completion_model: str = Field(
        default="gpt-4o-mini",
        description="Chat-completion model for the brand and content engines",
    )
    image_model: str = Field(
        default="gpt-image-1",
        description="Image-generation model for the logo engine",
    )
    image_size: str = Field(
        default="1024x1024",
        description="Square resolution requested for generated logos",
    )

    # Engine settings
    brand_temperature: float = Field(default=0.6, ge=0.0, le=2.0)
    content_temperature: float = Field(default=0.7, ge=0.0, le=2.0)

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "JARK_SERVER_PORT"),
        description="Server port",
        ge=1,
        le=65535,
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level",
    )


# Global configuration instance, loaded from JARK_* environment variables
# and the .env file.
config = JarkConfig()
