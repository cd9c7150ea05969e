"""Tests for jark.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides, prefixed and conventional unprefixed.
- Missing API key is not a startup error.
- Pydantic validation constraints (port range, log level literals).
"""

from __future__ import annotations

import pytest

from jark.core.config import JarkConfig

_ENV_VARS = (
    "OPENAI_API_KEY",
    "JARK_OPENAI_API_KEY",
    "PORT",
    "JARK_SERVER_PORT",
    "SERVER_PORT",
    "JARK_COMPLETION_MODEL",
    "JARK_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable JarkConfig reads from the process environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigDefaults:
    """Verify that JarkConfig provides sensible defaults."""

    def test_default_models(self, clean_env):
        cfg = JarkConfig(_env_file=None)
        assert cfg.completion_model == "gpt-4o-mini"
        assert cfg.image_model == "gpt-image-1"
        assert cfg.image_size == "1024x1024"

    def test_default_temperatures(self, clean_env):
        cfg = JarkConfig(_env_file=None)
        assert cfg.brand_temperature == 0.6
        assert cfg.content_temperature == 0.7

    def test_default_server(self, clean_env):
        cfg = JarkConfig(_env_file=None)
        assert cfg.server_host == "0.0.0.0"
        assert cfg.server_port == 3000
        assert cfg.cors_allow_origins == ["*"]
        assert cfg.log_level == "INFO"

    def test_missing_api_key_is_allowed(self, clean_env):
        """Startup must not fail without a credential."""
        cfg = JarkConfig(_env_file=None)
        assert cfg.openai_api_key is None


class TestConfigEnvironment:
    """Verify environment variable loading."""

    def test_unprefixed_openai_api_key(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-env")
        cfg = JarkConfig(_env_file=None)
        assert cfg.openai_api_key == "sk-env"

    def test_prefixed_openai_api_key(self, clean_env):
        clean_env.setenv("JARK_OPENAI_API_KEY", "sk-prefixed")
        cfg = JarkConfig(_env_file=None)
        assert cfg.openai_api_key == "sk-prefixed"

    def test_unprefixed_port(self, clean_env):
        clean_env.setenv("PORT", "8080")
        cfg = JarkConfig(_env_file=None)
        assert cfg.server_port == 8080

    def test_prefixed_port(self, clean_env):
        clean_env.setenv("JARK_SERVER_PORT", "8081")
        cfg = JarkConfig(_env_file=None)
        assert cfg.server_port == 8081

    def test_bare_field_name_is_not_read(self, clean_env):
        """Only PORT and JARK_SERVER_PORT configure the port."""
        clean_env.setenv("SERVER_PORT", "1234")
        cfg = JarkConfig(_env_file=None)
        assert cfg.server_port == 3000

    def test_empty_port_falls_back_to_default(self, clean_env):
        clean_env.setenv("PORT", "")
        cfg = JarkConfig(_env_file=None)
        assert cfg.server_port == 3000

    def test_empty_api_key_is_missing(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "")
        cfg = JarkConfig(_env_file=None)
        assert cfg.openai_api_key is None

    def test_prefixed_setting(self, clean_env):
        clean_env.setenv("JARK_COMPLETION_MODEL", "gpt-4o")
        cfg = JarkConfig(_env_file=None)
        assert cfg.completion_model == "gpt-4o"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=sk-dotenv\nJARK_LOG_LEVEL=DEBUG\n")
        cfg = JarkConfig(_env_file=env_file)
        assert cfg.openai_api_key == "sk-dotenv"
        assert cfg.log_level == "DEBUG"

    def test_explicit_kwargs_override(self, clean_env):
        cfg = JarkConfig(_env_file=None, openai_api_key="sk-kwarg", server_port=9000)
        assert cfg.openai_api_key == "sk-kwarg"
        assert cfg.server_port == 9000


class TestConfigValidation:
    """Verify Pydantic validation constraints on config fields."""

    def test_invalid_port_too_low(self, clean_env):
        with pytest.raises(Exception):
            JarkConfig(_env_file=None, server_port=0)

    def test_invalid_port_too_high(self, clean_env):
        with pytest.raises(Exception):
            JarkConfig(_env_file=None, server_port=70000)

    def test_invalid_log_level(self, clean_env):
        with pytest.raises(Exception):
            JarkConfig(_env_file=None, log_level="VERBOSE")

    def test_invalid_temperature(self, clean_env):
        with pytest.raises(Exception):
            JarkConfig(_env_file=None, brand_temperature=3.0)
