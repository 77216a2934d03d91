"""Tests for host config — env-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from logrouter.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self):
        config = RouterConfig()
        assert config.environment == "development"
        assert config.log_level == "WARNING"
        assert config.max_message_length == 65535

    def test_default_paths(self):
        config = RouterConfig()
        assert config.default_profile == Path("logrouter.json")
        assert config.log_dir == Path("logs")

    def test_is_production(self):
        assert RouterConfig().is_production is False
        assert RouterConfig(environment="production").is_production is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOGROUTER_MAX_MESSAGE_LENGTH", "512")
        monkeypatch.setenv("LOGROUTER_LOG_LEVEL", "DEBUG")

        config = RouterConfig()

        assert config.max_message_length == 512
        assert config.log_level == "DEBUG"

    def test_negative_max_message_length_rejected(self, monkeypatch):
        monkeypatch.setenv("LOGROUTER_MAX_MESSAGE_LENGTH", "-1")

        with pytest.raises(ValidationError):
            RouterConfig()

    def test_zero_max_message_length_allowed(self):
        assert RouterConfig(max_message_length=0).max_message_length == 0
