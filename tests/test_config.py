"""
Tests for configuration management (core/config.py)
"""

import pytest
from pydantic import ValidationError

from core.config import CLIENT_VERSION, DEFAULT_ENDPOINT_URL, DEFAULT_TOOL_NAME, AppSettings


def test_config_defaults():
    """Defaults point at the fixed documentation endpoint"""
    settings = AppSettings()

    assert settings.endpoint_url == DEFAULT_ENDPOINT_URL == "https://learn.microsoft.com/api/mcp"
    assert settings.tool_name == DEFAULT_TOOL_NAME == "microsoft_docs_search"
    assert settings.client_name == "learncli"
    assert settings.debug is False
    assert settings.probe_endpoint is False


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("LEARNCLI_DEBUG", "1")
    monkeypatch.setenv("LEARNCLI_ENDPOINT_URL", "http://localhost:8000/mcp")
    monkeypatch.setenv("learncli_http_timeout_seconds", "5")

    settings = AppSettings()

    assert settings.debug is True
    assert settings.endpoint_url == "http://localhost:8000/mcp"
    assert settings.http_timeout_seconds == 5.0


def test_config_rejects_invalid_timeout(monkeypatch):
    monkeypatch.setenv("LEARNCLI_HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        AppSettings()


def test_config_ignores_env_file(tmp_path, monkeypatch):
    """There is no configuration file: a .env in the cwd is not read"""
    (tmp_path / ".env").write_text("LEARNCLI_DEBUG=true\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert AppSettings().debug is False


def test_client_identity_follows_package_version():
    settings = AppSettings()

    assert CLIENT_VERSION
    assert settings.client_version == CLIENT_VERSION
    assert settings.user_agent == f"learncli/{CLIENT_VERSION}"
