"""
Tests for configuration loading.
"""
import json

import pytest

from ticktock_mcp.utils.config import ENV_VARS, ConfigError, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"api_key": "file_key", "workspace_id": "file_ws"}))
    return path


def test_env_only(monkeypatch, tmp_path):
    monkeypatch.setenv("CLOCKIFY_API_KEY", "env_key")

    config = load_config(tmp_path / "missing.json")

    assert config.api_key == "env_key"
    assert config.workspace_id is None
    assert config.base_url is None


def test_file_fallback(config_file):
    config = load_config(config_file)

    assert config.api_key == "file_key"
    assert config.workspace_id == "file_ws"


def test_env_overrides_file(monkeypatch, config_file):
    monkeypatch.setenv("CLOCKIFY_API_KEY", "env_key")
    monkeypatch.setenv("CLOCKIFY_BASE_URL", "https://example.test/api/v1")

    config = load_config(config_file)

    assert config.api_key == "env_key"
    assert config.workspace_id == "file_ws"
    assert config.base_url == "https://example.test/api/v1"


def test_empty_env_does_not_override(monkeypatch, config_file):
    monkeypatch.setenv("CLOCKIFY_API_KEY", "")

    assert load_config(config_file).api_key == "file_key"


def test_missing_key(tmp_path):
    with pytest.raises(ConfigError, match="CLOCKIFY_API_KEY"):
        load_config(tmp_path / "missing.json")


def test_malformed_file_is_ignored(monkeypatch, tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    monkeypatch.setenv("CLOCKIFY_API_KEY", "env_key")

    config = load_config(path)

    assert config.api_key == "env_key"
    assert "Ignoring invalid config file" in caplog.text


def test_config_is_frozen(monkeypatch, tmp_path):
    monkeypatch.setenv("CLOCKIFY_API_KEY", "env_key")
    config = load_config(tmp_path / "missing.json")

    with pytest.raises(Exception):
        config.api_key = "other"
