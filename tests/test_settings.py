"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from remotekeeper.config.settings import (
    get_config_dir,
    get_env_info,
    get_env_var,
    get_graph_timeout,
    get_log_level,
    get_rclone_binary,
    get_rclone_config_path,
    get_rclone_timeout,
    shell_expand_credentials,
    validate_all_env_vars,
    validate_env_var,
)
from remotekeeper.exceptions import ConfigurationError


def test_config_dir_from_env(isolated_env):
    assert get_config_dir() == isolated_env / "config"


def test_config_dir_default(monkeypatch):
    monkeypatch.delenv("REMOTEKEEPER_CONFIG_DIR")
    assert get_config_dir() == Path.home() / ".config" / "remotekeeper"


def test_rclone_config_paths(isolated_env):
    assert get_rclone_config_path() == isolated_env / "config" / "rclone.conf"
    assert get_rclone_config_path(secure=True) == isolated_env / "config" / "rclone.conf.enc"


def test_explicit_rclone_config_only_for_plain_file(monkeypatch, tmp_path, isolated_env):
    monkeypatch.setenv("REMOTEKEEPER_RCLONE_CONFIG", str(tmp_path / "other.conf"))

    assert get_rclone_config_path() == tmp_path / "other.conf"
    assert get_rclone_config_path(secure=True) == isolated_env / "config" / "rclone.conf.enc"


def test_rclone_binary_prefers_env(monkeypatch):
    monkeypatch.setenv("REMOTEKEEPER_RCLONE_BINARY", "/opt/rclone")
    assert get_rclone_binary() == "/opt/rclone"


def test_rclone_binary_falls_back_to_name(monkeypatch):
    monkeypatch.setattr("shutil.which", lambda name: None)
    assert get_rclone_binary() == "rclone"


def test_timeouts(monkeypatch):
    assert get_rclone_timeout() is None
    assert get_graph_timeout() == 10.0

    monkeypatch.setenv("REMOTEKEEPER_RCLONE_TIMEOUT", "45")
    monkeypatch.setenv("REMOTEKEEPER_GRAPH_TIMEOUT", "2.5")
    assert get_rclone_timeout() == 45.0
    assert get_graph_timeout() == 2.5


def test_non_numeric_timeout_raises(monkeypatch):
    monkeypatch.setenv("REMOTEKEEPER_RCLONE_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError) as exc:
        get_rclone_timeout()
    assert exc.value.context["setting"] == "REMOTEKEEPER_RCLONE_TIMEOUT"


def test_shell_expand_defaults_off(monkeypatch):
    assert shell_expand_credentials() is False
    monkeypatch.setenv("REMOTEKEEPER_SHELL_EXPAND_CREDENTIALS", "TRUE")
    assert shell_expand_credentials() is True


def test_invalid_choice_rejected(monkeypatch):
    monkeypatch.setenv("REMOTEKEEPER_SHELL_EXPAND_CREDENTIALS", "maybe")

    with pytest.raises(ConfigurationError):
        get_env_var("REMOTEKEEPER_SHELL_EXPAND_CREDENTIALS")
    assert len(validate_all_env_vars()) == 1


def test_validate_unknown_var_is_valid():
    assert validate_env_var("SOMETHING_ELSE", "x") == (True, None)


def test_log_level(monkeypatch):
    assert get_log_level() == "INFO"
    monkeypatch.setenv("REMOTEKEEPER_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_env_info_masks_sensitive(monkeypatch):
    monkeypatch.setenv("REMOTEKEEPER_ENCRYPTION_KEY", "supersecret")

    info = get_env_info()["REMOTEKEEPER_ENCRYPTION_KEY"]

    assert info["value"] == "supe..."
    assert info["sensitive"] is True
    assert info["is_set"] is True
