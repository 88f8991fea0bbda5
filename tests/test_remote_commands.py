"""Tests for the `remotekeeper remote` and `config` CLI commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from remotekeeper.main import app
from remotekeeper.services.remote_manager import RemoteManager

runner = CliRunner()


@pytest.fixture
def cli_manager(fake_runner, drive_fetcher):
    manager = RemoteManager(runner=fake_runner, drive_fetcher=drive_fetcher)
    with patch("remotekeeper.commands.remotes.get_manager", return_value=manager):
        yield manager


class TestProvidersCommand:
    def test_table(self):
        result = runner.invoke(app, ["remote", "providers"])

        assert result.exit_code == 0
        assert "s3" in result.stdout
        assert "synologyc2" in result.stdout

    def test_json(self):
        result = runner.invoke(app, ["remote", "providers", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert {"type": "http", "name": "HTTP (Read Only)"}.items() <= data[[d["type"] for d in data].index("http")].items()


class TestInfoCommand:
    def test_shows_setting_keys(self):
        result = runner.invoke(app, ["remote", "info", "gofile"])

        assert result.exit_code == 0
        assert "access_token" in result.stdout
        assert "root_folder_id" in result.stdout

    def test_json(self):
        result = runner.invoke(app, ["remote", "info", "s3", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["type"] == "s3"
        assert "location_constraint" in data["settings"]

    def test_unknown_type(self):
        result = runner.invoke(app, ["remote", "info", "floppy"])

        assert result.exit_code == 1
        assert "Unknown provider: floppy" in result.stdout


class TestCreateCommand:
    def test_create_success(self, cli_manager, fake_runner):
        result = runner.invoke(app, [
            "remote", "create", "s3", "backup1",
            "-c", "accessKeyId=AKIA", "-c", "secretKey=shh", "-c", "region=us-east-1",
            "-s", "chunk_size=8M",
        ])

        assert result.exit_code == 0
        assert "Created remote" in result.stdout
        assert fake_runner.calls[0] == [
            "config", "create", "backup1", "s3",
            "access_key_id", "AKIA", "secret_access_key", "$(rclone obscure shh)", "region", "us-east-1",
            "chunk_size", "8M", "--obscure", "--non-interactive",
        ]

    def test_value_may_contain_equals(self, cli_manager, fake_runner):
        result = runner.invoke(app, ["remote", "create", "b2", "b", "-c", "account=a", "-c", "key=abc=="])

        assert result.exit_code == 0
        assert fake_runner.calls[0][4:8] == ["account", "a", "key", "abc=="]

    def test_unsupported_type(self, cli_manager, fake_runner):
        result = runner.invoke(app, ["remote", "create", "floppy", "x"])

        assert result.exit_code == 1
        assert "Unsupported storage type: floppy" in result.stdout
        assert fake_runner.calls == []

    def test_bad_pair(self, cli_manager):
        result = runner.invoke(app, ["remote", "create", "s3", "x", "-c", "novalue"])

        assert result.exit_code == 1
        assert "key=value" in result.stdout

    def test_verification_failure_exits_1(self, cli_manager, fake_runner):
        fake_runner.on("lsd", error="Verification failed")

        result = runner.invoke(app, ["remote", "create", "s3", "backup1"])

        assert result.exit_code == 1
        assert "Verification failed" in result.stdout
        assert fake_runner.commands("config", "delete") == [["config", "delete", "backup1"]]


class TestOtherCommands:
    def test_update_with_rollback_settings(self, cli_manager, fake_runner):
        fake_runner.on("lsd", error="nope")

        result = runner.invoke(app, ["remote", "update", "r", "-s", "region=us-west-2", "-o", "region=us-east-1"])

        assert result.exit_code == 1
        assert fake_runner.calls[-1] == ["config", "update", "r", "--non-interactive", "region", "us-east-1"]

    def test_update_requires_settings(self, cli_manager, fake_runner):
        result = runner.invoke(app, ["remote", "update", "r"])

        assert result.exit_code == 1
        assert fake_runner.calls == []

    def test_delete_force(self, cli_manager, fake_runner):
        result = runner.invoke(app, ["remote", "delete", "old", "--force"])

        assert result.exit_code == 0
        assert fake_runner.calls == [["config", "delete", "old"]]

    def test_delete_cancelled(self, cli_manager, fake_runner):
        result = runner.invoke(app, ["remote", "delete", "old"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.stdout
        assert fake_runner.calls == []

    def test_show_json(self, cli_manager, fake_runner):
        fake_runner.on("config", "show", output="[b]\ntype = s3\n")

        result = runner.invoke(app, ["remote", "show", "b", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"name": "b", "type": "s3"}

    def test_show_error_dump(self, cli_manager, fake_runner):
        fake_runner.on("config", "show", output="# Remote not found")

        result = runner.invoke(app, ["remote", "show", "b"])

        assert result.exit_code == 1
        assert "Remote not found" in result.stdout

    def test_verify(self, cli_manager):
        result = runner.invoke(app, ["remote", "verify", "b"])

        assert result.exit_code == 0
        assert "reachable" in result.stdout

    def test_list(self, cli_manager, fake_runner):
        fake_runner.on("listremotes", output="a:\nb:")

        result = runner.invoke(app, ["remote", "list"])

        assert result.exit_code == 0
        assert "a:" in result.stdout and "b:" in result.stdout

    def test_browse_json(self, cli_manager, fake_runner):
        fake_runner.on("lsjson", output=json.dumps([{"Name": "f", "Path": "f", "Size": 3, "ModTime": "t", "IsDir": False}]))

        result = runner.invoke(app, ["remote", "browse", "r", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "path": "/",
            "items": [{"name": "f", "type": "file", "size": 3, "modTime": "t", "path": "f"}],
        }

    def test_browse_table(self, cli_manager, fake_runner):
        fake_runner.on("lsjson", output=json.dumps([
            {"Name": "docs", "Path": "docs", "Size": -1, "ModTime": "2024-01-01T00:00:00Z", "IsDir": True},
        ]))

        result = runner.invoke(app, ["remote", "browse", "r", "/data"])

        assert result.exit_code == 0
        assert "docs" in result.stdout
        assert fake_runner.calls == [["lsjson", "r:/data"]]

    def test_cat_and_link(self, cli_manager, fake_runner):
        fake_runner.on("cat", output="file body")
        fake_runner.on("link", output=" https://x/y \n")

        assert runner.invoke(app, ["remote", "cat", "r", "/a"]).stdout == "file body\n"
        assert runner.invoke(app, ["remote", "link", "r", "/a"]).stdout == "https://x/y\n"


class TestTopLevel:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "remotekeeper version" in result.stdout

    def test_verbose_and_quiet_conflict(self):
        result = runner.invoke(app, ["--verbose", "--quiet", "version"])

        assert result.exit_code == 1

    def test_invalid_env_rejected(self, monkeypatch):
        monkeypatch.setenv("REMOTEKEEPER_LOG_LEVEL", "LOUD")

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 1

    def test_config_env(self):
        result = runner.invoke(app, ["config", "env"])

        assert result.exit_code == 0
        assert "REMOTEKEEPER_RCLONE_BINARY" in result.stdout

    def test_config_encrypt(self):
        with patch("remotekeeper.commands.config_cmd.ensure_config_encrypted",
                   return_value={"success": True, "result": "Encryption already completed. Skipped."}) as mock_encrypt:
            result = runner.invoke(app, ["config", "encrypt", "--password", "pw"])

        assert result.exit_code == 0
        mock_encrypt.assert_called_once_with("pw")
        assert "Skipped" in result.stdout
