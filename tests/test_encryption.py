"""Tests for rclone config encryption bootstrap."""

from remotekeeper.services.encryption import ensure_config_encrypted, password_command


class TestEnsureConfigEncrypted:
    def test_already_encrypted_is_skipped(self, fake_runner):
        result = ensure_config_encrypted("pw", runner=fake_runner)

        assert result == {"success": True, "result": "Encryption already completed. Skipped."}
        assert fake_runner.calls == [["config", "encryption", "check"]]

    def test_encrypts_when_check_fails(self, fake_runner):
        fake_runner.on("config", "encryption", "check", error="config file is not encrypted")
        fake_runner.on("config", "encryption", "set", output="Config encrypted")

        result = ensure_config_encrypted("pw", runner=fake_runner)

        assert result == {"success": True, "result": "Config encrypted"}
        set_call = fake_runner.calls[1]
        assert set_call[:5] == ["config", "encryption", "set", "--password-command", set_call[4]]

    def test_password_only_in_child_env(self, fake_runner):
        fake_runner.on("config", "encryption", "check", error="not encrypted")

        ensure_config_encrypted("hunter2", runner=fake_runner)

        set_call = fake_runner.calls[1]
        assert all("hunter2" not in arg for arg in set_call)
        env = fake_runner.envs[1]
        [(var, value)] = env.items()
        assert var.startswith("RCLONE_TEMP_PASS_")
        assert value == "hunter2"
        assert var in set_call[4]

    def test_failed_in_output_is_failure(self, fake_runner):
        fake_runner.on("config", "encryption", "check", error="not encrypted")
        fake_runner.on("config", "encryption", "set", output="password command failed: exit status 1")

        result = ensure_config_encrypted("pw", runner=fake_runner)

        assert result == {"success": False, "result": "password command failed: exit status 1"}

    def test_set_error_is_failure(self, fake_runner):
        fake_runner.on("config", "encryption", "check", error="not encrypted")
        fake_runner.on("config", "encryption", "set", error="cannot write config")

        assert ensure_config_encrypted("pw", runner=fake_runner) == {
            "success": False,
            "result": "cannot write config",
        }


class TestPasswordCommand:
    def test_posix(self):
        assert password_command("VAR_1", platform="posix") == "/bin/echo $VAR_1"

    def test_windows(self):
        assert password_command("VAR_1", platform="nt") == 'cmd /c "echo %VAR_1%"'
