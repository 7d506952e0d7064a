"""Unit tests for process-level settings."""

import os
from pathlib import Path
from unittest.mock import patch

from user_directory.runtime.settings import EnvironmentVariables


class TestEnvironmentVariables:
    def test_default_values(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables()

        assert env_vars.environment == "development"
        assert env_vars.config_path == Path("config.yaml")

    def test_environment_variable_loading(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        test_env = {
            "APP_ENVIRONMENT": "production",
            "USER_DIRECTORY_CONFIG": "/etc/user-directory/config.yaml",
        }
        with patch.dict(os.environ, test_env, clear=True):
            env_vars = EnvironmentVariables()

        assert env_vars.environment == "production"
        assert env_vars.config_path == Path("/etc/user-directory/config.yaml")

    def test_reads_dotenv_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("APP_ENVIRONMENT=test\n")
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables()

        assert env_vars.environment == "test"
