"""
Tests for configuration.
"""

import os
from pathlib import Path

from postalcodes.env import Settings, get_settings, load_env


class TestSettings:
    """Test settings read from the environment."""

    def test_defaults(self, monkeypatch):
        for var in ["POSTALCODES_DATA_URL", "POSTALCODES_DATA_PATH", "POSTALCODES_LOG_LEVEL", "POSTALCODES_LOG_DIR"]:
            monkeypatch.delenv(var, raising=False)
        assert get_settings() == Settings()

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("POSTALCODES_DATA_URL", "https://example.com/postal.json")
        monkeypatch.setenv("POSTALCODES_DATA_PATH", str(tmp_path / "data.json"))
        monkeypatch.setenv("POSTALCODES_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("POSTALCODES_LOG_DIR", str(tmp_path))

        settings = get_settings()
        assert settings.data_url == "https://example.com/postal.json"
        assert settings.data_path == tmp_path / "data.json"
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == Path(tmp_path)

    def test_empty_url_is_unset(self, monkeypatch):
        monkeypatch.setenv("POSTALCODES_DATA_URL", "")
        assert get_settings().data_url is None


class TestLoadEnv:
    """Test .env loading."""

    def test_loads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("POSTALCODES_LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text("POSTALCODES_LOG_LEVEL=WARNING\n")

        load_env()
        try:
            assert os.environ["POSTALCODES_LOG_LEVEL"] == "WARNING"
        finally:
            os.environ.pop("POSTALCODES_LOG_LEVEL", None)

    def test_environment_wins(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("POSTALCODES_LOG_LEVEL", "ERROR")
        (tmp_path / ".env").write_text("POSTALCODES_LOG_LEVEL=WARNING\n")

        load_env()
        assert os.environ["POSTALCODES_LOG_LEVEL"] == "ERROR"

    def test_missing_dotenv_is_fine(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        load_env()
