"""
Tests for the root config: data paths and env-driven settings.

Usage:
    pytest setup_checklist/tests/test_config.py -v
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from setup_checklist import config

PACKAGE_DIR = Path(config.__file__).resolve().parent


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "CHECKLIST_HOME",
        "CHECKLIST_STORAGE_FILE",
        "CHECKLIST_API_URL",
        "CHECKLIST_API_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Data paths
# ---------------------------------------------------------------------------

class TestDataPaths:

    def test_default_root_is_in_home(self, clean_env, tmp_path):
        clean_env.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert config.get_data_root() == tmp_path / ".setup_checklist"
        assert config.get_storage_file() == tmp_path / ".setup_checklist" / "workspace" / "client_storage.json"
        assert config.get_logs_dir() == tmp_path / ".setup_checklist" / "logs"

    def test_paths_are_not_inside_the_package(self, clean_env):
        for path in (config.get_storage_file(), config.get_logs_dir()):
            assert PACKAGE_DIR not in path.resolve().parents
            assert PACKAGE_DIR.parent not in path.resolve().parents

    def test_home_override(self, clean_env, tmp_path):
        clean_env.setenv("CHECKLIST_HOME", str(tmp_path / "data"))
        assert config.get_storage_file() == tmp_path / "data" / "workspace" / "client_storage.json"
        assert config.get_logs_dir() == tmp_path / "data" / "logs"

    def test_storage_file_override(self, clean_env, tmp_path):
        clean_env.setenv("CHECKLIST_HOME", str(tmp_path / "data"))
        clean_env.setenv("CHECKLIST_STORAGE_FILE", str(tmp_path / "custom.json"))
        assert config.get_storage_file() == tmp_path / "custom.json"

    def test_logger_writes_under_logs_dir(self, clean_env, tmp_path):
        clean_env.setenv("CHECKLIST_HOME", str(tmp_path))
        from setup_checklist.logger import define_log_level

        log = define_log_level(name="config_test")
        log.info("[TEST] hello")
        log.complete()
        assert any(p.name.startswith("config_test_") for p in (tmp_path / "logs").iterdir())


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:

    def test_api_url_trailing_slash(self, clean_env):
        clean_env.setenv("CHECKLIST_API_URL", "https://api.example.com/")
        assert config.get_api_url() == "https://api.example.com"

    def test_api_url_unset(self, clean_env):
        assert config.get_api_url() is None

    def test_bad_timeout_falls_back(self, clean_env):
        clean_env.setenv("CHECKLIST_API_TIMEOUT", "soon")
        assert config.get_api_timeout() == config.DEFAULT_API_TIMEOUT

    def test_log_level_upper(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "info")
        assert config.get_log_level() == "INFO"
