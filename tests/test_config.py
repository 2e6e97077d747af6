from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the api package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("APP_ENV", "DATA_DIR", "INITIATIVES_FILE", "USERS_FILE", "PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(clean_env):
    settings = core_config.get_settings()
    assert settings.app_env == "dev"
    assert settings.port == 3000
    assert settings.data_dir == core_config.PROJECT_ROOT / "data"
    assert settings.initiatives_file == settings.data_dir / "initiatives.json"
    assert settings.users_file == settings.data_dir / "users.json"
    assert settings.cors_origins == ()


def test_data_dir_drives_file_locations(clean_env, tmp_path):
    clean_env.setenv("DATA_DIR", str(tmp_path))
    clean_env.setenv("USERS_FILE", str(tmp_path / "elsewhere" / "people.json"))
    settings = core_config.get_settings()
    assert settings.initiatives_file == tmp_path / "initiatives.json"
    assert settings.users_file == tmp_path / "elsewhere" / "people.json"


def test_bad_port_falls_back_and_lists_are_split(clean_env):
    clean_env.setenv("PORT", "not-a-port")
    clean_env.setenv("CORS_ORIGINS", "https://a.example/, https://b.example ,")
    clean_env.setenv("LOG_LEVEL", "debug")
    settings = core_config.get_settings()
    assert settings.port == 3000
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"
