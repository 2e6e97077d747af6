"""
Configuration helpers for the initiatives backend.

Settings are read once from environment variables (data file locations,
server address, logging) so that routers/services do not fetch os.environ
directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    initiatives_file: Path
    users_file: Path
    static_dir: Path
    host: str
    port: int
    log_level: str
    log_file: str | None
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    def _list(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    data_dir = _path(os.getenv("DATA_DIR"), PROJECT_ROOT / "data")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=data_dir,
        initiatives_file=_path(os.getenv("INITIATIVES_FILE"), data_dir / "initiatives.json"),
        users_file=_path(os.getenv("USERS_FILE"), data_dir / "users.json"),
        static_dir=_path(os.getenv("STATIC_DIR"), PROJECT_ROOT / "public"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
