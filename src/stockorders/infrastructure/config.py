from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOCKORDERS_", env_file=".env", extra="ignore"
    )

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = f"sqlite+aiosqlite:///{_DATA_DIR / 'stockorders.db'}"
    DATABASE_ECHO: bool = False

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    # ==============================
    # Audit log
    # ==============================
    AUDIT_LOG_DEFAULT_LIMIT: int = 100


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
