"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is loaded from environment variables (or .env file)."""

    # --- App ---
    app_name: str = "Cycle Insights API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"  # development | staging | production

    # --- Storage ---
    data_dir: Path = Path("data")
    store_filename: str = "cycle_store.json"

    # --- Engine ---
    cycle_config_path: Path | None = None  # override the bundled cycle_config.yaml

    # --- CORS ---
    cors_origins: list[str] = ["http://localhost:8081"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.store_filename


@lru_cache
def get_settings() -> Settings:
    return Settings()
