# MIT License
"""Runtime settings for the dashboard.

Values come from the process environment or a ``.env`` file.  They are
read once by the page and handed to the storage and insight constructors;
no other module looks at the environment.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    # Local key-value snapshot of the form.
    APPRAISAL_STORAGE_PATH: Path = Path(".appraisal/local_storage.json")
    APPRAISAL_STORAGE_KEY: str = "investment_dashboard_data"
    APPRAISAL_LOG_LEVEL: str = "INFO"

    @property
    def openai_api_key(self) -> str | None:
        return self.OPENAI_API_KEY

    @property
    def openai_model(self) -> str:
        return self.OPENAI_MODEL

    @property
    def storage_path(self) -> Path:
        return self.APPRAISAL_STORAGE_PATH

    @property
    def storage_key(self) -> str:
        return self.APPRAISAL_STORAGE_KEY

    @property
    def log_level(self) -> str:
        return (self.APPRAISAL_LOG_LEVEL or "INFO").strip().upper()


def load_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once; later calls leave existing handlers alone."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
