# autotrack/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Sample data ───────────────────────────────────────────────────────
    SEED_SAMPLE_DATA: bool = True   # Load the demo fleet + accounts at startup

    # ── Display ───────────────────────────────────────────────────────────
    DATE_FORMAT: str = "%Y-%m-%d"
    CURRENCY_SYMBOL: str = "$"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_CONSOLE: bool = False    # Off by default so logs don't interleave with menus
    LOG_DIR: Optional[str] = None   # Defaults to <repo>/logs

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
