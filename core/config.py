# core/config.py
import logging
import os
from typing import List


class Settings:
    """Runtime configuration read from environment variables"""

    def __init__(self):
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///bookstore.db")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.sql_echo: bool = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "").split(",")
            if origin.strip()
        ]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for the API and CLI entry points"""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
