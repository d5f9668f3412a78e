"""Configuration management.

Reads settings from env vars (and a local .env file if there is one).
"""
import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _normalise_database_url(url: str) -> str:
    """SQLAlchemy wants postgresql://, libpq style strings use postgres://"""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Settings:
    """App settings loaded from environment variables"""

    # Database
    database_url: str = _normalise_database_url(os.getenv(
        "DATABASE_URL",
        "sqlite:///./ab_tester.db"
    ))

    # Per-request deadline handed to the datastore (milliseconds)
    statement_timeout_ms: int = int(os.getenv("STATEMENT_TIMEOUT_MS", "5000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS - comma separated list
    cors_origins: List[str] = os.getenv("CORS_ORIGINS", "*").split(",")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8081"))


settings = Settings()
