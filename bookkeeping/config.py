"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets or connection strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Bookkeeping"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = _env_flag("DEBUG", "false")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")
    CORS_ALLOWED_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./bookkeeping.db"
    )
    AUTO_CREATE_TABLES: bool = _env_flag("AUTO_CREATE_TABLES", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str | None = os.getenv("LOG_FILE") or None

    # Inventory policy
    ALLOW_NEGATIVE_STOCK: bool = _env_flag("ALLOW_NEGATIVE_STOCK", "true")
    VALIDATE_INVENTORY_LINES: bool = _env_flag(
        "VALIDATE_INVENTORY_LINES", "false"
    )

    # Accounts used when inventory journal lines are derived server-side
    PURCHASES_ACCOUNT_CODE: str = os.getenv("PURCHASES_ACCOUNT_CODE", "5000")
    SUPPLIERS_ACCOUNT_CODE: str = os.getenv("SUPPLIERS_ACCOUNT_CODE", "2000")
    CASH_ACCOUNT_CODE: str = os.getenv("CASH_ACCOUNT_CODE", "1000")
    SALES_ACCOUNT_CODE: str = os.getenv("SALES_ACCOUNT_CODE", "4000")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()
