from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

# Project root (backend/), assuming we're in techhub/core
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):

    # App
    APP_NAME: str = "TechHub Landing Page API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Products, categories, testimonials, newsletter and hero banners for the TechHub storefront"

    # Server
    SERVER_PORT: int = 2022
    CORS_ORIGINS: List[str] = ["*"]

    # Database
    DATABASE_URL: str = "sqlite:///./techhub.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path = PROJECT_ROOT / "logs"
    LOG_TO_FILE: bool = True
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    # Landing page
    LANDING_FANOUT_WORKERS: int = 5

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
