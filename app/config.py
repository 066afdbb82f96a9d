# ============================================================================
# FILE: app/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "GrooveLog"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./groovelog.db"  # Change to PostgreSQL in production

    # Redis cache (instrument catalog only)
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_EXPIRE_SECONDS: int = 3600

    # Owner for new songs when the request carries no X-User-Id
    DEFAULT_USER_ID: int = 1

    # Instrument catalog seeded on startup
    SEED_ON_STARTUP: bool = True
    SEED_INSTRUMENTS: List[str] = ["Guitar", "Bass", "Drums", "Keyboard", "Vocals"]

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
