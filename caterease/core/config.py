"""
Core configuration for the CaterEase API
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # API Configuration
    APP_NAME: str = "CaterEase API"
    API_PREFIX: str = "/api"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./caterease.db"

    # Auth / session cookie
    SECRET_KEY: str = "catereaseapp_secret_key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60
    SESSION_COOKIE_NAME: str = "caterease_session"
    SESSION_COOKIE_SECURE: bool = False

    # CORS Configuration
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Order lifecycle: reject status jumps outside the transition table
    ENFORCE_STATUS_TRANSITIONS: bool = True

    # Optional admin account created on startup
    FIRST_ADMIN_USERNAME: Optional[str] = None
    FIRST_ADMIN_EMAIL: Optional[str] = None
    FIRST_ADMIN_PASSWORD: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"


# Global settings instance
settings = Settings()
