from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Rental Policy API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------
    # CORS (dashboard origins)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # -------------------------------------------------
    # Supabase (authentication only)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = Field(None)
    SUPABASE_ANON_KEY: Optional[str] = Field(None)
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None)

    # Role written to user metadata on self-registration
    DEFAULT_SIGNUP_ROLE: str = "RENTER"

    # -------------------------------------------------
    # Upload limits (validate_multiple_files)
    # -------------------------------------------------
    UPLOAD_MAX_SIZE_BYTES: int = Field(5 * 1024 * 1024, description="Per-file limit (default: 5MB)")
    UPLOAD_ALLOWED_TYPES: List[str] = Field([], description="MIME types; empty = unrestricted")
    UPLOAD_MAX_FILES: int = Field(10, description="Files per request (default: 10)")

    # -------------------------------------------------
    # Allowed-actions memo
    # -------------------------------------------------
    ALLOWED_ACTIONS_CACHE_TTL: int = Field(300, description="Seconds (default: 5 minutes)")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()
