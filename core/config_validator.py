# core/config_validator.py

from typing import List
from core.config import settings
from core.logging_config import logger


def validate_auth_config() -> List[str]:
    """
    Supabase settings needed by /auth and the authenticated guards.
    Returns list of missing variables.
    """
    missing = []

    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        missing.append("SUPABASE_SERVICE_ROLE_KEY")

    return missing


def validate_upload_config() -> List[str]:
    """Upload limits that would reject every file."""
    problems = []

    if settings.UPLOAD_MAX_SIZE_BYTES <= 0:
        problems.append("UPLOAD_MAX_SIZE_BYTES must be positive")
    if settings.UPLOAD_MAX_FILES <= 0:
        problems.append("UPLOAD_MAX_FILES must be positive")

    return problems


def validate_config_on_startup():
    """
    Validate configuration on application startup.
    Raises RuntimeError for unusable upload limits.
    Missing Supabase settings only disable authentication, so they are logged.
    """
    upload_problems = validate_upload_config()
    missing_auth = validate_auth_config()

    if upload_problems:
        error_msg = f"Invalid upload configuration: {', '.join(upload_problems)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for name in missing_auth:
        logger.warning(f"Authentication disabled, missing: {name}")

    logger.info("Configuration validation passed")
