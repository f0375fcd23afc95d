# core/errors.py

from fastapi import HTTPException

from models.validation import ValidationResult


def validation_failed(result: ValidationResult, message: str = "Validation failed") -> HTTPException:
    """
    Turn a failed ValidationResult into a 422.
    Returns HTTPException (doesn't raise) so caller can log or re-raise.
    """
    return HTTPException(
        status_code=422,
        detail={
            "message": message,
            "errors": [error.model_dump() for error in result.errors],
        },
    )


def forbidden(permission: str) -> HTTPException:
    return HTTPException(
        status_code=403,
        detail=f"Insufficient permissions: '{permission}' required",
    )


def extract_auth_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase client errors.
    Handles:
      • GoTrue (Auth) errors
      • Generic Python exceptions
    """

    # Case 1: Supabase Auth / GoTrue errors
    message = getattr(error, "message", None)
    if message:
        return str(message)

    # Case 2: errors with args (common)
    if error.args:
        return str(error.args[0])

    # Case 3: Plain string fallback
    return str(error) or type(error).__name__


def handle_auth_error(error: Exception, operation: str = "Authentication") -> HTTPException:
    """
    Map Supabase auth errors to HTTPExceptions with consistent messages.
    """
    from core.logging_config import logger

    error_detail = extract_auth_error(error)
    logger.error(f"{operation}: {error_detail}")

    error_lower = error_detail.lower()
    if "already registered" in error_lower or "already exists" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Account already exists")
    elif "rate limit" in error_lower:
        return HTTPException(status_code=429, detail=f"{operation}: Too many requests")
    else:
        return HTTPException(status_code=500, detail=f"{operation} failed")
