from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from core.cache import invalidate_user
from core.config import settings
from core.errors import handle_auth_error, validation_failed
from core.form_validation import validate_form
from core.logging_config import logger
from core.supabase_client import get_supabase_client
from core.validation_rules import login_validation_rules, registration_validation_rules
from dependencies.auth import get_current_user, user_from_auth
from models.user import User


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# ============================================================
# MODELS
# ============================================================
class TokenResponse(BaseModel):
    access_token: Optional[str] = None
    token_type: str = "bearer"
    user: User


# ============================================================
# LOGIN (SUPABASE AUTH)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(payload: Dict[str, Any] = Body(...)):

    result = validate_form(payload, login_validation_rules)
    if not result.is_valid:
        logger.info(f"Login rejected: {len(result.errors)} invalid field(s)")
        raise validation_failed(result)

    email = str(payload["email"]).strip().lower()

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": payload["password"]}
        )
    except Exception as e:
        # Don't expose details to the caller
        logger.warning(f"Login attempt failed for {email}: {type(e).__name__}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not response.session or not response.session.access_token:
        raise HTTPException(401, "Invalid email or password")

    user = user_from_auth(response.user)
    invalidate_user(user.id)

    return TokenResponse(access_token=response.session.access_token, user=user)


# ============================================================
# REGISTER (renters sign themselves up)
# ============================================================
@router.post("/register", response_model=TokenResponse, status_code=201, summary="Register a new account")
def register(payload: Dict[str, Any] = Body(...)):

    result = validate_form(payload, registration_validation_rules)
    if not result.is_valid:
        logger.info(f"Registration rejected: {len(result.errors)} invalid field(s)")
        raise validation_failed(result)

    email = str(payload["email"]).strip().lower()

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        response = client.auth.sign_up({
            "email": email,
            "password": payload["password"],
            "options": {
                "data": {
                    "name": str(payload["name"]).strip(),
                    "role": settings.DEFAULT_SIGNUP_ROLE,
                },
            },
        })
    except Exception as e:
        raise handle_auth_error(e, "Registration")

    if not response.user:
        raise HTTPException(500, "Registration failed")

    session = response.session
    return TokenResponse(
        access_token=session.access_token if session else None,
        user=user_from_auth(response.user),
    )


# ============================================================
# CURRENT USER
# ============================================================
@router.get("/me", response_model=User, summary="Current authenticated user")
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.post("/logout", summary="Forget cached permissions for the current user")
def logout(current_user: User = Depends(get_current_user)):
    invalidate_user(current_user.id)
    return {"success": True}
