from typing import List, Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.access_policy import has_all_roles, has_permission, has_role
from core.cache import get_cached_allowed_actions
from core.errors import forbidden
from core.logging_config import logger
from core.supabase_client import get_supabase_client
from models.enums import Action, UserRole
from models.user import User


bearer_scheme = HTTPBearer()


# ============================================================
# Supabase metadata → User
# ============================================================
def user_from_auth(auth_user) -> User:
    metadata = auth_user.user_metadata or {}

    role = str(metadata.get("role", UserRole.RENTER.value)).upper()
    if role not in UserRole.list():
        role = UserRole.RENTER.value

    return User(
        id=auth_user.id,
        email=auth_user.email,
        name=metadata.get("name") or metadata.get("full_name") or auth_user.email,
        role=role,
        avatar=metadata.get("avatar") or metadata.get("avatar_url"),
    )


# ============================================================
# AUTH DECODING (Supabase validates the JWT)
# ============================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> User:

    token = credentials.credentials

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        auth_resp = client.auth.get_user(token)
    except Exception:
        raise unauthorized

    if not auth_resp or not auth_resp.user or not auth_resp.user.email:
        raise unauthorized

    return user_from_auth(auth_resp.user)


# ============================================================
# OPTIONAL AUTHENTICATION (policy endpoints accept anonymous callers)
# ============================================================
def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(HTTPBearer(auto_error=False)),
) -> Optional[User]:
    """
    Returns User if a valid token was provided, None otherwise.
    """
    if not credentials:
        return None

    try:
        return get_current_user(credentials)
    except HTTPException:
        return None


# ============================================================
# ROLE CHECKER
# ============================================================
def requires_role(allowed_roles: List[UserRole], require_all: bool = False):
    """
    Usage:
        @router.get("/", dependencies=[Depends(requires_role([UserRole.ADMIN]))])
    """
    def checker(current_user: User = Depends(get_current_user)):
        allowed = (
            has_all_roles(current_user, allowed_roles)
            if require_all
            else has_role(current_user, allowed_roles)
        )
        if not allowed:
            logger.warning(f"Role check failed for {current_user.id} ({current_user.role})")
            raise HTTPException(
                status_code=403,
                detail=f"Requires one of: {[str(role) for role in allowed_roles]}",
            )
        return current_user
    return checker


# ============================================================
# ACTION CHECKER (resource × action from the allowed-actions table)
# ============================================================
def requires_action(resource_type: str, action: str):
    """
    Usage:
        @router.delete("/{id}", dependencies=[Depends(requires_action("contracts", "delete"))])
    """
    resource_type, action = str(resource_type), str(action)

    def checker(current_user: User = Depends(get_current_user)):
        allowed = get_cached_allowed_actions(current_user, resource_type)
        if action not in Action.list() or not getattr(allowed, action):
            logger.warning(f"Denied {resource_type}:{action} for {current_user.id} ({current_user.role})")
            raise forbidden(f"{resource_type}:{action}")
        return current_user
    return checker


def requires_permission(permission: str):
    """Guard on a raw `resource:verb` key from PERMISSION_ROLES."""

    def checker(current_user: User = Depends(get_current_user)):
        if not has_permission(current_user, permission):
            logger.warning(f"Denied {permission} for {current_user.id} ({current_user.role})")
            raise forbidden(permission)
        return current_user
    return checker
