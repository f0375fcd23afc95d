# routers/access.py

from typing import List, Optional

from fastapi import APIRouter, Depends

from core.access_policy import can_access_own_resource, get_navigation_items
from core.cache import get_cached_allowed_actions, invalidate_user
from core.logging_config import logger
from dependencies.auth import get_optional_user, requires_permission
from models.access import AllowedActions, NavigationItem, OwnershipDecision
from models.user import User

router = APIRouter(
    prefix="/access",
    tags=["Access"],
)


# -----------------------------------------------------
# GET /access/actions/{resource_type}
# Anonymous callers and unknown resource types get all False
# -----------------------------------------------------
@router.get("/actions/{resource_type}", response_model=AllowedActions, summary="Allowed actions on a resource type")
def read_allowed_actions(
    resource_type: str,
    current_user: Optional[User] = Depends(get_optional_user),
):
    return get_cached_allowed_actions(current_user, resource_type)


# -----------------------------------------------------
# GET /access/navigation
# -----------------------------------------------------
@router.get("/navigation", response_model=List[NavigationItem], summary="Navigation items for the caller")
def read_navigation(current_user: Optional[User] = Depends(get_optional_user)):
    return get_navigation_items(current_user)


# -----------------------------------------------------
# GET /access/ownership/{owner_id}
# Admins bypass ownership
# -----------------------------------------------------
@router.get("/ownership/{owner_id}", response_model=OwnershipDecision, summary="Can the caller access this owner's resource")
def read_ownership(
    owner_id: str,
    current_user: Optional[User] = Depends(get_optional_user),
):
    return OwnershipDecision(
        owner_id=owner_id,
        allowed=can_access_own_resource(current_user, owner_id),
    )


# -----------------------------------------------------
# DELETE /access/cache/{user_id}
# Call after changing a user's role
# -----------------------------------------------------
@router.delete("/cache/{user_id}", summary="Drop memoized permissions for a user")
def clear_user_cache(
    user_id: str,
    current_user: User = Depends(requires_permission("system:user_management")),
):
    removed = invalidate_user(user_id)
    logger.info(f"{current_user.id} cleared {removed} cached action sets for {user_id}")
    return {"success": True, "removed": removed}
