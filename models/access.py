# models/access.py

from typing import List
from pydantic import BaseModel, ConfigDict

from models.enums import UserRole


class AllowedActions(BaseModel):
    """Permission vector for one (user, resource type) pair."""
    view: bool = False
    create: bool = False
    edit: bool = False
    delete: bool = False
    export: bool = False
    manage: bool = False


class NavigationItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    href: str
    icon: str
    roles: List[UserRole]


class OwnershipDecision(BaseModel):
    owner_id: str
    allowed: bool
