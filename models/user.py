# models/user.py

from typing import Optional
from pydantic import BaseModel, ConfigDict

from models.enums import UserRole


class User(BaseModel):
    """
    Identity handed to the access policy by the auth layer.
    Read-only: the policy never mutates it.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str
    role: UserRole
    avatar: Optional[str] = None
