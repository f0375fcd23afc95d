# -------------------------
# Enums
# -------------------------
from .enums import (
    Action,
    ResourceType,
    UserRole,
)

# -------------------------
# Identity
# -------------------------
from .user import User

# -------------------------
# Access Models
# -------------------------
from .access import (
    AllowedActions,
    NavigationItem,
    OwnershipDecision,
)

# -------------------------
# Validation Models
# -------------------------
from .validation import (
    FileUploadOptions,
    UploadedFileInfo,
    ValidationError,
    ValidationResult,
    ValidationRule,
)


__all__ = [
    "Action",
    "ResourceType",
    "UserRole",
    "User",
    "AllowedActions",
    "NavigationItem",
    "OwnershipDecision",
    "FileUploadOptions",
    "UploadedFileInfo",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
]
