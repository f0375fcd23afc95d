from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    """A user holds exactly one role."""

    ADMIN = "ADMIN"
    RENTER = "RENTER"


# -----------------------------------------------------
# RESOURCE TYPE
# -----------------------------------------------------
class ResourceType(BaseStrEnum):
    """Permission domains used by get_allowed_actions()."""

    contracts = "contracts"
    payments = "payments"
    maintenance = "maintenance"
    expenses = "expenses"
    reports = "reports"
    notifications = "notifications"


# -----------------------------------------------------
# ACTION
# -----------------------------------------------------
class Action(BaseStrEnum):
    """Fields of the AllowedActions vector."""

    view = "view"
    create = "create"
    edit = "edit"
    delete = "delete"
    export = "export"
    manage = "manage"
