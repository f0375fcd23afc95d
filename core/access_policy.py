# core/access_policy.py

"""
Role-based access decisions for the rental dashboard.

Every function here is pure and total: a missing user, an unknown
permission or an unknown resource type resolves to "deny". Nothing is
cached; callers that memoize must key on (user.id, user.role, resource).
"""

from typing import Any, Iterable, List, Optional

from core.permissions import (
    ADMIN_NAVIGATION,
    BASE_NAVIGATION,
    PERMISSION_ROLES,
    RENTER_NAVIGATION,
    RESOURCE_ACTIONS,
)
from models.access import AllowedActions, NavigationItem
from models.enums import UserRole
from models.user import User


NAVIGATION_CATALOG = tuple(
    NavigationItem(**item)
    for item in [*BASE_NAVIGATION, *ADMIN_NAVIGATION, *RENTER_NAVIGATION]
)


# -----------------------------------------------------
# Role checks
# -----------------------------------------------------
def has_role(user: Optional[User], required_roles: Iterable[UserRole]) -> bool:
    if user is None:
        return False
    return user.role in tuple(required_roles)


def has_all_roles(user: Optional[User], required_roles: Iterable[UserRole]) -> bool:
    """
    "Require all" guard mode. A user holds a single role, so this only
    passes when every listed role is that role.
    """
    roles = tuple(required_roles)
    if user is None or not roles:
        return False
    return all(user.role == role for role in roles)


def has_permission(user: Optional[User], permission: str) -> bool:
    """Look up `resource:verb` in PERMISSION_ROLES. Unknown keys deny."""
    return has_role(user, PERMISSION_ROLES.get(permission, ()))


def is_admin(user: Optional[User]) -> bool:
    return has_role(user, [UserRole.ADMIN])


def is_renter(user: Optional[User]) -> bool:
    return has_role(user, [UserRole.RENTER])


# -----------------------------------------------------
# Contracts
# -----------------------------------------------------
def can_access_contracts(user: Optional[User]) -> bool:
    return has_permission(user, "contracts:view")


def can_manage_contracts(user: Optional[User]) -> bool:
    """Create, edit and delete contracts."""
    return has_permission(user, "contracts:manage")


def can_view_contract_details(user: Optional[User]) -> bool:
    return has_permission(user, "contracts:view_details")


def can_upload_contract_documents(user: Optional[User]) -> bool:
    return has_permission(user, "contracts:upload_documents")


# -----------------------------------------------------
# Payments
# -----------------------------------------------------
def can_access_payments(user: Optional[User]) -> bool:
    return has_permission(user, "payments:view")


def can_manage_payments(user: Optional[User]) -> bool:
    return has_permission(user, "payments:manage")


def can_record_payments(user: Optional[User]) -> bool:
    return has_permission(user, "payments:record")


def can_view_payment_analytics(user: Optional[User]) -> bool:
    return has_permission(user, "payments:analytics")


def can_export_payment_data(user: Optional[User]) -> bool:
    return has_permission(user, "payments:export")


# -----------------------------------------------------
# Maintenance
# -----------------------------------------------------
def can_access_maintenance(user: Optional[User]) -> bool:
    return has_permission(user, "maintenance:view")


def can_manage_maintenance(user: Optional[User]) -> bool:
    """Assign and complete requests."""
    return has_permission(user, "maintenance:manage")


def can_create_maintenance(user: Optional[User]) -> bool:
    """Renters may file requests even though they cannot manage them."""
    return has_permission(user, "maintenance:create")


def can_assign_maintenance(user: Optional[User]) -> bool:
    return has_permission(user, "maintenance:assign")


def can_complete_maintenance(user: Optional[User]) -> bool:
    return has_permission(user, "maintenance:complete")


def can_delete_maintenance(user: Optional[User]) -> bool:
    return has_permission(user, "maintenance:delete")


# -----------------------------------------------------
# Expenses
# -----------------------------------------------------
def can_access_expenses(user: Optional[User]) -> bool:
    return has_permission(user, "expenses:view")


def can_manage_expenses(user: Optional[User]) -> bool:
    return has_permission(user, "expenses:manage")


def can_view_expense_analytics(user: Optional[User]) -> bool:
    return has_permission(user, "expenses:analytics")


def can_export_expense_data(user: Optional[User]) -> bool:
    return has_permission(user, "expenses:export")


# -----------------------------------------------------
# Reports
# -----------------------------------------------------
def can_access_reports(user: Optional[User]) -> bool:
    return has_permission(user, "reports:view")


def can_generate_reports(user: Optional[User]) -> bool:
    return has_permission(user, "reports:generate")


def can_export_reports(user: Optional[User]) -> bool:
    return has_permission(user, "reports:export")


def can_schedule_reports(user: Optional[User]) -> bool:
    return has_permission(user, "reports:schedule")


# -----------------------------------------------------
# Notifications
# -----------------------------------------------------
def can_access_notifications(user: Optional[User]) -> bool:
    return has_permission(user, "notifications:view")


def can_manage_notifications(user: Optional[User]) -> bool:
    return has_permission(user, "notifications:manage")


def can_create_bulk_notifications(user: Optional[User]) -> bool:
    return has_permission(user, "notifications:bulk_create")


# -----------------------------------------------------
# Property administration + system
# -----------------------------------------------------
def can_access_properties(user: Optional[User]) -> bool:
    return has_permission(user, "properties:view")


def can_access_renters(user: Optional[User]) -> bool:
    return has_permission(user, "renters:view")


def can_access_rooms(user: Optional[User]) -> bool:
    return has_permission(user, "rooms:view")


def can_perform_bulk_operations(user: Optional[User]) -> bool:
    return has_permission(user, "system:bulk_operations")


def can_access_financial_data(user: Optional[User]) -> bool:
    return has_permission(user, "system:financial_data")


def can_view_sensitive_info(user: Optional[User]) -> bool:
    return has_permission(user, "system:sensitive_info")


def can_modify_system_settings(user: Optional[User]) -> bool:
    return has_permission(user, "system:settings")


def can_access_user_management(user: Optional[User]) -> bool:
    return has_permission(user, "system:user_management")


# -----------------------------------------------------
# Ownership
# -----------------------------------------------------
def can_access_own_resource(user: Optional[User], resource_owner_id: str) -> bool:
    if user is None:
        return False
    if is_admin(user):
        return True
    return user.id == resource_owner_id


# -----------------------------------------------------
# Allowed actions
# -----------------------------------------------------
def get_allowed_actions(user: Optional[User], resource_type: Any) -> AllowedActions:
    """
    Six-way permission vector for a resource type.
    No user, or a resource type outside RESOURCE_ACTIONS, gets all False.
    """
    if user is None:
        return AllowedActions()

    action_permissions = RESOURCE_ACTIONS.get(str(resource_type))
    if action_permissions is None:
        return AllowedActions()

    return AllowedActions(**{
        action: has_permission(user, permission)
        for action, permission in action_permissions.items()
    })


# -----------------------------------------------------
# Navigation
# -----------------------------------------------------
def get_navigation_items(user: Optional[User]) -> List[NavigationItem]:
    if user is None:
        return []
    return [item for item in NAVIGATION_CATALOG if user.role in item.roles]


def _item_roles(item: Any):
    if isinstance(item, dict):
        return item.get("roles")
    return getattr(item, "roles", None)


def filter_menu_items(items: Iterable[Any], user: Optional[User]) -> List[Any]:
    """
    Keep items without a `roles` entry, plus items whose roles include
    the user's role. Works on dicts and on objects with a `roles` attribute.
    """
    visible = []
    for item in items:
        roles = _item_roles(item)
        if roles is None:
            visible.append(item)
        elif user is not None and user.role in roles:
            visible.append(item)
    return visible
