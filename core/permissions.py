from models.enums import UserRole

ADMIN = UserRole.ADMIN
RENTER = UserRole.RENTER

ADMIN_ONLY = (ADMIN,)
ALL_ROLES = (ADMIN, RENTER)


# ============================================
# CENTRALIZED PERMISSION → ROLES MAP
# ============================================
# Keys are "<resource>:<verb>". Existing dashboard screens depend on these
# exact role sets.
PERMISSION_ROLES = {

    # =====================================================
    # CONTRACTS
    # =====================================================
    "contracts:view": ALL_ROLES,
    "contracts:view_details": ALL_ROLES,
    "contracts:manage": ADMIN_ONLY,
    "contracts:upload_documents": ADMIN_ONLY,

    # =====================================================
    # PAYMENTS
    # =====================================================
    "payments:view": ALL_ROLES,
    "payments:manage": ADMIN_ONLY,
    "payments:record": ADMIN_ONLY,
    "payments:analytics": ADMIN_ONLY,
    "payments:export": ADMIN_ONLY,

    # =====================================================
    # MAINTENANCE: renters may file requests
    # =====================================================
    "maintenance:view": ALL_ROLES,
    "maintenance:create": ALL_ROLES,
    "maintenance:manage": ADMIN_ONLY,
    "maintenance:assign": ADMIN_ONLY,
    "maintenance:complete": ADMIN_ONLY,
    "maintenance:delete": ADMIN_ONLY,

    # =====================================================
    # EXPENSES
    # =====================================================
    "expenses:view": ADMIN_ONLY,
    "expenses:manage": ADMIN_ONLY,
    "expenses:analytics": ADMIN_ONLY,
    "expenses:export": ADMIN_ONLY,

    # =====================================================
    # REPORTS
    # =====================================================
    "reports:view": ADMIN_ONLY,
    "reports:generate": ADMIN_ONLY,
    "reports:export": ADMIN_ONLY,
    "reports:schedule": ADMIN_ONLY,

    # =====================================================
    # NOTIFICATIONS
    # =====================================================
    "notifications:view": ALL_ROLES,
    "notifications:manage": ADMIN_ONLY,
    "notifications:bulk_create": ADMIN_ONLY,

    # =====================================================
    # PROPERTY ADMINISTRATION
    # =====================================================
    "properties:view": ADMIN_ONLY,
    "renters:view": ADMIN_ONLY,
    "rooms:view": ADMIN_ONLY,

    # =====================================================
    # SYSTEM
    # =====================================================
    "system:bulk_operations": ADMIN_ONLY,
    "system:financial_data": ADMIN_ONLY,
    "system:sensitive_info": ADMIN_ONLY,
    "system:settings": ADMIN_ONLY,
    "system:user_management": ADMIN_ONLY,
}


# ============================================
# RESOURCE → ACTION → PERMISSION
# ============================================
# Drives get_allowed_actions(). A resource type missing here gets no actions.
RESOURCE_ACTIONS = {
    "contracts": {
        "view": "contracts:view_details",
        "create": "contracts:manage",
        "edit": "contracts:manage",
        "delete": "contracts:manage",
        "export": "contracts:manage",
        "manage": "contracts:manage",
    },
    "payments": {
        "view": "payments:view",
        "create": "payments:record",
        "edit": "payments:manage",
        "delete": "payments:manage",
        "export": "payments:export",
        "manage": "payments:manage",
    },
    "maintenance": {
        "view": "maintenance:view",
        "create": "maintenance:create",
        "edit": "maintenance:manage",
        "delete": "maintenance:delete",
        "export": "maintenance:manage",
        "manage": "maintenance:manage",
    },
    "expenses": {
        "view": "expenses:view",
        "create": "expenses:manage",
        "edit": "expenses:manage",
        "delete": "expenses:manage",
        "export": "expenses:export",
        "manage": "expenses:manage",
    },
    "reports": {
        "view": "reports:view",
        "create": "reports:generate",
        "edit": "reports:generate",
        "delete": "reports:generate",
        "export": "reports:export",
        "manage": "reports:generate",
    },
    "notifications": {
        "view": "notifications:view",
        "create": "notifications:manage",
        "edit": "notifications:manage",
        "delete": "notifications:manage",
        "export": "notifications:manage",
        "manage": "notifications:manage",
    },
}


# ============================================
# NAVIGATION CATALOG
# ============================================
# Declaration order is display order.
BASE_NAVIGATION = [
    {"name": "Dashboard", "href": "/dashboard", "icon": "Home", "roles": ALL_ROLES},
]

ADMIN_NAVIGATION = [
    {"name": "Properties", "href": "/properties", "icon": "Building", "roles": ADMIN_ONLY},
    {"name": "Rooms", "href": "/rooms", "icon": "Door", "roles": ADMIN_ONLY},
    {"name": "Renters", "href": "/renters", "icon": "Users", "roles": ADMIN_ONLY},
    {"name": "Contracts", "href": "/contracts", "icon": "FileText", "roles": ADMIN_ONLY},
    {"name": "Payments", "href": "/payments", "icon": "CreditCard", "roles": ADMIN_ONLY},
    {"name": "Maintenance", "href": "/maintenance", "icon": "Wrench", "roles": ADMIN_ONLY},
    {"name": "Expenses", "href": "/expenses", "icon": "Receipt", "roles": ADMIN_ONLY},
    {"name": "Reports", "href": "/reports", "icon": "BarChart", "roles": ADMIN_ONLY},
]

RENTER_NAVIGATION = [
    {"name": "My Contract", "href": "/my-contract", "icon": "FileText", "roles": (RENTER,)},
    {"name": "My Payments", "href": "/my-payments", "icon": "CreditCard", "roles": (RENTER,)},
    {"name": "Maintenance", "href": "/maintenance", "icon": "Wrench", "roles": (RENTER,)},
]
