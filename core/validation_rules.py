# core/validation_rules.py

"""
Rule tables for the dashboard's forms, keyed by the form's field names.
Other code and the frontend rely on these exact thresholds.
"""

import re

from core.form_validation import parse_date, to_number
from models.validation import ValidationRule


PASSWORD_COMPLEXITY = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


# -----------------------------------------------------
# Cross-field / numeric checks
# -----------------------------------------------------
def end_date_after_start(value, form_data=None):
    start_raw = (form_data or {}).get("startDate")
    if not start_raw or not value:
        return None

    start, end = parse_date(start_raw), parse_date(value)
    if start is None or end is None:
        return None
    if end <= start:
        return "End date must be after start date"
    return None


def numeric(message):
    """Custom check that rejects non-numeric values with `message`."""
    def check(value, form_data=None):
        if to_number(value) is None:
            return message
        return None
    return check


def password_complexity(value, form_data=None):
    if not PASSWORD_COMPLEXITY.search(str(value)):
        return "Password must contain at least one uppercase letter, one lowercase letter, and one number"
    return None


def passwords_match(value, form_data=None):
    if value != (form_data or {}).get("password"):
        return "Passwords do not match"
    return None


# =====================================================
# CONTRACTS
# =====================================================
contract_validation_rules = {
    "renterId": ValidationRule(required=True),
    "roomId": ValidationRule(required=True),
    "startDate": ValidationRule(required=True, date=True),
    "endDate": ValidationRule(required=True, date=True, custom=end_date_after_start),
    "monthlyRent": ValidationRule(
        required=True,
        min=0,
        custom=numeric("Monthly rent must be a valid number"),
    ),
    "securityDeposit": ValidationRule(
        min=0,
        custom=numeric("Security deposit must be a valid number"),
    ),
    "terms": ValidationRule(max_length=2000),
}

# =====================================================
# PAYMENTS
# =====================================================
payment_validation_rules = {
    "contractId": ValidationRule(required=True),
    "amount": ValidationRule(
        required=True,
        min=0.01,
        custom=numeric("Amount must be a valid number"),
    ),
    "dueDate": ValidationRule(required=True, date=True),
    "paymentDate": ValidationRule(date=True),
    "method": ValidationRule(required=True),
    "notes": ValidationRule(max_length=500),
}

# =====================================================
# MAINTENANCE REQUESTS
# =====================================================
maintenance_validation_rules = {
    "renterId": ValidationRule(required=True),
    "roomId": ValidationRule(required=True),
    "title": ValidationRule(required=True, min_length=3, max_length=100),
    "description": ValidationRule(required=True, min_length=10, max_length=1000),
    "category": ValidationRule(required=True),
    "priority": ValidationRule(required=True),
}

# =====================================================
# EXPENSES
# =====================================================
expense_validation_rules = {
    "propertyId": ValidationRule(required=True),
    "category": ValidationRule(required=True),
    "amount": ValidationRule(
        required=True,
        min=0.01,
        custom=numeric("Amount must be a valid number"),
    ),
    "description": ValidationRule(required=True, min_length=3, max_length=200),
    "date": ValidationRule(required=True, date=True),
    "vendor": ValidationRule(max_length=100),
}

# =====================================================
# AUTH
# =====================================================
registration_validation_rules = {
    "name": ValidationRule(required=True, min_length=2, max_length=50),
    "email": ValidationRule(required=True, email=True),
    "password": ValidationRule(required=True, min_length=8, custom=password_complexity),
    "confirmPassword": ValidationRule(required=True, custom=passwords_match),
}

login_validation_rules = {
    "email": ValidationRule(required=True, email=True),
    "password": ValidationRule(required=True, min_length=1),
}


FORM_RULES = {
    "contract": contract_validation_rules,
    "payment": payment_validation_rules,
    "maintenance": maintenance_validation_rules,
    "expense": expense_validation_rules,
    "registration": registration_validation_rules,
    "login": login_validation_rules,
}
