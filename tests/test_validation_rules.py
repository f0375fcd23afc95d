# tests/test_validation_rules.py

"""
Tests for the dashboard form rule tables.
"""

from core.form_validation import validate_field, validate_form
from core.validation_rules import (
    FORM_RULES,
    contract_validation_rules,
    expense_validation_rules,
    login_validation_rules,
    maintenance_validation_rules,
    payment_validation_rules,
    registration_validation_rules,
)


VALID_CONTRACT = {
    "renterId": "r-1",
    "roomId": "room-1",
    "startDate": "2024-01-01",
    "endDate": "2024-12-31",
    "monthlyRent": "1200",
    "securityDeposit": 500,
    "terms": "Standard lease",
}

VALID_REGISTRATION = {
    "name": "Jane Renter",
    "email": "jane@example.com",
    "password": "Secret123",
    "confirmPassword": "Secret123",
}


# -----------------------------------------------------
# Thresholds
# -----------------------------------------------------
def test_contract_rules():
    for field in ("renterId", "roomId", "startDate", "endDate", "monthlyRent"):
        assert contract_validation_rules[field].required is True
    assert contract_validation_rules["monthlyRent"].min == 0
    assert contract_validation_rules["securityDeposit"].required is False
    assert contract_validation_rules["terms"].max_length == 2000


def test_payment_rules():
    for field in ("contractId", "amount", "dueDate", "method"):
        assert payment_validation_rules[field].required is True
    assert payment_validation_rules["amount"].min == 0.01
    assert payment_validation_rules["notes"].max_length == 500


def test_maintenance_rules():
    for field in ("renterId", "roomId", "title", "description", "category", "priority"):
        assert maintenance_validation_rules[field].required is True
    assert maintenance_validation_rules["title"].min_length == 3
    assert maintenance_validation_rules["title"].max_length == 100
    assert maintenance_validation_rules["description"].min_length == 10
    assert maintenance_validation_rules["description"].max_length == 1000


def test_expense_rules():
    for field in ("propertyId", "category", "amount", "description", "date"):
        assert expense_validation_rules[field].required is True
    assert expense_validation_rules["amount"].min == 0.01
    assert expense_validation_rules["description"].min_length == 3
    assert expense_validation_rules["vendor"].max_length == 100


def test_auth_rules():
    assert registration_validation_rules["name"].min_length == 2
    assert registration_validation_rules["password"].min_length == 8
    assert login_validation_rules["password"].min_length == 1
    assert login_validation_rules["email"].email is True


def test_form_registry():
    assert set(FORM_RULES) == {"contract", "payment", "maintenance", "expense", "registration", "login"}


# -----------------------------------------------------
# Contract checks
# -----------------------------------------------------
def test_valid_contract():
    assert validate_form(VALID_CONTRACT, contract_validation_rules).is_valid


def test_contract_end_before_start():
    result = validate_form({**VALID_CONTRACT, "endDate": "2023-06-01"}, contract_validation_rules)
    assert [(e.field, e.message) for e in result.errors] == [
        ("endDate", "End date must be after start date"),
    ]


def test_contract_same_day_end_is_rejected():
    result = validate_form({**VALID_CONTRACT, "endDate": "2024-01-01"}, contract_validation_rules)
    assert result.errors[0].message == "End date must be after start date"


def test_contract_rent_not_a_number():
    result = validate_form({**VALID_CONTRACT, "monthlyRent": "lots"}, contract_validation_rules)
    assert result.errors[0].message == "Monthly rent must be a valid number"


def test_contract_negative_rent_hits_min_first():
    result = validate_form({**VALID_CONTRACT, "monthlyRent": -5}, contract_validation_rules)
    assert result.errors[0].message == "monthlyRent must be at least 0"


def test_contract_optional_deposit_may_be_blank():
    assert validate_form({**VALID_CONTRACT, "securityDeposit": ""}, contract_validation_rules).is_valid


def test_end_date_check_without_form_data():
    rule = contract_validation_rules["endDate"]
    assert validate_field("endDate", "2024-12-31", rule) is None


# -----------------------------------------------------
# Payments / expenses
# -----------------------------------------------------
def test_payment_amount_below_minimum():
    data = {"contractId": "c-1", "amount": 0, "dueDate": "2024-02-01", "method": "cash"}
    result = validate_form(data, payment_validation_rules)
    assert [(e.field, e.message) for e in result.errors] == [("amount", "amount must be at least 0.01")]


def test_expense_reports_each_bad_field():
    result = validate_form({"amount": "abc", "description": "ok"}, expense_validation_rules)
    assert [e.field for e in result.errors] == ["propertyId", "category", "amount", "description", "date"]
    assert result.errors[2].message == "Amount must be a valid number"


def test_maintenance_title_too_short():
    error = validate_field("title", "ab", maintenance_validation_rules["title"])
    assert error.message == "title must be at least 3 characters long"


# -----------------------------------------------------
# Registration
# -----------------------------------------------------
def test_valid_registration():
    assert validate_form(VALID_REGISTRATION, registration_validation_rules).is_valid


def test_short_password_reports_length_not_complexity():
    data = {**VALID_REGISTRATION, "password": "abc", "confirmPassword": "abc"}
    result = validate_form(data, registration_validation_rules)
    assert [(e.field, e.message) for e in result.errors] == [
        ("password", "password must be at least 8 characters long"),
    ]


def test_password_complexity():
    data = {**VALID_REGISTRATION, "password": "alllowercase1", "confirmPassword": "alllowercase1"}
    result = validate_form(data, registration_validation_rules)
    assert result.errors[0].message == (
        "Password must contain at least one uppercase letter, one lowercase letter, and one number"
    )


def test_password_confirmation_mismatch():
    result = validate_form({**VALID_REGISTRATION, "confirmPassword": "Secret124"}, registration_validation_rules)
    assert [(e.field, e.message) for e in result.errors] == [("confirmPassword", "Passwords do not match")]
