# core/form_validation.py

"""
Declarative form validation.

validate_field() runs its checks in a fixed order and reports only the
first failure:

    required → (empty optional value passes) → min/max length →
    min/max value → pattern → email → phone → url → date → custom

Nothing in here raises for bad input; parse failures in the url/date
checks become ValidationErrors.
"""

import math
import re
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional

from dateutil import parser as date_parser
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from models.validation import (
    FileUploadOptions,
    UploadedFileInfo,
    ValidationError,
    ValidationResult,
    ValidationRule,
)


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\+]?[1-9][\d]{0,15}$", re.ASCII)
PHONE_SEPARATORS = re.compile(r"[\s\-\(\)]")

# Strings JavaScript's Number() turns into a number
NUMERIC_STRING = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$|^[+-]?Infinity$")
RADIX_STRING = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")

_url_adapter = TypeAdapter(AnyUrl)
_date_adapter = TypeAdapter(date)
_datetime_adapter = TypeAdapter(datetime)


# -----------------------------------------------------
# Value helpers
# -----------------------------------------------------
def is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def to_number(value: Any) -> Optional[float]:
    """Numeric form of `value`, or None when it is not numeric-coercible."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if NUMERIC_STRING.match(text):
            return float(text.replace("Infinity", "inf"))
        if RADIX_STRING.match(text):
            return float(int(text, 0))
    return None


def format_number(number: Any) -> str:
    """Render a number the way JavaScript's String() does: 18.0 -> "18", 1e21 -> "1e+21"."""
    number = float(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # Shortest round-trip digits, then JS's placement of the decimal point
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        power = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text


def _js_string(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _js_string(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def as_text(value: Any) -> str:
    """String form used by the length and format checks."""
    return _js_string(value).strip()


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date or datetime into a naive UTC datetime.
    Returns None when the value is not a date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    else:
        text = value.strip() if isinstance(value, str) else value
        try:
            parsed = datetime.combine(_date_adapter.validate_python(text), time())
        except PydanticValidationError:
            try:
                parsed = _datetime_adapter.validate_python(text)
            except PydanticValidationError:
                parsed = _parse_loose_date(text)
                if parsed is None:
                    return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_loose_date(text: Any) -> Optional[datetime]:
    """Formats like "03/15/2024" or "March 15, 2024"."""
    if not isinstance(text, str) or not text:
        return None
    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError):
        return None


def is_url(text: str) -> bool:
    try:
        _url_adapter.validate_python(text)
    except PydanticValidationError:
        return False
    return True


# -----------------------------------------------------
# Ordered checks
# -----------------------------------------------------
# Each check returns an error message or None.

def _check_length(field_name, value, text, rule, form_data):
    if rule.min_length and len(text) < rule.min_length:
        return f"{field_name} must be at least {rule.min_length} characters long"
    if rule.max_length and len(text) > rule.max_length:
        return f"{field_name} must be no more than {rule.max_length} characters long"
    return None


def _check_range(field_name, value, text, rule, form_data):
    number = to_number(value)
    if number is None:
        return None
    if rule.min is not None and number < rule.min:
        return f"{field_name} must be at least {format_number(rule.min)}"
    if rule.max is not None and number > rule.max:
        return f"{field_name} must be no more than {format_number(rule.max)}"
    return None


def _check_pattern(field_name, value, text, rule, form_data):
    if rule.pattern is not None and not rule.pattern.search(text):
        return f"{field_name} format is invalid"
    return None


def _check_email(field_name, value, text, rule, form_data):
    if rule.email and not EMAIL_PATTERN.match(text):
        return f"{field_name} must be a valid email address"
    return None


def _check_phone(field_name, value, text, rule, form_data):
    if rule.phone and not PHONE_PATTERN.fullmatch(PHONE_SEPARATORS.sub("", text)):
        return f"{field_name} must be a valid phone number"
    return None


def _check_url(field_name, value, text, rule, form_data):
    if rule.url and not is_url(text):
        return f"{field_name} must be a valid URL"
    return None


def _check_date(field_name, value, text, rule, form_data):
    if rule.date and parse_date(value) is None:
        return f"{field_name} must be a valid date"
    return None


def _check_custom(field_name, value, text, rule, form_data):
    if rule.custom is None:
        return None
    return rule.custom(value, form_data) or None


FIELD_CHECKS = (
    _check_length,
    _check_range,
    _check_pattern,
    _check_email,
    _check_phone,
    _check_url,
    _check_date,
    _check_custom,
)


# -----------------------------------------------------
# Public API
# -----------------------------------------------------
def validate_field(
    field_name: str,
    value: Any,
    rule: ValidationRule,
    form_data: Optional[Mapping[str, Any]] = None,
) -> Optional[ValidationError]:
    """
    Validate one value against `rule`.

    `form_data` is the whole record and is forwarded to `rule.custom`
    for cross-field checks (e.g. password confirmation).
    """
    if rule.required and is_empty(value):
        return ValidationError(field=field_name, message=f"{field_name} is required")

    if is_empty(value):
        return None

    text = as_text(value)
    for check in FIELD_CHECKS:
        message = check(field_name, value, text, rule, form_data)
        if message:
            return ValidationError(field=field_name, message=message)

    return None


def validate_form(
    data: Mapping[str, Any],
    rules: Mapping[str, ValidationRule],
) -> ValidationResult:
    """
    Validate every field that has a rule, in rule order.
    Fields in `data` without a rule are ignored.
    """
    errors = []
    for field_name, rule in rules.items():
        error = validate_field(field_name, data.get(field_name), rule, form_data=data)
        if error:
            errors.append(error)

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_file_upload(
    file: UploadedFileInfo,
    options: Optional[FileUploadOptions] = None,
) -> Optional[ValidationError]:
    """Size first, then MIME type."""
    options = options or FileUploadOptions()

    if file.size > options.max_size:
        megabytes = math.floor(options.max_size / 1024 / 1024 + 0.5)
        return ValidationError(
            field="file",
            message=f"File size must be less than {megabytes}MB",
        )

    if options.allowed_types and file.type not in options.allowed_types:
        return ValidationError(
            field="file",
            message=f"File type must be one of: {', '.join(options.allowed_types)}",
        )

    return None


def validate_multiple_files(
    files: Iterable[UploadedFileInfo],
    options: Optional[FileUploadOptions] = None,
) -> List[ValidationError]:
    """
    Too many files yields a single error and skips the per-file checks.
    Per-file errors are reported as file_<index> / "File <n>: ...".
    """
    options = options or FileUploadOptions()
    files = list(files)

    if len(files) > options.max_files:
        return [ValidationError(field="files", message=f"Maximum {options.max_files} files allowed")]

    errors = []
    for index, file in enumerate(files):
        error = validate_file_upload(file, options)
        if error:
            errors.append(ValidationError(
                field=f"file_{index}",
                message=f"File {index + 1}: {error.message}",
            ))

    return errors
