"""
utils/validation_utils.py

Purpose: Input validation

- Contact form field schema (required fields, max lengths)
- Whitespace cleanup and length capping
- Email shape check
- Sri Lankan phone number normalization
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from utils.constants import (
    COUNTRY_CODE,
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    FIRST_NAME_MAX_LENGTH,
    INTERNATIONAL_NUMBER_LENGTH,
    LAST_NAME_MAX_LENGTH,
    LOCAL_NUMBER_LENGTH,
    MESSAGE_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    PREFIXED_NUMBER_LENGTH,
    SUBJECT_MAX_LENGTH,
)

_WHITESPACE_RE = re.compile(r"\s+")
_NON_DIGIT_RE = re.compile(r"[^0-9]")  # ASCII digits only; fullwidth and other scripts are dropped
_EMAIL_RE = re.compile(EMAIL_PATTERN)


class FieldRule(NamedTuple):
    name: str
    max_length: int
    required: bool = True
    email: bool = False


# Contact form schema, in the order the form presents the fields
CONTACT_FORM_SCHEMA = (
    FieldRule("first_name", FIRST_NAME_MAX_LENGTH),
    FieldRule("last_name", LAST_NAME_MAX_LENGTH),
    FieldRule("email", EMAIL_MAX_LENGTH, email=True),
    FieldRule("number", PHONE_MAX_LENGTH),
    FieldRule("subject", SUBJECT_MAX_LENGTH, required=False),
    FieldRule("message", MESSAGE_MAX_LENGTH),
)


@dataclass
class ValidationResult:
    """Cleaned field values plus the names of the fields that failed."""
    values: Dict[str, str]
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def clean_text(value: Any, max_length: int = 500) -> str:
    """
    Coerces a raw form value to a single-line string.

    Collapses whitespace runs, trims, then caps the length.
    None becomes an empty string.
    """
    if value is None:
        return ""

    text = _WHITESPACE_RE.sub(" ", str(value)).strip()
    return text[:max_length]


def is_email(value: Optional[str]) -> bool:
    """Lightweight local@domain.tld check."""
    return bool(_EMAIL_RE.fullmatch(value or ""))


def sanitize_submission(raw: Mapping[str, Any], schema=CONTACT_FORM_SCHEMA) -> ValidationResult:
    """
    Cleans every field of the schema and checks presence and email shape.

    Args:
        raw: Untrusted field values (missing keys are treated as empty)
        schema: Field rules to apply

    Returns:
        ValidationResult; invalid when any required field is empty
        or an email field does not look like an address
    """
    result = ValidationResult(values={})

    for rule in schema:
        value = clean_text(raw.get(rule.name), rule.max_length)
        result.values[rule.name] = value

        if rule.required and not value:
            result.errors.append(rule.name)
        elif rule.email and value and not is_email(value):
            result.errors.append(rule.name)

    return result


def normalize_phone(raw: Optional[str]) -> Optional[str]:
    """
    Normalizes a Sri Lankan number to the 94XXXXXXXXX form when possible.

    Accepts 0771234567, +94771234567, 94771234567, 094771234567 and
    anything with separators. Other digit strings pass through as-is,
    since the gateway may still accept them.

    Returns:
        Digit string, or None if the input has no digits at all
    """
    digits = _NON_DIGIT_RE.sub("", raw or "")
    if not digits:
        return None

    # 077xxxxxxx -> 9477xxxxxxx
    if len(digits) == LOCAL_NUMBER_LENGTH and digits.startswith("0"):
        return COUNTRY_CODE + digits[1:]

    # 94xxxxxxxxx (with or without a leading +)
    if len(digits) == INTERNATIONAL_NUMBER_LENGTH and digits.startswith(COUNTRY_CODE):
        return digits

    # 094xxxxxxxxx
    if len(digits) == PREFIXED_NUMBER_LENGTH and digits.startswith("0" + COUNTRY_CODE):
        return digits[1:]

    return digits
