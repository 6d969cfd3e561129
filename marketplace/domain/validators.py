"""Field format validators used by the entity constructors.

Every validator is a pure predicate: it answers True or False and never
raises, so entities can run them in a fixed order and report only the
first failure.
"""

import re

import phonenumbers
from email_validator import EmailNotValidError, validate_email
from phonenumbers import NumberParseException
from pydantic import AnyUrl, TypeAdapter, ValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)

_HEX = "[0-9a-fA-F]"
_HYPHENATED_UUID = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_UUID_PATTERN = re.compile(
    rf"{_HYPHENATED_UUID}|{_HEX}{{32}}|\{{{_HYPHENATED_UUID}\}}|urn:uuid:{_HYPHENATED_UUID}"
)


def is_valid_uuid(value: str) -> bool:
    """
    Check that a string is a UUID in one of its standard text forms.

    Accepted: hyphenated ("25650673-c3e8-4cbb-a7bd-e27d268157b8"), simple
    (32 hex digits), braced ("{...}") and "urn:uuid:" prefixed. Hex digits
    may be upper or lower case. The version is not checked.
    """
    if not isinstance(value, str):
        return False
    return _UUID_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """Check email syntax with email-validator (no DNS lookups)."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(value: str) -> bool:
    """
    Check that a string is a valid phone number.

    No default region is assumed, so the number must be written in
    international form (e.g. "+5521999999999").
    """
    try:
        number = phonenumbers.parse(value, None)
    except NumberParseException:
        return False
    return phonenumbers.is_valid_number(number)


def is_valid_url(value: str) -> bool:
    """Check that a string is an absolute URL (a scheme is required)."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True
