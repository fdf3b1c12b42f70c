"""
Field-by-field address validation.
"""

from __future__ import annotations

import re

from kungfu import Error, Ok, Result

from rigcart.address._types import SUPPORTED_COUNTRY, FieldErrors, ShippingAddress

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s+\-()]+$")
POSTCODE_PATTERN = re.compile(r"^[A-Z]{1,2}\d{1,2}[A-Z]?\s?\d[A-Z]{2}$", re.IGNORECASE)

MIN_PASSWORD_LENGTH = 6


def validate_address(
    address: ShippingAddress,
    *,
    create_account: bool = False,
) -> Result[ShippingAddress, FieldErrors]:
    """
    Check every field and collect all messages at once.

    Returns the trimmed address on success. The password only matters
    when the customer asked for an account.
    """
    clean = address.stripped()
    errors: FieldErrors = {}

    if not clean.full_name:
        errors["full_name"] = "Full name is required"

    if not clean.email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(clean.email):
        errors["email"] = "Invalid email address"

    if not clean.phone:
        errors["phone"] = "Phone number is required"
    elif not PHONE_PATTERN.match(clean.phone):
        errors["phone"] = "Invalid phone number"

    if not clean.line1:
        errors["line1"] = "Address is required"

    if not clean.city:
        errors["city"] = "City is required"

    if not clean.postcode:
        errors["postcode"] = "Postcode is required"
    elif not POSTCODE_PATTERN.match(clean.postcode):
        errors["postcode"] = "Invalid UK postcode"

    if clean.country != SUPPORTED_COUNTRY:
        errors["country"] = "We currently only ship within the United Kingdom"

    if create_account:
        if not clean.password:
            errors["password"] = "Password is required to create an account"
        elif len(clean.password) < MIN_PASSWORD_LENGTH:
            errors["password"] = f"Use at least {MIN_PASSWORD_LENGTH} characters"

    return Error(errors) if errors else Ok(clean)


__all__ = (
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "POSTCODE_PATTERN",
    "MIN_PASSWORD_LENGTH",
    "validate_address",
)
