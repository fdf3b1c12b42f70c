"""
Address — UK shipping address, validation and prefill.

    from rigcart import address as A

    match A.validate_address(form, create_account=True):
        case Ok(clean): ...
        case Error(field_errors): ...
"""

from rigcart.address._types import (
    SUPPORTED_COUNTRY,
    FieldErrors,
    ShippingAddress,
)
from rigcart.address._validate import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    POSTCODE_PATTERN,
    MIN_PASSWORD_LENGTH,
    validate_address,
)
from rigcart.address._book import AddressBook

__all__ = (
    "SUPPORTED_COUNTRY",
    "FieldErrors",
    "ShippingAddress",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    "POSTCODE_PATTERN",
    "MIN_PASSWORD_LENGTH",
    "validate_address",
    "AddressBook",
)
