"""
Shipping address.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

SUPPORTED_COUNTRY = "United Kingdom"

type FieldErrors = dict[str, str]
"""Field name → user-facing message."""


@dataclass(frozen=True, slots=True)
class ShippingAddress:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    line1: str = ""
    line2: str = ""
    city: str = ""
    county: str = ""
    postcode: str = ""
    country: str = SUPPORTED_COUNTRY
    password: str = ""

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def stripped(self) -> ShippingAddress:
        """Whitespace-trimmed copy. Passwords are left exactly as typed."""
        return replace(
            self,
            full_name=self.full_name.strip(),
            email=self.email.strip(),
            phone=self.phone.strip(),
            line1=self.line1.strip(),
            line2=self.line2.strip(),
            city=self.city.strip(),
            county=self.county.strip(),
            postcode=self.postcode.strip().upper(),
            country=self.country.strip(),
        )

    def to_storage(self) -> dict[str, str]:
        """Prefill record for the next checkout. Never includes the password."""
        return {
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "line1": self.line1,
            "line2": self.line2,
            "city": self.city,
            "county": self.county,
            "postcode": self.postcode,
            "country": self.country,
        }

    @classmethod
    def from_storage(cls, stored: Mapping[str, Any]) -> ShippingAddress:
        def text(key: str, default: str = "") -> str:
            value = stored.get(key, default)
            if not isinstance(value, str):
                raise TypeError(f"{key} must be a string, got {type(value).__name__}")
            return value

        return cls(
            full_name=text("fullName"),
            email=text("email"),
            phone=text("phone"),
            line1=text("line1"),
            line2=text("line2"),
            city=text("city"),
            county=text("county"),
            postcode=text("postcode"),
            country=text("country", SUPPORTED_COUNTRY),
        )


__all__ = ("SUPPORTED_COUNTRY", "FieldErrors", "ShippingAddress")
