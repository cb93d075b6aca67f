"""Shipping address value object and its closed set of fields."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from storefront.domain.exceptions import ValidationError


class AddressField(Enum):
    """Recognised address fields, in the order checkout validates them.

    Values are the names used on the wire and in customer notices.
    """

    STREET = "street"
    CITY = "city"
    STATE = "state"
    ZIP_CODE = "zipCode"
    COUNTRY = "country"

    @property
    def attribute(self) -> str:
        return self.name.lower()

    @staticmethod
    def parse(name: str | AddressField) -> AddressField:
        """Accept either the wire name (``zipCode``) or the member name."""
        if isinstance(name, AddressField):
            return name
        for member in AddressField:
            if name in (member.value, member.attribute):
                return member
        raise ValidationError(f"Unknown address field: {name!r}")


@dataclass(frozen=True)
class ShippingAddress:
    """Where the order ships to.

    Fields start empty and are filled one at a time. Completeness is only
    checked at submission; blank means the empty string, whitespace is
    accepted as-is.
    """

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""

    @staticmethod
    def empty() -> ShippingAddress:
        return ShippingAddress()

    def get(self, field: AddressField) -> str:
        return getattr(self, field.attribute)

    def with_field(self, field: AddressField, value: str) -> ShippingAddress:
        return replace(self, **{field.attribute: value})

    def missing_fields(self) -> list[AddressField]:
        return [f for f in AddressField if not self.get(f)]

    def first_missing_field(self) -> AddressField | None:
        for f in AddressField:
            if not self.get(f):
                return f
        return None

    def to_payload(self) -> dict[str, str]:
        return {f.value: self.get(f) for f in AddressField}
