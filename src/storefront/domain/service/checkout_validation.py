"""Domain service: checkout preconditions.

Checks run in a fixed order and stop at the first violation: the cart
must hold something, then each address field is checked in
``AddressField`` order. Only one missing field is reported per attempt.
"""

from __future__ import annotations

from storefront.domain.exceptions import EmptyCartError, MissingAddressFieldError
from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.cart import Cart


def validate_checkout(cart: Cart, address: ShippingAddress) -> None:
    if cart.is_empty():
        raise EmptyCartError()

    missing = address.first_missing_field()
    if missing is not None:
        raise MissingAddressFieldError(missing.value)
