"""Intents the presentation layer dispatches to a StorefrontSession."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.address import AddressField


@dataclass(frozen=True)
class AddItem:
    product_id: str


@dataclass(frozen=True)
class RemoveItem:
    product_id: str


@dataclass(frozen=True)
class UpdateAddressField:
    field: AddressField
    value: str


@dataclass(frozen=True)
class SubmitOrder:
    pass


Intent = AddItem | RemoveItem | UpdateAddressField | SubmitOrder
