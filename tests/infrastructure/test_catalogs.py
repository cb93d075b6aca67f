"""Tests for the built-in and JSON-file product catalogs."""

import json
from pathlib import Path

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)
from storefront.infrastructure.persistence.memory_product_catalog import (
    DEFAULT_PRODUCTS,
    InMemoryProductCatalog,
)


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload))
    return path


class TestInMemoryProductCatalog:

    def test_default_products(self):
        catalog = InMemoryProductCatalog()
        names = [p.name for p in catalog.list_all()]
        assert names == [
            "Premium Wireless Headphones",
            "Smart Fitness Watch",
            "Bluetooth Speaker",
        ]

    def test_get_by_id(self):
        catalog = InMemoryProductCatalog()
        product = catalog.get_by_id(DEFAULT_PRODUCTS[1].id)
        assert product.price == Money.of("149.99")
        assert catalog.get_by_id("nope") is None


class TestJsonProductCatalog:

    def test_loads_products(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "1", "name": "Mug", "price": 12.5, "description": "Ceramic"},
            {"id": 2, "name": "Poster", "price": "7.00"},
        ])

        catalog = JsonProductCatalog(path)

        mug = catalog.get_by_id("1")
        assert mug.price == Money.of("12.50")
        assert mug.description == "Ceramic"
        poster = catalog.get_by_id("2")
        assert poster.image == ""
        assert [p.name for p in catalog.list_all()] == ["Mug", "Poster"]

    def test_currency_key_is_ignored_so_totals_always_add_up(self, tmp_path):
        path = _write(tmp_path, [
            {"id": "1", "name": "Mug", "price": "1.00", "currency": "USD"},
            {"id": "2", "name": "Poster", "price": "2.00", "currency": "EUR"},
        ])
        catalog = JsonProductCatalog(path)
        cart = Cart()

        cart.add_item(catalog.get_by_id("1"))
        cart.add_item(catalog.get_by_id("2"))

        assert {p.price.currency for p in catalog.list_all()} == {"USD"}
        assert cart.total() == Money.of("3.00")

    def test_rejects_non_list_file(self, tmp_path):
        path = _write(tmp_path, {"id": "1"})
        with pytest.raises(ValidationError, match="JSON list"):
            JsonProductCatalog(path)

    @pytest.mark.parametrize(
        "entry",
        [
            {"id": "1", "name": "Mug"},
            {"name": "Mug", "price": "1.00"},
            "Mug",
            None,
        ],
    )
    def test_rejects_malformed_entry(self, tmp_path, entry):
        path = _write(tmp_path, [entry])
        with pytest.raises(ValidationError, match="Invalid catalog entry #0"):
            JsonProductCatalog(path)

    def test_rejects_bad_price(self, tmp_path):
        path = _write(tmp_path, [{"id": "1", "name": "Mug", "price": "cheap"}])
        with pytest.raises(ValidationError, match="Invalid money amount"):
            JsonProductCatalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="Cannot read catalog file"):
            JsonProductCatalog(tmp_path / "absent.json")
