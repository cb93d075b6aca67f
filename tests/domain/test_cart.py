"""Unit tests for the Cart aggregate."""

from dataclasses import replace

import pytest

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


def _product(pid: str = "A", price: str = "10.00", name: str | None = None) -> Product:
    return Product(id=pid, name=name or f"Product {pid}", price=Money.of(price))


class TestAddItem:

    def test_first_add_creates_line_with_quantity_one(self):
        cart = Cart()
        cart.add_item(_product("A", "10.00", "Widget"))

        (line,) = cart.items
        assert line.product_id == "A"
        assert line.name == "Widget"
        assert line.price == Money.of("10.00")
        assert line.quantity == Quantity(1)

    def test_repeated_add_merges_into_one_line(self):
        cart = Cart()
        for _ in range(3):
            cart.add_item(_product("A"))

        assert cart.count() == 1
        assert cart.items[0].quantity.value == 3

    @pytest.mark.parametrize(
        "sequence",
        [
            ["A", "B", "A", "C", "B", "A"],
            ["C"] * 5,
            ["A", "B", "C"],
        ],
    )
    def test_one_line_per_product_with_add_count(self, sequence):
        cart = Cart()
        for pid in sequence:
            cart.add_item(_product(pid))

        ids = [line.product_id for line in cart.items]
        assert len(ids) == len(set(ids))
        for line in cart.items:
            assert line.quantity.value == sequence.count(line.product_id)

    def test_insertion_order_preserved(self):
        cart = Cart()
        for pid in ["B", "A", "B", "C"]:
            cart.add_item(_product(pid))
        assert [line.product_id for line in cart.items] == ["B", "A", "C"]

    def test_price_is_not_resnapshotted(self):
        cart = Cart()
        original = _product("A", "10.00")
        cart.add_item(original)

        repriced = replace(original, price=Money.of("99.00"))
        cart.add_item(repriced)

        line = cart.find("A")
        assert line.price == Money.of("10.00")
        assert line.quantity.value == 2


class TestRemoveItem:

    def test_removes_whole_line(self):
        cart = Cart()
        cart.add_item(_product("A"))
        cart.add_item(_product("A"))
        cart.add_item(_product("B"))

        cart.remove_item("A")

        assert [line.product_id for line in cart.items] == ["B"]

    def test_unknown_id_is_noop(self):
        cart = Cart()
        cart.add_item(_product("A"))
        before = cart.items

        cart.remove_item("missing")

        assert cart.items == before

    def test_readding_after_remove_starts_fresh(self):
        cart = Cart()
        cart.add_item(_product("A"))
        cart.add_item(_product("A"))
        cart.remove_item("A")

        cart.add_item(_product("A"))

        assert cart.find("A").quantity == Quantity(1)


class TestQueries:

    def test_empty_cart(self):
        cart = Cart()
        assert cart.is_empty()
        assert cart.count() == 0
        assert cart.unit_count() == 0
        assert cart.total() == Money.zero()

    def test_example_scenario(self):
        cart = Cart()
        a = _product("A", "10.00")
        b = _product("B", "5.00")
        cart.add_item(a)
        cart.add_item(a)
        cart.add_item(b)

        assert cart.count() == 2
        assert cart.unit_count() == 3
        assert cart.total() == Money.of("25.00")

        cart.remove_item("A")
        assert cart.total() == Money.of("5.00")

    def test_total_is_sum_of_line_totals(self):
        cart = Cart()
        for pid, price, times in [("A", "79.99", 2), ("B", "149.99", 1), ("C", "89.99", 3)]:
            for _ in range(times):
                cart.add_item(_product(pid, price))

        expected = sum(
            (line.line_total for line in cart.items), start=Money.zero()
        )
        assert cart.total() == expected
        assert cart.total() == Money.of("579.94")

    def test_total_follows_mutations(self):
        cart = Cart()
        cart.add_item(_product("A", "3.00"))
        assert cart.total() == Money.of("3.00")
        cart.add_item(_product("A", "3.00"))
        assert cart.total() == Money.of("6.00")
        cart.clear()
        assert cart.total() == Money.zero()

    def test_items_snapshot_is_detached(self):
        cart = Cart()
        cart.add_item(_product("A"))
        snapshot = cart.items

        cart.add_item(_product("A"))

        assert snapshot[0].quantity.value == 1
        assert cart.items[0].quantity.value == 2

    def test_clear(self):
        cart = Cart()
        cart.add_item(_product("A"))
        cart.clear()
        assert cart.is_empty()
