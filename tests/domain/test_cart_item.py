"""Tests for the CartItem aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.cart_item import CartItem
from storefront.cart.events import CartItemAdded, CartQuantityUpdated


def _make_item(quantity=3, unit_price=50.0):
    return CartItem.create(
        user_id="user-001",
        product_id="prod-001",
        store_id="store-001",
        quantity=quantity,
        unit_price=unit_price,
    )


class TestCartItem:
    def test_create_snapshots_price(self):
        item = _make_item(unit_price=42.5)
        assert item.unit_price == 42.5
        assert item.added_at is not None

    def test_create_raises_event(self):
        item = _make_item()
        events = [e for e in item._events if isinstance(e, CartItemAdded)]
        assert len(events) == 1
        assert events[0].quantity == 3

    def test_repeat_add_merges_quantity(self):
        item = _make_item(quantity=3)
        item.increase_quantity(2)
        assert item.quantity == 5

    def test_change_quantity_raises_event(self):
        item = _make_item(quantity=3)
        item.change_quantity(1)
        events = [e for e in item._events if isinstance(e, CartQuantityUpdated)]
        assert events[0].previous_quantity == 3
        assert events[0].new_quantity == 1

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_non_positive_quantity_is_rejected(self, quantity):
        item = _make_item()
        with pytest.raises(ValidationError):
            item.change_quantity(quantity)
        assert item.quantity == 3
