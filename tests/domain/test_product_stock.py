"""Tests for the Product stock ledger."""

import pytest
from protean.exceptions import ValidationError
from storefront.catalogue.events import ProductPriceChanged, StockLevelSet, StockRestocked, StockWithdrawn
from storefront.catalogue.product import Product
from storefront.exceptions import InsufficientStock


def _make_product(stock=10, price=50.0):
    return Product.create(
        store_id="store-001",
        category_id="cat-001",
        name="Darjeeling First Flush",
        price=price,
        stock=stock,
    )


class TestWithdraw:
    def test_withdraw_reduces_stock(self):
        product = _make_product(stock=10)
        product.withdraw(3, order_id="ord-001")
        assert product.stock == 7

    def test_withdraw_raises_event(self):
        product = _make_product(stock=10)
        product.withdraw(3, order_id="ord-001")
        events = [e for e in product._events if isinstance(e, StockWithdrawn)]
        assert len(events) == 1
        assert events[0].previous_stock == 10
        assert events[0].new_stock == 7
        assert events[0].order_id == "ord-001"

    def test_withdraw_all_remaining_stock(self):
        product = _make_product(stock=2)
        product.withdraw(2)
        assert product.stock == 0

    def test_withdraw_more_than_available_fails(self):
        product = _make_product(stock=2)
        with pytest.raises(InsufficientStock):
            product.withdraw(3)
        assert product.stock == 2

    def test_insufficient_stock_is_a_validation_error(self):
        product = _make_product(stock=0)
        with pytest.raises(ValidationError, match="Insufficient stock"):
            product.withdraw(1)

    def test_withdraw_zero_is_rejected(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.withdraw(0)


class TestRestock:
    def test_restock_adds_back(self):
        product = _make_product(stock=7)
        product.restock(3, order_id="ord-001")
        assert product.stock == 10

    def test_withdraw_then_restock_round_trips(self):
        product = _make_product(stock=10)
        product.withdraw(4)
        product.restock(4)
        assert product.stock == 10

    def test_restock_raises_event(self):
        product = _make_product(stock=7)
        product.restock(3)
        events = [e for e in product._events if isinstance(e, StockRestocked)]
        assert events[0].new_stock == 10


class TestSetStock:
    def test_set_stock(self):
        product = _make_product(stock=7)
        product.set_stock(25)
        assert product.stock == 25
        events = [e for e in product._events if isinstance(e, StockLevelSet)]
        assert events[0].previous_stock == 7

    def test_negative_stock_is_rejected(self):
        product = _make_product(stock=7)
        with pytest.raises(ValidationError):
            product.set_stock(-1)
        assert product.stock == 7

    def test_cannot_create_with_negative_stock(self):
        with pytest.raises(ValidationError):
            _make_product(stock=-5)


class TestPrice:
    def test_price_change_raises_event(self):
        product = _make_product(price=50.0)
        product.update_details(price=60.0)
        events = [e for e in product._events if isinstance(e, ProductPriceChanged)]
        assert len(events) == 1
        assert events[0].previous_price == 50.0
        assert events[0].new_price == 60.0

    def test_same_price_raises_no_price_event(self):
        product = _make_product(price=50.0)
        product.update_details(name="Darjeeling Second Flush", price=50.0)
        assert not [e for e in product._events if isinstance(e, ProductPriceChanged)]
        assert product.name == "Darjeeling Second Flush"

    def test_negative_price_is_rejected(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.change_price(-1.0)
