"""Product aggregate — catalogue entry and the stock ledger for that product.

``stock`` is the available quantity. It only moves through ``withdraw``
(order placement), ``restock`` (order cancellation) and ``set_stock``
(administrative correction), and it can never drop below zero.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.catalogue.events import (
    ProductCreated,
    ProductDetailsUpdated,
    ProductPriceChanged,
    StockLevelSet,
    StockRestocked,
    StockWithdrawn,
)
from storefront.domain import storefront
from storefront.exceptions import InsufficientStock


@storefront.aggregate
class Product:
    store_id = Identifier(required=True)
    category_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, store_id, category_id, name, price, stock=0, description=None):
        now = datetime.now(UTC)
        product = cls(
            store_id=store_id,
            category_id=category_id,
            name=name,
            description=description,
            price=price,
            stock=stock,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                store_id=str(store_id),
                category_id=str(category_id),
                name=name,
                price=price,
                stock=stock,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------
    def update_details(self, name=None, description=None, category_id=None, price=None):
        now = datetime.now(UTC)

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if category_id is not None:
            self.category_id = category_id
        self.updated_at = now

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                description=self.description,
                category_id=str(self.category_id),
            )
        )

        if price is not None and price != self.price:
            self.change_price(price)

    def change_price(self, new_price):
        """Change the live price. Orders and cart snapshots are unaffected."""
        if new_price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        previous = self.price
        now = datetime.now(UTC)
        self.price = new_price
        self.updated_at = now

        self.raise_(
            ProductPriceChanged(
                product_id=str(self.id),
                previous_price=previous,
                new_price=new_price,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Stock ledger
    # -------------------------------------------------------------------
    def has_stock_for(self, quantity) -> bool:
        return self.stock >= quantity

    def ensure_stock_for(self, quantity):
        """Raise InsufficientStock unless ``quantity`` units are available."""
        if not self.has_stock_for(quantity):
            raise InsufficientStock(
                {"stock": [f"Insufficient stock for product {self.name}: {self.stock} available, {quantity} requested"]}
            )

    def withdraw(self, quantity, order_id=None):
        """Take ``quantity`` units out of stock, refusing to go below zero."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self.ensure_stock_for(quantity)

        previous = self.stock
        self.stock = previous - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockWithdrawn(
                product_id=str(self.id),
                order_id=str(order_id) if order_id else None,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

    def restock(self, quantity, order_id=None):
        """Return ``quantity`` units to stock."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        previous = self.stock
        self.stock = previous + quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockRestocked(
                product_id=str(self.id),
                order_id=str(order_id) if order_id else None,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

    def set_stock(self, stock):
        if stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

        previous = self.stock
        self.stock = stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockLevelSet(
                product_id=str(self.id),
                previous_stock=previous,
                new_stock=stock,
            )
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    def for_store(self, store_id) -> list[Product]:
        return self._dao.query.filter(store_id=store_id).order_by("-created_at").all().items

    def for_category(self, category_id) -> list[Product]:
        return self._dao.query.filter(category_id=category_id).order_by("-created_at").all().items

    def search(self, store_id, query) -> list[Product]:
        """Case-insensitive match on name or description within one store."""
        needle = query.strip().lower()
        return [
            product
            for product in self.for_store(store_id)
            if needle in (product.name or "").lower() or needle in (product.description or "").lower()
        ]
