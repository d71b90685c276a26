"""CartItem aggregate — one (user, product) row of a user's cart.

A user's cart is the set of their CartItem rows. Each row remembers the
product price at the moment it was first added (``unit_price``); checkout
uses that snapshot for the order line. Rows disappear at checkout or on
explicit removal.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer

from storefront.cart.events import CartItemAdded, CartQuantityUpdated
from storefront.domain import storefront


@storefront.aggregate
class CartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    store_id = Identifier()
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    added_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id, product_id, quantity, unit_price, store_id=None):
        now = datetime.now(UTC)
        item = cls(
            user_id=user_id,
            product_id=product_id,
            store_id=store_id,
            quantity=quantity,
            unit_price=unit_price,
            added_at=now,
            updated_at=now,
        )
        item.raise_(
            CartItemAdded(
                cart_item_id=str(item.id),
                user_id=str(user_id),
                product_id=str(product_id),
                quantity=quantity,
                unit_price=unit_price,
            )
        )
        return item

    def increase_quantity(self, quantity):
        """Merge a repeated add into this row."""
        self.change_quantity(self.quantity + quantity)

    def change_quantity(self, new_quantity):
        if new_quantity is None or new_quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

        previous = self.quantity
        self.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_item_id=str(self.id),
                user_id=str(self.user_id),
                previous_quantity=previous,
                new_quantity=new_quantity,
            )
        )


@storefront.repository(part_of=CartItem)
class CartItemRepository:
    def find_for(self, user_id, product_id) -> CartItem | None:
        return self._dao.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first

    def for_user(self, user_id) -> list[CartItem]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("added_at").all().items

    def for_product(self, product_id) -> list[CartItem]:
        return self._dao.query.filter(product_id=str(product_id)).all().items

    def clear(self, user_id) -> int:
        """Delete every row of the user's cart. Returns the number removed."""
        items = self.for_user(user_id)
        for item in items:
            self._dao.delete(item)
        return len(items)
