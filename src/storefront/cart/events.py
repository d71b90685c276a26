"""Domain events for the CartItem aggregate."""

from protean.fields import Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="CartItem")
class CartItemAdded:
    """A product entered a user's cart for the first time."""

    __version__ = 1

    cart_item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_price = Float(required=True)


@storefront.event(part_of="CartItem")
class CartQuantityUpdated:
    """The quantity of a cart row changed, by merge or by explicit update."""

    __version__ = 1

    cart_item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
