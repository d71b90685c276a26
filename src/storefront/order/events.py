"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was created from validated lines, with stock withdrawn."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    store_id = Identifier(required=True)
    address_id = Identifier()
    items = Text(required=True)  # JSON: [{product_id, quantity, price}]
    total_amount = Float(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCancelled:
    """An order was cancelled; its stock goes back and any payment is refunded."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_status = String(required=True)
    item_count = Integer(required=True)
    cancelled_at = DateTime(required=True)
