"""Order placement — command, handler and the locking entry point.

Placement validates every line against the store and current stock, prices
each line from the user's cart snapshot (falling back to the live product
price), withdraws the stock and clears the user's cart. All of it happens in
the handler's Unit of Work, while ``place_order`` holds the stock locks of
every product involved.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.address.address import Address
from storefront.cart.cart_item import CartItem
from storefront.catalogue.product import Product
from storefront.catalogue.stock_locks import stock_locks
from storefront.domain import storefront
from storefront.order.order import Order
from storefront.store.store import Store
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier(required=True)
    store_id: Identifier(required=True)
    address_id: Identifier()
    items: Text(required=True)  # JSON: [{product_id, quantity, price?}]


def _merge_lines(raw_items):
    """Validate requested lines and fold repeated products into one line."""
    if not raw_items:
        raise ValidationError({"items": ["Order must contain at least one item"]})

    merged = {}
    for raw in raw_items:
        product_id = raw.get("product_id")
        quantity = raw.get("quantity")
        if not product_id:
            raise ValidationError({"items": ["Every item needs a product_id"]})
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValidationError({"items": [f"Quantity for product {product_id} must be a positive integer"]})

        line = merged.setdefault(str(product_id), {"product_id": str(product_id), "quantity": 0, "client_price": None})
        line["quantity"] += quantity
        if raw.get("price") is not None:
            line["client_price"] = raw["price"]
    return list(merged.values())


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = _merge_lines(json.loads(command.items) if isinstance(command.items, str) else command.items)

        current_domain.repository_for(Store).get(command.store_id)
        if command.address_id:
            current_domain.repository_for(Address).get(command.address_id)

        product_repo = current_domain.repository_for(Product)
        cart_repo = current_domain.repository_for(CartItem)
        snapshots = {str(item.product_id): item.unit_price for item in cart_repo.for_user(command.user_id)}

        # Validate every line before touching any stock
        products = {}
        for line in lines:
            product = product_repo.get(line["product_id"])
            if str(product.store_id) != str(command.store_id):
                raise ValidationError({"items": [f"Product {product.name} does not belong to this store"]})
            product.ensure_stock_for(line["quantity"])
            products[line["product_id"]] = product

            line["price"] = snapshots.get(line["product_id"], product.price)
            client_price = line.pop("client_price")
            if client_price is not None and float(client_price) != line["price"]:
                logger.warning(
                    "client_price_ignored",
                    product_id=line["product_id"],
                    client_price=client_price,
                    price=line["price"],
                )

        order = Order.place(
            user_id=command.user_id,
            store_id=command.store_id,
            lines=lines,
            address_id=command.address_id,
        )

        for line in lines:
            product = products[line["product_id"]]
            product.withdraw(line["quantity"], order_id=order.id)
            product_repo.add(product)

        current_domain.repository_for(Order).add(order)
        cleared = cart_repo.clear(command.user_id)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total_amount=order.total_amount,
            cart_rows_cleared=cleared,
        )
        return str(order.id)


def place_order(user_id, store_id, items, address_id=None) -> str:
    """Place an order while holding the stock locks of its products.

    ``items`` is a list of ``{product_id, quantity, price?}`` dicts. Returns
    the new order's id.
    """
    product_ids = [item.get("product_id") for item in items or [] if item.get("product_id")]
    with stock_locks(product_ids):
        return current_domain.process(
            PlaceOrder(
                user_id=user_id,
                store_id=store_id,
                address_id=address_id,
                items=json.dumps(items or []),
            ),
            asynchronous=False,
        )
