"""Read side of the cart: rows joined with live product data, and totals."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.catalogue.product import Product


def _products_by_id(product_ids):
    repo = current_domain.repository_for(Product)
    products = {}
    for product_id in set(product_ids):
        try:
            products[str(product_id)] = repo.get(product_id)
        except ObjectNotFoundError:
            # Orphaned row, priced at zero
            continue
    return products


def cart_lines(user_id) -> list[dict]:
    """Cart rows of ``user_id`` with the product's live name and price."""
    items = current_domain.repository_for(CartItem).for_user(user_id)
    products = _products_by_id(item.product_id for item in items)

    lines = []
    for item in items:
        product = products.get(str(item.product_id))
        lines.append(
            {
                "id": str(item.id),
                "user_id": str(item.user_id),
                "product_id": str(item.product_id),
                "store_id": str(item.store_id) if item.store_id else None,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "product_name": product.name if product else None,
                "product_price": product.price if product else None,
                "added_at": item.added_at,
            }
        )
    return lines


def cart_total(user_id) -> dict:
    """Sum of live ``price * quantity`` over the cart, and the number of rows."""
    lines = cart_lines(user_id)
    total = sum((line["product_price"] or 0.0) * line["quantity"] for line in lines)
    return {"total": round(total, 2), "item_count": len(lines)}
