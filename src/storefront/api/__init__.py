"""Storefront API package."""

from storefront.api.routes import (
    address_router,
    cart_router,
    category_router,
    order_router,
    payment_router,
    product_router,
    store_router,
    user_router,
)

__all__ = [
    "store_router",
    "category_router",
    "product_router",
    "cart_router",
    "address_router",
    "order_router",
    "payment_router",
    "user_router",
]
