"""Storefront bounded context — stores, catalogue, carts, orders and payments.

A single Protean domain so that checkout can withdraw stock, snapshot the
order and clear the cart inside one Unit of Work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
