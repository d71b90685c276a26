"""Order cancellation, which also restocks the lines and refunds any payment."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.catalogue.stock_locks import stock_locks
from storefront.domain import storefront
from storefront.order.order import Order
from storefront.payment.payment import Payment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class CancelOrder:
    order_id: Identifier(required=True)


@storefront.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.cancel()

        product_repo = current_domain.repository_for(Product)
        for item in order.items:
            product = product_repo.get(item.product_id)
            product.restock(item.quantity, order_id=order.id)
            product_repo.add(product)

        payment_repo = current_domain.repository_for(Payment)
        payment = payment_repo.for_order(order.id)
        if payment is not None:
            payment.mark_refunded()
            payment_repo.add(payment)

        repo.add(order)
        logger.info(
            "order_cancelled",
            order_id=str(order.id),
            refunded_payment_id=str(payment.id) if payment else None,
        )


def cancel_order(order_id) -> None:
    """Cancel an order while holding the stock locks of its products."""
    order = current_domain.repository_for(Order).get(order_id)
    with stock_locks(item.product_id for item in order.items):
        current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
