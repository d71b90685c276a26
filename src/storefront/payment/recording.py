"""Payment recording — create a payment for an order and overwrite its status."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order, OrderStatus
from storefront.payment.payment import Payment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Payment")
class CreatePayment:
    order_id: Identifier(required=True)
    amount: Float(required=True, min_value=0.0)
    method: String(required=True, max_length=20)


@storefront.command(part_of="Payment")
class UpdatePaymentStatus:
    payment_id: Identifier(required=True)
    status: String(required=True, max_length=20)


@storefront.command_handler(part_of=Payment)
class RecordPaymentHandler:
    @handle(CreatePayment)
    def create_payment(self, command):
        order = current_domain.repository_for(Order).get(command.order_id)
        if order.status == OrderStatus.CANCELLED.value:
            raise ValidationError({"order_id": ["Cannot pay for a cancelled order"]})

        repo = current_domain.repository_for(Payment)
        if repo.for_order(order.id) is not None:
            raise ValidationError({"order_id": ["A payment already exists for this order"]})

        if round(command.amount, 2) != round(order.total_amount, 2):
            logger.warning(
                "payment_amount_mismatch",
                order_id=str(order.id),
                amount=command.amount,
                order_total=order.total_amount,
            )

        payment = Payment.create(
            order_id=order.id,
            amount=command.amount,
            method=command.method,
        )
        repo.add(payment)
        logger.info("payment_created", payment_id=str(payment.id), order_id=str(order.id), method=payment.method)
        return str(payment.id)

    @handle(UpdatePaymentStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.update_status(command.status)
        repo.add(payment)
