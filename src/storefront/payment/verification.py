"""Gateway checkout — open a gateway order and verify the returned signature."""

import time

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.exceptions import InvalidSignature
from storefront.payment.gateway import get_gateway
from storefront.payment.payment import Payment
from storefront.utils.logging import get_logger
from storefront.utils.settings import setting

logger = get_logger(__name__)


def create_gateway_order(amount, currency=None) -> dict:
    """Open a gateway order for ``amount`` major units.

    Raises GatewayError when the gateway refuses or cannot be reached.
    """
    currency = currency or setting("PAYMENT_CURRENCY", "INR")
    receipt = f"receipt_{int(time.time() * 1000)}"
    order = get_gateway().create_order(
        amount=int(round(amount * 100)),
        currency=currency,
        receipt=receipt,
    )
    logger.info("gateway_order_created", gateway_order_id=order.id, amount=order.amount, currency=currency)
    return order.to_dict()


@storefront.command(part_of="Payment")
class VerifyGatewayPayment:
    gateway_order_id: String(required=True, max_length=255)
    gateway_payment_id: String(required=True, max_length=255)
    signature: String(required=True, max_length=255)
    payment_id: Identifier()


@storefront.command_handler(part_of=Payment)
class VerifyGatewayPaymentHandler:
    @handle(VerifyGatewayPayment)
    def verify(self, command):
        gateway = get_gateway()
        if not gateway.verify_payment_signature(
            command.gateway_order_id,
            command.gateway_payment_id,
            command.signature,
        ):
            logger.warning("payment_signature_rejected", gateway_order_id=command.gateway_order_id)
            raise InvalidSignature({"signature": ["Invalid payment signature"]})

        if command.payment_id:
            repo = current_domain.repository_for(Payment)
            payment = repo.get(command.payment_id)
            payment.record_gateway_success(command.gateway_order_id, command.gateway_payment_id)
            repo.add(payment)

        return {"verified": True}
