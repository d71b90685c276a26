"""Razorpay adapter built on the official ``razorpay`` client.

Only order creation talks to Razorpay. Payment signatures are checked
locally by the port with the same key secret.
"""

import razorpay
import requests
from razorpay.errors import BadRequestError, ServerError
from razorpay.errors import GatewayError as RazorpayGatewayError

from storefront.payment.gateway.port import GatewayError, GatewayOrder, PaymentGateway
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class RazorpayGateway(PaymentGateway):
    def __init__(self, key_id: str, key_secret: str, client=None) -> None:
        super().__init__(key_secret)
        self.key_id = key_id
        self.client = client or razorpay.Client(auth=(key_id, key_secret))

    def create_order(self, amount: int, currency: str, receipt: str) -> GatewayOrder:
        payload = {"amount": amount, "currency": currency, "receipt": receipt}
        try:
            body = self.client.order.create(data=payload)
        except (BadRequestError, ServerError, RazorpayGatewayError, requests.RequestException) as exc:
            logger.error("razorpay_order_failed", receipt=receipt, error=str(exc))
            raise GatewayError(f"Failed to create Razorpay order: {exc}") from exc

        return GatewayOrder(
            id=body["id"],
            amount=body.get("amount", amount),
            currency=body.get("currency", currency),
            receipt=body.get("receipt", receipt),
            status=body.get("status", "created"),
        )
