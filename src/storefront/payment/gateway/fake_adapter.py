"""Configurable fake payment gateway for development and testing.

Opens orders locally without any external call and signs payments with a
real HMAC over a test secret, so signature verification behaves exactly as
it does against the live gateway.
"""

from uuid import uuid4

from storefront.payment.gateway.port import GatewayError, GatewayOrder, PaymentGateway, payment_signature

FAKE_KEY_SECRET = "fake_razorpay_secret"


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self, key_secret: str = FAKE_KEY_SECRET) -> None:
        super().__init__(key_secret)
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Gateway unavailable") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_order(self, amount: int, currency: str, receipt: str) -> GatewayOrder:
        self.calls.append(
            {
                "method": "create_order",
                "amount": amount,
                "currency": currency,
                "receipt": receipt,
            }
        )

        if not self.should_succeed:
            raise GatewayError(self.failure_reason)

        return GatewayOrder(
            id=f"order_fake_{uuid4().hex[:14]}",
            amount=amount,
            currency=currency,
            receipt=receipt,
        )

    def sign(self, gateway_order_id: str, gateway_payment_id: str) -> str:
        """Produce the signature the live gateway would hand to the client."""
        return payment_signature(self.key_secret, gateway_order_id, gateway_payment_id)
