"""Payment gateway port (abstract interface).

Adapters open gateway-side orders for a checkout and check the signature the
gateway hands back to the client after a successful payment.
"""

import hashlib
import hmac
from abc import ABC, abstractmethod
from dataclasses import dataclass


class GatewayError(Exception):
    """The gateway could not be reached or refused the request."""


@dataclass(frozen=True)
class GatewayOrder:
    """An order opened on the gateway. ``amount`` is in minor units (paise)."""

    id: str
    amount: int
    currency: str
    receipt: str
    status: str = "created"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "currency": self.currency,
            "receipt": self.receipt,
            "status": self.status,
        }


def payment_signature(secret: str, gateway_order_id: str, gateway_payment_id: str) -> str:
    """Lowercase hex HMAC-SHA256 of ``"<order_id>|<payment_id>"`` keyed by ``secret``."""
    message = f"{gateway_order_id}|{gateway_payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    def __init__(self, key_secret: str) -> None:
        self.key_secret = key_secret

    @abstractmethod
    def create_order(self, amount: int, currency: str, receipt: str) -> GatewayOrder:
        """Open a gateway order for ``amount`` minor units."""
        ...

    def verify_payment_signature(
        self,
        gateway_order_id: str,
        gateway_payment_id: str,
        signature: str,
    ) -> bool:
        expected = payment_signature(self.key_secret, gateway_order_id, gateway_payment_id)
        return hmac.compare_digest(expected, signature or "")
