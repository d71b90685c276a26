"""A single payment attempt against an order.

The payment is the only side holding the order link (``order_id``). Status
is overwritten as told: by an explicit update, by a verified gateway
signature (SUCCESS) or by order cancellation (REFUNDED). There is no
transition table.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront
from storefront.payment.events import PaymentCreated, PaymentStatusUpdated, PaymentVerified


class PaymentMethod(Enum):
    COD = "COD"
    UPI = "UPI"
    CARD = "CARD"
    NETBANKING = "NETBANKING"
    WALLET = "WALLET"


class PaymentStatus(Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


def _normalize(value):
    return value.strip().upper() if isinstance(value, str) else value


@storefront.aggregate
class Payment:
    order_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)
    method = String(required=True, choices=PaymentMethod)
    status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    gateway_order_id = String(max_length=255)
    gateway_payment_id = String(max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, order_id, amount, method):
        """Record a PENDING payment, whatever the method."""
        now = datetime.now(UTC)
        payment = cls(
            order_id=order_id,
            amount=amount,
            method=_normalize(method),
            status=PaymentStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        payment.raise_(
            PaymentCreated(
                payment_id=str(payment.id),
                order_id=str(order_id),
                amount=amount,
                method=payment.method,
                created_at=now,
            )
        )
        return payment

    def update_status(self, status):
        try:
            target = PaymentStatus(_normalize(status))
        except ValueError:
            raise ValidationError({"status": [f"Unknown payment status {status}"]}) from None

        previous = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            PaymentStatusUpdated(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                previous_status=previous,
                new_status=target.value,
                updated_at=now,
            )
        )

    def mark_refunded(self):
        self.update_status(PaymentStatus.REFUNDED.value)

    def record_gateway_success(self, gateway_order_id, gateway_payment_id):
        self.gateway_order_id = gateway_order_id
        self.gateway_payment_id = gateway_payment_id
        self.update_status(PaymentStatus.SUCCESS.value)

        self.raise_(
            PaymentVerified(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                gateway_order_id=gateway_order_id,
                gateway_payment_id=gateway_payment_id,
                verified_at=self.updated_at,
            )
        )


@storefront.repository(part_of=Payment)
class PaymentRepository:
    def for_order(self, order_id) -> Payment | None:
        return self._dao.query.filter(order_id=str(order_id)).all().first
