"""Domain events for the Payment aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Payment")
class PaymentCreated:
    """A payment attempt was recorded against an order."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    method = String(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Payment")
class PaymentStatusUpdated:
    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    updated_at = DateTime(required=True)


@storefront.event(part_of="Payment")
class PaymentVerified:
    """The gateway signature for this payment checked out."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    gateway_order_id = String(required=True)
    gateway_payment_id = String(required=True)
    verified_at = DateTime(required=True)
