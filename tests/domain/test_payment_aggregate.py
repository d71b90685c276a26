"""Tests for the Payment aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.payment.events import PaymentCreated, PaymentStatusUpdated, PaymentVerified
from storefront.payment.payment import Payment, PaymentStatus


def _make_payment(method="UPI"):
    return Payment.create(order_id="ord-001", amount=150.0, method=method)


class TestCreatePayment:
    @pytest.mark.parametrize("method", ["COD", "UPI", "CARD", "NETBANKING", "WALLET"])
    def test_every_method_starts_pending(self, method):
        payment = _make_payment(method)
        assert payment.status == PaymentStatus.PENDING.value
        assert payment.method == method

    def test_method_is_case_insensitive(self):
        assert _make_payment("card").method == "CARD"

    def test_unknown_method_is_rejected(self):
        with pytest.raises(ValidationError):
            _make_payment("CHEQUE")

    def test_create_raises_event(self):
        payment = _make_payment()
        events = [e for e in payment._events if isinstance(e, PaymentCreated)]
        assert events[0].order_id == "ord-001"


class TestStatusUpdate:
    def test_status_is_overwritten_without_transition_checks(self):
        payment = _make_payment()
        payment.update_status("REFUNDED")
        payment.update_status("PENDING")
        payment.update_status("FAILED")
        assert payment.status == PaymentStatus.FAILED.value

    def test_status_update_raises_event(self):
        payment = _make_payment()
        payment.update_status("SUCCESS")
        events = [e for e in payment._events if isinstance(e, PaymentStatusUpdated)]
        assert events[0].previous_status == "PENDING"
        assert events[0].new_status == "SUCCESS"

    def test_unknown_status_is_rejected(self):
        payment = _make_payment()
        with pytest.raises(ValidationError):
            payment.update_status("SETTLED")

    def test_mark_refunded(self):
        payment = _make_payment()
        payment.mark_refunded()
        assert payment.status == PaymentStatus.REFUNDED.value


class TestGatewaySuccess:
    def test_records_gateway_ids(self):
        payment = _make_payment()
        payment.record_gateway_success("order_abc", "pay_xyz")
        assert payment.status == PaymentStatus.SUCCESS.value
        assert payment.gateway_order_id == "order_abc"
        assert payment.gateway_payment_id == "pay_xyz"
        assert [e for e in payment._events if isinstance(e, PaymentVerified)]
