"""BDD tests for gateway payment verification."""

from protean import current_domain
from pytest_bdd import given, scenarios, then, when
from storefront.exceptions import InvalidSignature
from storefront.order.placement import place_order
from storefront.payment.gateway import get_gateway
from storefront.payment.recording import CreatePayment
from storefront.payment.verification import VerifyGatewayPayment

scenarios("features/payment_verification.feature")

GATEWAY_ORDER = "order_Nq1xYt8Zb3kL2m"
GATEWAY_PAYMENT = "pay_Nq1y0aBcD4eF5g"


@given("a pending payment for a placed order")
def _(store_id, make_product, context):
    order_id = place_order("user-001", store_id, [{"product_id": make_product(), "quantity": 1}])
    context["payment_id"] = current_domain.process(
        CreatePayment(order_id=order_id, amount=50.0, method="CARD"),
        asynchronous=False,
    )


def _verify(context, error, signature):
    try:
        context["result"] = current_domain.process(
            VerifyGatewayPayment(
                gateway_order_id=GATEWAY_ORDER,
                gateway_payment_id=GATEWAY_PAYMENT,
                signature=signature,
                payment_id=context["payment_id"],
            ),
            asynchronous=False,
        )
    except InvalidSignature as exc:
        error["exc"] = exc


@when("the gateway callback is verified with a valid signature")
def _(context, error):
    _verify(context, error, get_gateway().sign(GATEWAY_ORDER, GATEWAY_PAYMENT))


@when("the gateway callback is verified with a tampered signature")
def _(context, error):
    signature = get_gateway().sign(GATEWAY_ORDER, GATEWAY_PAYMENT)
    tampered = ("0" if signature[0] != "0" else "1") + signature[1:]
    _verify(context, error, tampered)


@then("the verification succeeds")
def _(context):
    assert context["result"] == {"verified": True}


@then("the verification is rejected")
def _(context, error):
    assert isinstance(error["exc"], InvalidSignature)
    assert "result" not in context
