"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart
from storefront.catalogue.product import Product
from storefront.catalogue.products import UpdateProductDetails
from storefront.exceptions import InsufficientStock
from storefront.payment.payment import Payment

CUSTOMER = "user-001"


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def context():
    """Ids produced by earlier steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse("a product priced {price:f} with {stock:d} units in stock"),
    target_fixture="product_id",
)
def _(make_product, price, stock):
    return make_product(price=price, stock=stock)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the customer adds {quantity:d} units to the cart"))
def _(product_id, quantity, error):
    try:
        current_domain.process(
            AddToCart(user_id=CUSTOMER, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
    except InsufficientStock as exc:
        error["exc"] = exc


@when(parsers.cfparse("the product price changes to {price:f}"))
def _(product_id, price):
    current_domain.process(UpdateProductDetails(product_id=product_id, price=price), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the product has {stock:d} units in stock"))
def _(product_id, stock):
    assert current_domain.repository_for(Product).get(product_id).stock == stock


@then(parsers.cfparse('the payment status is "{status}"'))
def _(context, status):
    assert current_domain.repository_for(Payment).get(context["payment_id"]).status == status
