import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from storefront.api import (
    address_router,
    cart_router,
    category_router,
    order_router,
    payment_router,
    product_router,
    store_router,
    user_router,
)


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (
        store_router,
        user_router,
        category_router,
        product_router,
        cart_router,
        address_router,
        order_router,
        payment_router,
    ):
        app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def shop(client):
    """A store with one category and one product (price 50, stock 10)."""
    store = client.post("/stores", json={"name": "Chai Corner"}).json()
    category = client.post("/categories", json={"storeId": store["id"], "name": "Tea"}).json()
    product = client.post(
        "/products",
        json={
            "store_id": store["id"],
            "category_id": category["id"],
            "name": "Darjeeling First Flush",
            "price": 50.0,
            "stock": 10,
        },
    ).json()
    return {"store_id": store["id"], "category_id": category["id"], "product_id": product["id"]}
