"""Integration tests for store, category, product and address endpoints."""


class TestStoreAPI:
    def test_create_returns_201(self, client):
        response = client.post("/stores", json={"name": "Chai Corner", "domain": "ChaiCorner.in"})
        assert response.status_code == 201
        assert response.json()["domain"] == "chaicorner.in"

    def test_lookup_by_domain(self, client):
        store = client.post("/stores", json={"name": "Chai Corner", "domain": "chaicorner.in"}).json()
        response = client.get("/stores/by-domain/chaicorner.in")
        assert response.status_code == 200
        assert response.json()["id"] == store["id"]

    def test_unknown_domain_returns_404(self, client):
        assert client.get("/stores/by-domain/nowhere.in").status_code == 404

    def test_unknown_store_returns_404(self, client):
        assert client.get("/stores/missing").status_code == 404

    def test_list_stores(self, client):
        client.post("/stores", json={"name": "Chai Corner"})
        client.post("/stores", json={"name": "Kaapi Korner"})
        assert len(client.get("/stores").json()) == 2


    def test_delete_empty_store(self, client):
        store = client.post("/stores", json={"name": "Kaapi Korner"}).json()

        assert client.delete(f"/stores/{store['id']}").status_code == 200
        assert client.get(f"/stores/{store['id']}").status_code == 404

    def test_delete_store_with_catalogue_returns_400(self, client, shop):
        assert client.delete(f"/stores/{shop['store_id']}").status_code == 400


class TestCategoryAPI:
    def test_delete_category_with_products_returns_400(self, client, shop):
        assert client.delete(f"/categories/{shop['category_id']}").status_code == 400

    def test_delete_unknown_category_returns_404(self, client):
        assert client.delete("/categories/missing").status_code == 404

    def test_catalogue_can_be_removed_bottom_up(self, client, shop):
        assert client.delete(f"/products/{shop['product_id']}").status_code == 200
        assert client.delete(f"/categories/{shop['category_id']}").status_code == 200
        assert client.delete(f"/stores/{shop['store_id']}").status_code == 200

        assert client.get(f"/products/{shop['product_id']}").status_code == 404
        assert client.get(f"/categories/{shop['category_id']}").status_code == 404


class TestProductAPI:
    def test_get_product(self, client, shop):
        response = client.get(f"/products/{shop['product_id']}")
        assert response.status_code == 200
        assert response.json()["stock"] == 10

    def test_category_from_other_store_returns_400(self, client, shop):
        other = client.post("/stores", json={"name": "Kaapi Korner"}).json()
        response = client.post(
            "/products",
            json={
                "store_id": other["id"],
                "category_id": shop["category_id"],
                "name": "Filter Coffee",
                "price": 30.0,
            },
        )
        assert response.status_code == 400

    def test_negative_price_returns_422(self, client, shop):
        response = client.post(
            "/products",
            json={"store_id": shop["store_id"], "category_id": shop["category_id"], "name": "X", "price": -1},
        )
        assert response.status_code == 422

    def test_search_within_store(self, client, shop):
        response = client.get(f"/products/store/{shop['store_id']}", params={"q": "darjeeling"})
        assert [p["name"] for p in response.json()] == ["Darjeeling First Flush"]

    def test_set_stock(self, client, shop):
        response = client.put(f"/products/{shop['product_id']}/stock", json={"stock": 2})
        assert response.status_code == 200
        assert response.json()["stock"] == 2

    def test_list_category_products(self, client, shop):
        response = client.get(f"/products/category/{shop['category_id']}")
        assert len(response.json()) == 1


class TestAddressAPI:
    def _address(self, **overrides):
        body = {
            "userId": "user-001",
            "fullName": "Asha Rao",
            "phone": "+91 98450 12345",
            "addressLine1": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "pincode": "560001",
            "country": "India",
        }
        body.update(overrides)
        return body

    def test_create_with_camel_case_body(self, client):
        response = client.post("/addresses", json=self._address())
        assert response.status_code == 201
        assert response.json()["line1"] == "12 MG Road"

    def test_update_and_list(self, client):
        address = client.post("/addresses", json=self._address()).json()
        client.patch(f"/addresses/{address['id']}", json={"city": "Mysuru"})
        addresses = client.get("/addresses/user/user-001").json()
        assert addresses[0]["city"] == "Mysuru"

    def test_delete(self, client):
        address = client.post("/addresses", json=self._address()).json()
        assert client.delete(f"/addresses/{address['id']}").status_code == 200
        assert client.get(f"/addresses/{address['id']}").status_code == 404


class TestUserAPI:
    def test_user_lifecycle(self, client, shop):
        response = client.post(
            "/users",
            json={"storeId": shop["store_id"], "email": "Asha@ChaiCorner.in", "name": "Asha Rao", "isAdmin": True},
        )
        assert response.status_code == 201
        user = response.json()
        assert user["email"] == "asha@chaicorner.in"
        assert user["is_admin"] is True

        listed = client.get(f"/users/store/{shop['store_id']}").json()
        assert [u["id"] for u in listed] == [user["id"]]

        updated = client.patch(f"/users/{user['id']}", json={"name": "Asha R"}).json()
        assert updated["name"] == "Asha R"

        assert client.delete(f"/users/{user['id']}").status_code == 200
        assert client.get(f"/users/{user['id']}").status_code == 404

    def test_duplicate_email_returns_400(self, client, shop):
        body = {"store_id": shop["store_id"], "email": "asha@chaicorner.in"}
        client.post("/users", json=body)
        assert client.post("/users", json=body).status_code == 400

    def test_unknown_store_returns_404(self, client):
        assert client.post("/users", json={"store_id": "missing", "email": "asha@chaicorner.in"}).status_code == 404
