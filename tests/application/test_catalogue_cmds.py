"""Application tests for store, category and product commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.category import Category
from storefront.catalogue.management import CreateCategory, RenameCategory
from storefront.catalogue.product import Product
from storefront.catalogue.products import CreateProduct, UpdateProductDetails, set_product_stock
from storefront.store.management import AssignStoreDomain, CreateStore, UpdateStore
from storefront.store.store import Store


class TestStoreCommands:
    def test_create_store_persists(self):
        store_id = current_domain.process(
            CreateStore(name="Chai Corner", domain="Shop.ChaiCorner.in"),
            asynchronous=False,
        )
        store = current_domain.repository_for(Store).get(store_id)
        assert store.domain == "shop.chaicorner.in"

    def test_find_store_by_domain(self):
        store_id = current_domain.process(CreateStore(name="Chai Corner", domain="chaicorner.in"), asynchronous=False)
        store = current_domain.repository_for(Store).find_by_domain("https://ChaiCorner.in")
        assert str(store.id) == store_id

    def test_domain_must_be_unique(self):
        current_domain.process(CreateStore(name="Chai Corner", domain="chaicorner.in"), asynchronous=False)
        other_id = current_domain.process(CreateStore(name="Kaapi Korner"), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(AssignStoreDomain(store_id=other_id, domain="chaicorner.in"), asynchronous=False)

    def test_update_store(self, store_id):
        current_domain.process(UpdateStore(store_id=store_id, description="Teas"), asynchronous=False)
        store = current_domain.repository_for(Store).get(store_id)
        assert store.description == "Teas"
        assert store.name == "Chai Corner"


class TestCategoryCommands:
    def test_create_category(self, store_id):
        category_id = current_domain.process(CreateCategory(store_id=store_id, name="Tea"), asynchronous=False)
        categories = current_domain.repository_for(Category).for_store(store_id)
        assert [str(c.id) for c in categories] == [category_id]

    def test_category_needs_existing_store(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(CreateCategory(store_id="missing", name="Tea"), asynchronous=False)

    def test_rename_category(self, category_id):
        current_domain.process(RenameCategory(category_id=category_id, name="Green Tea"), asynchronous=False)
        assert current_domain.repository_for(Category).get(category_id).name == "Green Tea"


class TestProductCommands:
    def test_create_product(self, make_product):
        product_id = make_product(price=50.0, stock=10)
        product = current_domain.repository_for(Product).get(product_id)
        assert product.price == 50.0
        assert product.stock == 10

    def test_category_must_belong_to_store(self, make_product):
        other_store = current_domain.process(CreateStore(name="Kaapi Korner"), asynchronous=False)
        foreign_category = current_domain.process(CreateCategory(store_id=other_store, name="Coffee"), asynchronous=False)
        with pytest.raises(ValidationError):
            make_product(category_id=foreign_category)

    def test_update_price(self, make_product):
        product_id = make_product(price=50.0)
        current_domain.process(UpdateProductDetails(product_id=product_id, price=65.0), asynchronous=False)
        assert current_domain.repository_for(Product).get(product_id).price == 65.0

    def test_set_stock(self, make_product):
        product_id = make_product(stock=10)
        set_product_stock(product_id, 3)
        assert current_domain.repository_for(Product).get(product_id).stock == 3

    def test_negative_stock_is_rejected(self, make_product):
        product_id = make_product(stock=10)
        with pytest.raises(ValidationError):
            set_product_stock(product_id, -1)

    def test_search_is_case_insensitive(self, store_id, make_product):
        make_product(name="Darjeeling First Flush", description="Muscatel notes")
        make_product(name="Assam CTC")
        repo = current_domain.repository_for(Product)
        assert [p.name for p in repo.search(store_id, "darjeeling")] == ["Darjeeling First Flush"]
        assert [p.name for p in repo.search(store_id, "MUSCATEL")] == ["Darjeeling First Flush"]

    def test_list_by_category(self, category_id, make_product):
        make_product(name="A")
        make_product(name="B")
        assert len(current_domain.repository_for(Product).for_category(category_id)) == 2
