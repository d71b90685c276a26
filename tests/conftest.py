import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_configure(config):
    os.environ["PROTEAN_ENV"] = config.getoption("env")
    os.environ.setdefault("PAYMENT_GATEWAY", "fake")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    """Push the domain context for each test and wipe all stores afterwards."""
    from storefront.payment.gateway import reset_gateway

    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()

    reset_gateway()


# ---------------------------------------------------------------------------
# Catalogue fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def store_id():
    from protean import current_domain
    from storefront.store.management import CreateStore

    return current_domain.process(CreateStore(name="Chai Corner"), asynchronous=False)


@pytest.fixture()
def category_id(store_id):
    from protean import current_domain
    from storefront.catalogue.management import CreateCategory

    return current_domain.process(CreateCategory(store_id=store_id, name="Tea"), asynchronous=False)


@pytest.fixture()
def make_product(store_id, category_id):
    """Factory: create a product in the fixture store and return its id."""
    from protean import current_domain
    from storefront.catalogue.products import CreateProduct

    def _make(name="Darjeeling First Flush", price=50.0, stock=10, **overrides):
        fields = {
            "store_id": store_id,
            "category_id": category_id,
            "name": name,
            "price": price,
            "stock": stock,
        }
        fields.update(overrides)
        return current_domain.process(CreateProduct(**fields), asynchronous=False)

    return _make


@pytest.fixture()
def address_id():
    from protean import current_domain
    from storefront.address.management import AddAddress

    return current_domain.process(
        AddAddress(
            user_id="user-001",
            full_name="Asha Rao",
            phone="+91 98450 12345",
            line1="12 MG Road",
            city="Bengaluru",
            state="Karnataka",
            pincode="560001",
            country="India",
        ),
        asynchronous=False,
    )
