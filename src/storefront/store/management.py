"""Store management — commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.order.order import Order
from storefront.store.store import Store
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Store")
class CreateStore:
    name: String(required=True, max_length=100)
    description: Text()
    domain: String(max_length=253)


@storefront.command(part_of="Store")
class UpdateStore:
    store_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()


@storefront.command(part_of="Store")
class AssignStoreDomain:
    store_id: Identifier(required=True)
    domain: String(required=True, max_length=253)


@storefront.command(part_of="Store")
class DeleteStore:
    store_id: Identifier(required=True)


def _ensure_domain_is_free(repo, domain, store_id=None):
    owner = repo.find_by_domain(domain)
    if owner is not None and str(owner.id) != str(store_id):
        raise ValidationError({"domain": [f"Domain {domain} is already assigned to another store"]})


@storefront.command_handler(part_of=Store)
class ManageStoreHandler:
    @handle(CreateStore)
    def create_store(self, command):
        repo = current_domain.repository_for(Store)
        if command.domain:
            _ensure_domain_is_free(repo, command.domain)

        store = Store.create(
            name=command.name,
            description=command.description,
            domain=command.domain,
        )
        repo.add(store)
        return str(store.id)

    @handle(UpdateStore)
    def update_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)
        store.update_details(name=command.name, description=command.description)
        repo.add(store)

    @handle(AssignStoreDomain)
    def assign_domain(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)
        _ensure_domain_is_free(repo, command.domain, store_id=store.id)
        store.assign_domain(command.domain)
        repo.add(store)

    @handle(DeleteStore)
    def delete_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)

        owned = {
            "categories": current_domain.repository_for(Category).for_store(store.id),
            "products": current_domain.repository_for(Product).for_store(store.id),
            "orders": current_domain.repository_for(Order).for_store(store.id),
            "users": current_domain.repository_for(User).for_store(store.id),
        }
        remaining = [kind for kind, records in owned.items() if records]
        if remaining:
            raise ValidationError({"store_id": [f"Store still has {', '.join(remaining)}"]})

        repo._dao.delete(store)
        logger.info("store_deleted", store_id=str(store.id))
