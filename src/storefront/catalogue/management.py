"""Category management — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.store.store import Store
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Category")
class CreateCategory:
    store_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    image_url: String(max_length=500)


@storefront.command(part_of="Category")
class RenameCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    image_url: String(max_length=500)


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        # Raises ObjectNotFoundError for an unknown store
        current_domain.repository_for(Store).get(command.store_id)

        category = Category.create(
            store_id=command.store_id,
            name=command.name,
            image_url=command.image_url,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(RenameCategory)
    def rename_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.rename(command.name, image_url=command.image_url)
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        products = current_domain.repository_for(Product).for_category(category.id)
        if products:
            raise ValidationError(
                {"category_id": [f"Category {category.name} still has {len(products)} product(s)"]}
            )

        repo._dao.delete(category)
        logger.info("category_deleted", category_id=str(category.id), store_id=str(category.store_id))
