"""Store-scoped product categories."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from storefront.catalogue.events import CategoryCreated, CategoryRenamed
from storefront.domain import storefront


@storefront.aggregate
class Category:
    store_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    image_url = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, store_id, name, image_url=None):
        now = datetime.now(UTC)
        category = cls(
            store_id=store_id,
            name=name,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=str(category.id),
                store_id=str(store_id),
                name=name,
            )
        )
        return category

    def rename(self, name, image_url=None):
        previous = self.name
        self.name = name
        if image_url is not None:
            self.image_url = image_url
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryRenamed(
                category_id=str(self.id),
                name=name,
                previous_name=previous,
            )
        )


@storefront.repository(part_of=Category)
class CategoryRepository:
    def for_store(self, store_id) -> list[Category]:
        return self._dao.query.filter(store_id=store_id).all().items
