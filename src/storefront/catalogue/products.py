"""Product management: listing, details, administrative stock changes and removal."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.catalogue.stock_locks import stock_locks
from storefront.domain import storefront
from storefront.store.store import Store
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    store_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)


@storefront.command(part_of="Product")
class UpdateProductDetails:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    category_id: Identifier()
    price: Float(min_value=0.0)


@storefront.command(part_of="Product")
class SetProductStock:
    product_id: Identifier(required=True)
    stock: Integer(required=True, min_value=0)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def _category_in_store(category_id, store_id):
    category = current_domain.repository_for(Category).get(category_id)
    if str(category.store_id) != str(store_id):
        raise ValidationError({"category_id": ["Category does not belong to this store"]})
    return category


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        current_domain.repository_for(Store).get(command.store_id)
        _category_in_store(command.category_id, command.store_id)

        product = Product.create(
            store_id=command.store_id,
            category_id=command.category_id,
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock or 0,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProductDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if command.category_id:
            _category_in_store(command.category_id, product.store_id)

        product.update_details(
            name=command.name,
            description=command.description,
            category_id=command.category_id,
            price=command.price,
        )
        repo.add(product)

    @handle(SetProductStock)
    def set_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.set_stock(command.stock)
        repo.add(product)
        logger.info("product_stock_set", product_id=str(product.id), stock=command.stock)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        # Placed orders keep their own price snapshot of the product
        cart_repo = current_domain.repository_for(CartItem)
        cart_rows = cart_repo.for_product(product.id)
        for item in cart_rows:
            cart_repo._dao.delete(item)

        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(product.id), cart_rows_removed=len(cart_rows))


def set_product_stock(product_id, stock):
    """Run SetProductStock under the product's stock lock."""
    with stock_locks([product_id]):
        return current_domain.process(
            SetProductStock(product_id=product_id, stock=stock),
            asynchronous=False,
        )


def delete_product(product_id):
    """Run DeleteProduct under the product's stock lock."""
    with stock_locks([product_id]):
        return current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
