"""Cart item management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="CartItem")
class AddToCart:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(default=1, min_value=1)


@storefront.command(part_of="CartItem")
class UpdateCartQuantity:
    cart_item_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="CartItem")
class RemoveFromCart:
    cart_item_id: Identifier(required=True)


@storefront.command(part_of="CartItem")
class ClearCart:
    user_id: Identifier(required=True)


@storefront.command_handler(part_of=CartItem)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        quantity = command.quantity or 1
        product = current_domain.repository_for(Product).get(command.product_id)
        product.ensure_stock_for(quantity)

        repo = current_domain.repository_for(CartItem)
        item = repo.find_for(command.user_id, command.product_id)
        if item is None:
            item = CartItem.create(
                user_id=command.user_id,
                product_id=command.product_id,
                store_id=product.store_id,
                quantity=quantity,
                unit_price=product.price,
            )
        else:
            item.increase_quantity(quantity)

        repo.add(item)
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.cart_item_id)

        if command.quantity is not None and command.quantity > 0:
            product = current_domain.repository_for(Product).get(item.product_id)
            product.ensure_stock_for(command.quantity)

        item.change_quantity(command.quantity)
        repo.add(item)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.cart_item_id)
        repo._dao.delete(item)

    @handle(ClearCart)
    def clear_cart(self, command):
        removed = current_domain.repository_for(CartItem).clear(command.user_id)
        logger.info("cart_cleared", user_id=str(command.user_id), removed=removed)
        return removed
