"""Domain events for the Category and Product aggregates."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A category was added to a store's catalogue."""

    __version__ = 1

    category_id = Identifier(required=True)
    store_id = Identifier(required=True)
    name = String(required=True)


@storefront.event(part_of="Category")
class CategoryRenamed:
    __version__ = 1

    category_id = Identifier(required=True)
    name = String(required=True)
    previous_name = String()


@storefront.event(part_of="Product")
class ProductCreated:
    """A product was listed in a store with an opening stock level."""

    __version__ = 1

    product_id = Identifier(required=True)
    store_id = Identifier(required=True)
    category_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    stock = Integer(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    description = String()
    category_id = Identifier()


@storefront.event(part_of="Product")
class ProductPriceChanged:
    """The live price changed. Existing orders keep their snapshot."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    new_price = Float(required=True)
    changed_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockWithdrawn:
    """Stock was taken out of the ledger to fulfil an order."""

    __version__ = 1

    product_id = Identifier(required=True)
    order_id = Identifier()
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)


@storefront.event(part_of="Product")
class StockRestocked:
    """Stock was returned to the ledger, e.g. after an order was cancelled."""

    __version__ = 1

    product_id = Identifier(required=True)
    order_id = Identifier()
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)


@storefront.event(part_of="Product")
class StockLevelSet:
    """An administrator overwrote the stock count."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
