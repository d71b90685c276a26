"""Domain events for the Store aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Store")
class StoreCreated:
    """A new tenant store was opened."""

    __version__ = 1

    store_id = Identifier(required=True)
    name = String(required=True)
    domain = String()
    created_at = DateTime(required=True)


@storefront.event(part_of="Store")
class StoreDetailsUpdated:
    """A store's name or description changed."""

    __version__ = 1

    store_id = Identifier(required=True)
    name = String(required=True)
    description = String()


@storefront.event(part_of="Store")
class StoreDomainAssigned:
    """A custom hostname was attached to a store."""

    __version__ = 1

    store_id = Identifier(required=True)
    domain = String(required=True)
    previous_domain = String()
