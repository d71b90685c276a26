"""Domain events for the Address aggregate."""

from protean.fields import Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Address")
class AddressAdded:
    __version__ = 1

    address_id = Identifier(required=True)
    user_id = Identifier(required=True)
    city = String(required=True)
    country = String(required=True)


@storefront.event(part_of="Address")
class AddressUpdated:
    __version__ = 1

    address_id = Identifier(required=True)
    user_id = Identifier(required=True)
