"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A shopper or admin account was opened in a store."""

    __version__ = 1

    user_id = Identifier(required=True)
    store_id = Identifier(required=True)
    email = String(required=True)
    name = String()
    is_admin = Boolean(default=False)
    registered_at = DateTime(required=True)


@storefront.event(part_of="User")
class UserDetailsUpdated:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    name = String()
