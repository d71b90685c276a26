"""Address aggregate — a user's delivery address, referenced by orders."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Identifier, String

from storefront.address.events import AddressAdded, AddressUpdated
from storefront.domain import storefront

_PHONE_RE = re.compile(r"^\+?[0-9 ()-]{7,20}$")

ADDRESS_FIELDS = ("full_name", "phone", "line1", "line2", "city", "state", "pincode", "country")


@storefront.aggregate
class Address:
    user_id = Identifier(required=True)
    full_name = String(required=True, max_length=150)
    phone = String(required=True, max_length=20)
    line1 = String(required=True, max_length=255)
    line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    pincode = String(required=True, max_length=20)
    country = String(required=True, max_length=100)

    @invariant.post
    def phone_must_look_like_a_phone_number(self):
        if self.phone and not _PHONE_RE.match(self.phone):
            raise ValidationError({"phone": [f"'{self.phone}' is not a valid phone number"]})

    @classmethod
    def add(cls, user_id, **details):
        address = cls(user_id=user_id, **details)
        address.raise_(
            AddressAdded(
                address_id=str(address.id),
                user_id=str(user_id),
                city=address.city,
                country=address.country,
            )
        )
        return address

    def update(self, **changes):
        for field_name in ADDRESS_FIELDS:
            value = changes.get(field_name)
            if value is not None:
                setattr(self, field_name, value)

        self.raise_(AddressUpdated(address_id=str(self.id), user_id=str(self.user_id)))


@storefront.repository(part_of=Address)
class AddressRepository:
    def for_user(self, user_id) -> list[Address]:
        return self._dao.query.filter(user_id=str(user_id)).all().items
