"""Store-scoped user records.

An email is unique within its store; the same person may hold accounts in
several stores. Credentials are not kept here.
"""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String

from storefront.domain import storefront
from storefront.user.events import UserDetailsUpdated, UserRegistered

_EMAIL_RE = re.compile(r"^[^@\s;,<>()\"\\]+@[a-z0-9-]+(\.[a-z0-9-]+)+$")


def normalize_email(email):
    return email.strip().lower()


@storefront.aggregate
class User:
    store_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    name = String(max_length=150)
    is_admin = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_RE.match(self.email):
            raise ValidationError({"email": [f"'{self.email}' is not a valid email address"]})

    @classmethod
    def register(cls, store_id, email, name=None, is_admin=False):
        now = datetime.now(UTC)
        user = cls(
            store_id=store_id,
            email=normalize_email(email),
            name=name,
            is_admin=bool(is_admin),
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                store_id=str(store_id),
                email=user.email,
                name=name,
                is_admin=user.is_admin,
                registered_at=now,
            )
        )
        return user

    def update_details(self, name=None, email=None):
        if name is not None:
            self.name = name
        if email is not None:
            self.email = normalize_email(email)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            UserDetailsUpdated(
                user_id=str(self.id),
                email=self.email,
                name=self.name,
            )
        )


@storefront.repository(part_of=User)
class UserRepository:
    def for_store(self, store_id) -> list[User]:
        return self._dao.query.filter(store_id=str(store_id)).order_by("created_at").all().items

    def find_by_email(self, store_id, email) -> User | None:
        return self._dao.query.filter(store_id=str(store_id), email=normalize_email(email)).all().first
