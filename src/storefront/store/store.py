"""Stores are the tenants; each owns its categories, products and orders."""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from storefront.domain import storefront
from storefront.store.events import StoreCreated, StoreDetailsUpdated, StoreDomainAssigned

_HOSTNAME_RE = re.compile(r"^(?=.{1,253}$)([a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}$")


def normalize_domain(domain):
    """Lowercase a hostname and strip scheme, path and trailing dot."""
    value = domain.strip().lower()
    value = re.sub(r"^https?://", "", value)
    return value.split("/", 1)[0].rstrip(".")


@storefront.aggregate
class Store:
    name = String(required=True, max_length=100)
    description = Text()
    domain = String(max_length=253)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def domain_must_be_a_hostname(self):
        if self.domain and not _HOSTNAME_RE.match(self.domain):
            raise ValidationError({"domain": [f"'{self.domain}' is not a valid hostname"]})

    @classmethod
    def create(cls, name, description=None, domain=None):
        now = datetime.now(UTC)
        store = cls(
            name=name,
            description=description,
            domain=normalize_domain(domain) if domain else None,
            created_at=now,
            updated_at=now,
        )
        store.raise_(
            StoreCreated(
                store_id=str(store.id),
                name=name,
                domain=store.domain,
                created_at=now,
            )
        )
        return store

    def update_details(self, name=None, description=None):
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StoreDetailsUpdated(
                store_id=str(self.id),
                name=self.name,
                description=self.description,
            )
        )

    def assign_domain(self, domain):
        previous = self.domain
        self.domain = normalize_domain(domain)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StoreDomainAssigned(
                store_id=str(self.id),
                domain=self.domain,
                previous_domain=previous,
            )
        )


@storefront.repository(part_of=Store)
class StoreRepository:
    def find_by_domain(self, domain) -> Store | None:
        return self._dao.query.filter(domain=normalize_domain(domain)).all().first
