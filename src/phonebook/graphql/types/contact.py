"""
Contact GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...store import ContactRecord
from ...store import PhoneFilter as StorePhoneFilter


@strawberry.enum
class PhoneFilter(Enum):
    """Filter contacts by whether a phone number is on file."""

    HAS_PHONE = "has_phone"
    NO_PHONE = "no_phone"

    def to_store_filter(self) -> StorePhoneFilter:
        return StorePhoneFilter(self.value)


@strawberry.type
class Address:
    """Postal address of a contact."""

    street: str
    city: str


@strawberry.type
class Contact:
    """Contact type for GraphQL API."""

    name: str
    phone: str | None
    id: strawberry.ID
    street: strawberry.Private[str]
    city: strawberry.Private[str]

    @strawberry.field
    def address(self) -> Address:
        """Postal address of the contact."""
        return Address(street=self.street, city=self.city)

    @classmethod
    def from_record(cls, record: ContactRecord) -> "Contact":
        return cls(
            name=record.name,
            phone=record.phone,
            id=strawberry.ID(record.id),
            street=record.street,
            city=record.city,
        )
