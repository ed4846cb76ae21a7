"""
In-memory contact store.

The store owns the ordered contact collection. Every read and write goes
through its methods and holds a single lock, so name uniqueness and in-place
phone updates stay consistent when requests are served concurrently.
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from .logging import get_logger

logger = get_logger(__name__)


class PhoneFilter(Enum):
    """Phone presence filter for listing contacts."""

    ANY = "any"
    HAS_PHONE = "has_phone"
    NO_PHONE = "no_phone"


@dataclass
class ContactRecord:
    """A flat contact entry as held by the store."""

    id: str
    name: str
    street: str
    city: str
    phone: str | None = None

    @property
    def has_phone(self) -> bool:
        return bool(self.phone)


class ContactStoreError(Exception):
    """Base class for contact store errors."""


class DuplicateNameError(ContactStoreError):
    """Raised when adding a contact whose name is already taken."""

    def __init__(self, name: str):
        super().__init__(f"Contact '{name}' already exists")
        self.name = name


def generate_contact_id() -> str:
    """Return a new time-based UUID string for a contact."""
    return str(uuid.uuid1())


class ContactStore:
    """
    Ordered, in-memory contact directory.

    Records handed out are copies; the only way to change the collection is
    through add() and edit_phone().
    """

    def __init__(self) -> None:
        self._contacts: list[ContactRecord] = []
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, records: Iterable[ContactRecord]) -> ContactStore:
        """
        Build a store pre-populated with the given records, in order.

        Raises:
            DuplicateNameError: If two seed records share a name
        """
        store = cls()
        for record in records:
            if store._index_of(record.name) is not None:
                raise DuplicateNameError(record.name)
            store._contacts.append(replace(record))
        return store

    def _index_of(self, name: str) -> int | None:
        for index, contact in enumerate(self._contacts):
            if contact.name == name:
                return index
        return None

    def count(self) -> int:
        """Number of contacts currently held."""
        with self._lock:
            return len(self._contacts)

    def list_contacts(
        self, phone_filter: PhoneFilter | None = PhoneFilter.ANY
    ) -> list[ContactRecord]:
        """
        List contacts in insertion order.

        Args:
            phone_filter: HAS_PHONE keeps contacts with a non-empty phone,
                NO_PHONE keeps the rest, ANY or None keeps everything.
        """
        with self._lock:
            contacts = list(self._contacts)

        if phone_filter == PhoneFilter.HAS_PHONE:
            contacts = [c for c in contacts if c.has_phone]
        elif phone_filter == PhoneFilter.NO_PHONE:
            contacts = [c for c in contacts if not c.has_phone]

        return [replace(c) for c in contacts]

    def find_by_name(self, name: str) -> ContactRecord | None:
        """Find a contact by exact, case-sensitive name."""
        with self._lock:
            index = self._index_of(name)
            if index is None:
                return None
            return replace(self._contacts[index])

    def add(self, name: str, street: str, city: str, phone: str | None = None) -> ContactRecord:
        """
        Append a new contact to the end of the directory.

        Raises:
            DuplicateNameError: If a contact with the same name exists
        """
        with self._lock:
            if self._index_of(name) is not None:
                raise DuplicateNameError(name)

            record = ContactRecord(
                id=generate_contact_id(),
                name=name,
                street=street,
                city=city,
                phone=phone,
            )
            self._contacts.append(record)

        logger.info("Contact added", contact_id=record.id, name=name)
        return replace(record)

    def edit_phone(self, name: str, phone: str) -> ContactRecord | None:
        """
        Replace the phone number of an existing contact.

        Returns None without touching the directory when no contact has that
        name; contacts are never created here.
        """
        with self._lock:
            index = self._index_of(name)
            if index is None:
                return None

            self._contacts[index].phone = phone
            record = replace(self._contacts[index])

        logger.info("Contact phone updated", contact_id=record.id, name=name)
        return record
