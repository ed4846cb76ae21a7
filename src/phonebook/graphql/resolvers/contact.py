from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from graphql import GraphQLError

from ...logging import get_logger
from ...store import ContactStore, DuplicateNameError
from ...store import PhoneFilter as StorePhoneFilter
from ..types.contact import Contact

if TYPE_CHECKING:
    from ..types.contact import PhoneFilter

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> ContactStore:
    """
    Extract the contact store from the GraphQL context.

    Raises:
        RuntimeError: If the context carries no store
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Contact store not found in GraphQL context")
        raise RuntimeError("Contact store is not configured")
    return store


# Query resolvers
async def resolve_contact_count(info: strawberry.Info) -> int:
    """Resolve the number of contacts in the directory."""
    return get_store_from_info(info).count()


async def resolve_list_contacts(
    info: strawberry.Info, phone: PhoneFilter | None = None
) -> list[Contact]:
    """
    Resolve contacts in insertion order.

    Args:
        phone: Optional phone presence filter; None returns every contact
    """
    store = get_store_from_info(info)
    phone_filter = phone.to_store_filter() if phone is not None else StorePhoneFilter.ANY

    return [Contact.from_record(record) for record in store.list_contacts(phone_filter)]


async def resolve_find_contact(info: strawberry.Info, name: str) -> Contact | None:
    """Resolve a contact by exact name."""
    record = get_store_from_info(info).find_by_name(name)
    if record is None:
        logger.info("Contact not found", name=name)
        return None

    return Contact.from_record(record)


# Mutation resolvers
async def add_contact(
    info: strawberry.Info,
    name: str,
    street: str,
    city: str,
    phone: str | None = None,
) -> Contact:
    """
    Add a new contact.

    Raises:
        GraphQLError: BAD_USER_INPUT when the name is already taken
    """
    store = get_store_from_info(info)

    try:
        record = store.add(name=name, street=street, city=city, phone=phone)
    except DuplicateNameError as e:
        logger.warning("Rejected duplicate contact name", name=e.name)
        raise GraphQLError(
            "Name must be unique",
            extensions={"code": "BAD_USER_INPUT", "invalidArgs": [e.name]},
        ) from e

    return Contact.from_record(record)


async def edit_phone(info: strawberry.Info, name: str, phone: str) -> Contact | None:
    """Change the phone number of an existing contact; None if no contact has that name."""
    record = get_store_from_info(info).edit_phone(name, phone)
    if record is None:
        logger.info("Phone edit skipped, contact not found", name=name)
        return None

    return Contact.from_record(record)
