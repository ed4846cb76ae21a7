"""
Root GraphQL query definitions
"""

import strawberry

from ..types.contact import Contact, PhoneFilter


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="contactCount")
    async def contact_count(self, info: strawberry.Info) -> int:
        """Get the number of contacts in the directory."""
        from ..resolvers.contact import resolve_contact_count

        return await resolve_contact_count(info)

    @strawberry.field(name="listContacts")
    async def list_contacts(
        self, info: strawberry.Info, phone: PhoneFilter | None = None
    ) -> list[Contact]:
        """List contacts, optionally filtered by phone presence."""
        from ..resolvers.contact import resolve_list_contacts

        return await resolve_list_contacts(info, phone)

    @strawberry.field(name="findContact")
    async def find_contact(self, info: strawberry.Info, name: str) -> Contact | None:
        """Find a contact by name."""
        from ..resolvers.contact import resolve_find_contact

        return await resolve_find_contact(info, name)
