"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.contact import Contact


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addContact")
    async def add_contact(
        self,
        info: strawberry.Info,
        name: str,
        street: str,
        city: str,
        phone: str | None = None,
    ) -> Contact | None:
        """Add a new contact. Names must be unique."""
        from ..resolvers.contact import add_contact

        return await add_contact(info, name=name, street=street, city=city, phone=phone)

    @strawberry.mutation(name="editPhone")
    async def edit_phone(self, info: strawberry.Info, name: str, phone: str) -> Contact | None:
        """Change the phone number of an existing contact."""
        from ..resolvers.contact import edit_phone

        return await edit_phone(info, name, phone)
