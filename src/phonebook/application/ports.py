"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Contact


class ContactRepository(Protocol):
    """Owns the contact collection, keyed by email. Returns copies, never live objects."""

    def add(self, contact: Contact) -> bool:
        """Store a valid contact whose email is not taken yet."""
        ...

    def update(self, contact: Contact) -> bool:
        """Replace the contact with the same email, keeping its position."""
        ...

    def remove(self, email: str) -> bool:
        """Remove the contact with this email. False if not found."""
        ...

    def get(self, email: str) -> Contact | None:
        """Return a copy of the contact with this email, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return copies of all contacts in collection order."""
        ...

    def replace_all(self, contacts: list[Contact]) -> bool:
        """Replace the whole collection. Contacts are trusted to be valid."""
        ...

    def search_by_name(self, query: str) -> list[Contact]:
        """Case-insensitive substring match on first name, last name or patronymic."""
        ...
