"""In-memory implementation of ContactRepository (no file)."""

import logging

from phonebook.domain import Contact

logger = logging.getLogger(__name__)


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.
    At most one contact per email; emails compare byte-for-byte.
    Every successful mutation ends with _persist(); subclasses write it somewhere.
    """

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def _persist(self) -> bool:
        return True

    def _index_of(self, email: str) -> int | None:
        for i, contact in enumerate(self._contacts):
            if contact.email == email:
                return i
        return None

    def add(self, contact: Contact) -> bool:
        result = contact.validate()
        if not result:
            logger.info("Cannot add invalid contact: %s", result.reason)
            return False
        if self._index_of(contact.email) is not None:
            logger.info("Contact with email %s already exists", contact.email)
            return False
        self._contacts.append(contact.copy())
        logger.info("Contact added: %s", contact.email)
        return self._persist()

    def update(self, contact: Contact) -> bool:
        index = self._index_of(contact.email)
        if index is None:
            logger.info("Contact not found for update: %s", contact.email)
            return False
        result = contact.validate()
        if not result:
            logger.info("Cannot update with invalid contact data: %s", result.reason)
            return False
        self._contacts[index] = contact.copy()
        logger.info("Contact updated: %s", contact.email)
        return self._persist()

    def remove(self, email: str) -> bool:
        kept = [c for c in self._contacts if c.email != email]
        if len(kept) == len(self._contacts):
            logger.info("Contact not found for removal: %s", email)
            return False
        self._contacts = kept
        logger.info("Contact removed: %s", email)
        return self._persist()

    def get(self, email: str) -> Contact | None:
        index = self._index_of(email)
        if index is None:
            return None
        return self._contacts[index].copy()

    def list_all(self) -> list[Contact]:
        return [c.copy() for c in self._contacts]

    def replace_all(self, contacts: list[Contact]) -> bool:
        self._contacts = [c.copy() for c in contacts]
        logger.info("All contacts replaced, total: %d", len(self._contacts))
        return self._persist()

    def search_by_name(self, query: str) -> list[Contact]:
        needle = (query or "").casefold()
        out = [
            c.copy()
            for c in self._contacts
            if needle in c.first_name.casefold()
            or needle in c.last_name.casefold()
            or needle in c.patronymic.casefold()
        ]
        logger.debug("Search for %r found %d contacts", query, len(out))
        return out
