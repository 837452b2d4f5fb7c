"""ContactManager: thin facade over a ContactRepository, plus sorting and extra searches."""

import logging

from phonebook.application.dto import SortField
from phonebook.application.ports import ContactRepository
from phonebook.domain import Contact
from phonebook.domain.validators import parse_birth_date

logger = logging.getLogger(__name__)


def _birth_date_key(contact: Contact) -> tuple[int, int, int]:
    day, month, year = parse_birth_date(contact.birth_date)
    return (year, month, day)


_SORT_KEYS = {
    SortField.FIRST_NAME: lambda c: c.first_name,
    SortField.LAST_NAME: lambda c: c.last_name,
    SortField.EMAIL: lambda c: c.email,
}


def _sorted(contacts: list[Contact], field: SortField, descending: bool) -> list[Contact]:
    if field is not SortField.BIRTH_DATE:
        return sorted(contacts, key=_SORT_KEYS[field], reverse=descending)
    # Contacts without a usable birth date go last in either direction.
    dated = [c for c in contacts if parse_birth_date(c.birth_date) is not None]
    undated = [c for c in contacts if parse_birth_date(c.birth_date) is None]
    return sorted(dated, key=_birth_date_key, reverse=descending) + undated


class ContactManager:
    """Delegates every operation to the repository. Callers get plain values and booleans."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def add_contact(self, contact: Contact) -> bool:
        return self._repo.add(contact)

    def update_contact(self, contact: Contact) -> bool:
        return self._repo.update(contact)

    def remove_contact(self, email: str) -> bool:
        return self._repo.remove(email)

    def get_contact(self, email: str) -> Contact | None:
        return self._repo.get(email)

    def list_contacts(self) -> list[Contact]:
        return self._repo.list_all()

    def search_by_name(self, query: str) -> list[Contact]:
        return self._repo.search_by_name(query)

    def replace_all(self, contacts: list[Contact]) -> bool:
        """Store contacts as the whole collection, e.g. after sorting."""
        return self._repo.replace_all(contacts)

    def search_by_email(self, query: str) -> list[Contact]:
        """Contacts whose email contains query (case-sensitive, like email identity)."""
        query = (query or "").strip()
        return [c for c in self._repo.list_all() if query in c.email]

    def search_by_phone(self, query: str) -> list[Contact]:
        """Contacts with a phone whose raw text or normalized digits contain query."""
        query = (query or "").strip()
        digits = "".join(ch for ch in query if "0" <= ch <= "9")
        out = []
        for contact in self._repo.list_all():
            for phone in contact.phones:
                if query in phone.number or (digits and digits in phone.normalized()):
                    out.append(contact)
                    break
        return out

    def sort_contacts(
        self, field: SortField, *, descending: bool = False
    ) -> list[Contact] | None:
        """Sort the collection by field and store that order.

        Returns the sorted contacts, or None if the new order could not be persisted.
        """
        field = SortField(field)
        contacts = _sorted(self._repo.list_all(), field, descending)
        if not self.replace_all(contacts):
            logger.warning("Sorted contacts by %s but failed to save them", field.value)
            return None
        logger.info(
            "Sorted %d contacts by %s (%s)",
            len(contacts),
            field.value,
            "descending" if descending else "ascending",
        )
        return contacts
