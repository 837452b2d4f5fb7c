"""
Phonebook core: clean-architecture layout.

- domain: entities (Contact, PhoneNumber) and validators. No outer dependencies.
- application: ContactManager facade, ContactRepository port, DTOs.
- infrastructure: adapters (InMemoryContactRepository, JsonFileContactRepository).
"""

from phonebook.application import (
    ContactManager,
    ContactRepository,
    ContactStoreCorrupted,
    LoadReport,
    SortField,
)
from phonebook.domain import Accepted, Contact, PhoneNumber, PhoneType, Rejected
from phonebook.infrastructure import InMemoryContactRepository, JsonFileContactRepository

__all__ = [
    "Accepted",
    "Contact",
    "ContactManager",
    "ContactRepository",
    "ContactStoreCorrupted",
    "InMemoryContactRepository",
    "JsonFileContactRepository",
    "LoadReport",
    "PhoneNumber",
    "PhoneType",
    "Rejected",
    "SortField",
]
