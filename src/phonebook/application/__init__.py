"""Application layer: the facade, ports, and DTOs. Depends only on domain."""

from phonebook.application.contact_service import ContactManager
from phonebook.application.dto import ContactStoreCorrupted, LoadReport, SortField
from phonebook.application.ports import ContactRepository

__all__ = [
    "ContactManager",
    "ContactRepository",
    "ContactStoreCorrupted",
    "LoadReport",
    "SortField",
]
