"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.json_repository import JsonFileContactRepository
from phonebook.infrastructure.memory_repository import InMemoryContactRepository
from phonebook.infrastructure.phone import format_phone, to_e164

__all__ = [
    "InMemoryContactRepository",
    "JsonFileContactRepository",
    "format_phone",
    "to_e164",
]
