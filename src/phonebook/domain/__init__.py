"""Domain layer: entities, value objects, and validators. No dependencies on outer layers."""

from phonebook.domain.entities import (
    ACCEPTED,
    Accepted,
    Contact,
    PhoneNumber,
    PhoneType,
    Rejected,
)

__all__ = ["ACCEPTED", "Accepted", "Contact", "PhoneNumber", "PhoneType", "Rejected"]
