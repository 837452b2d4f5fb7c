"""Result and option types shared by the repository and the facade."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class LoadReport:
    """Outcome of reading the backing document."""

    loaded: int = 0
    dropped: int = 0
    malformed: bool = False


class SortField(str, Enum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    BIRTH_DATE = "birth_date"


class ContactStoreCorrupted(Exception):
    """Strict load found a malformed document or records that fail validation."""

    def __init__(self, path: str, report: LoadReport) -> None:
        self.path = path
        self.report = report
        if report.malformed:
            detail = "document is malformed"
        else:
            detail = f"{report.dropped} invalid record(s)"
        super().__init__(f"Contact store {path}: {detail}")
