"""File-backed ContactRepository: the whole collection lives in one JSON array document.

The document is rewritten after every successful mutation (write-through). Writes go to
a sibling temp file that then replaces the target, so a reader never sees half a file.
"""

import json
import logging
import os
from pathlib import Path

from phonebook.application.dto import ContactStoreCorrupted, LoadReport
from phonebook.domain import Contact
from phonebook.infrastructure.memory_repository import InMemoryContactRepository

logger = logging.getLogger(__name__)

DEFAULT_PATH = "contacts.json"
INDENT = 4


class JsonFileContactRepository(InMemoryContactRepository):
    """Keeps the in-memory collection and a JSON document on disk in sync.

    strict=False (default) drops records that fail validation while loading and
    rewrites a malformed document as an empty one. strict=True raises
    ContactStoreCorrupted instead and leaves the file as it is.
    """

    def __init__(self, path: str | os.PathLike = DEFAULT_PATH, *, strict: bool = False) -> None:
        super().__init__()
        self._path = Path(path)
        self._strict = strict
        self.load_report = LoadReport()
        logger.info("Initialized with file: %s", self._path)
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            logger.info("File does not exist yet: %s - starting empty", self._path)
            return

        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("File %s is not valid UTF-8: %s", self._path, e)
            self._recover_malformed()
            return
        except OSError:
            logger.exception("Cannot read contacts from %s - starting empty", self._path)
            return
        if not text.strip():
            logger.warning("File is empty: %s", self._path)
            return

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("JSON parse error in %s: %s", self._path, e)
            data = None
        if not isinstance(data, list):
            self._recover_malformed()
            return

        contacts: list[Contact] = []
        seen: set[str] = set()
        dropped = 0
        for item in data:
            contact = Contact.from_json(item)
            if not contact.is_valid() or contact.email in seen:
                dropped += 1
                continue
            seen.add(contact.email)
            contacts.append(contact)

        self.load_report = LoadReport(loaded=len(contacts), dropped=dropped)
        if dropped:
            logger.warning(
                "Dropped %d invalid or duplicate contact record(s) while loading %s", dropped, self._path
            )
            if self._strict:
                raise ContactStoreCorrupted(str(self._path), self.load_report)
        self._contacts = contacts
        logger.info("Loaded %d contacts from file", len(contacts))

    def _recover_malformed(self) -> None:
        self.load_report = LoadReport(malformed=True)
        if self._strict:
            raise ContactStoreCorrupted(str(self._path), self.load_report)
        logger.warning("Invalid document in %s: expected a JSON array; resetting", self._path)
        self._persist()

    def _persist(self) -> bool:
        payload = json.dumps(
            [c.to_json() for c in self._contacts], indent=INDENT, ensure_ascii=False
        )
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Cannot write contacts to %s", self._path)
            tmp.unlink(missing_ok=True)
            return False
        logger.debug("Saved %d contacts to file: %s", len(self._contacts), self._path)
        return True

    def flush(self) -> bool:
        """Rewrite the document from the in-memory collection."""
        return self._persist()
