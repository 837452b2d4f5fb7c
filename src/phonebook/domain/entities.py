"""Domain entities: PhoneNumber, Contact, and setter results."""

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum

from phonebook.domain.validators import (
    clean_email,
    validate_birth_date,
    validate_email,
    validate_name,
    validate_phone,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    """The value passed validation and was stored."""

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The value failed validation; the entity was left unchanged."""

    field: str
    reason: str

    def __bool__(self) -> bool:
        return False


ACCEPTED = Accepted()


class PhoneType(IntEnum):
    """Phone category. Values are the on-disk ordinals and must not change."""

    WORK = 0
    HOME = 1
    MOBILE = 2

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, eq=False)
class PhoneNumber:
    """
    A raw phone string plus its category.
    Two numbers are equal when their normalized digits match; category is ignored.
    """

    number: str
    category: PhoneType = PhoneType.MOBILE

    def is_valid(self) -> bool:
        return validate_phone(self.number)

    def normalized(self) -> str:
        """Digits only, in 7XXXXXXXXXX form where the number allows it."""
        digits = "".join(ch for ch in self.number if "0" <= ch <= "9")
        if digits.startswith("8"):
            return "7" + digits[1:]
        if digits and not digits.startswith("7") and len(digits) == 10:
            return "7" + digits
        return digits

    def category_label(self) -> str:
        return self.category.label

    def to_json(self) -> dict:
        return {"number": self.number, "type": int(self.category)}

    @classmethod
    def from_json(cls, obj: dict) -> "PhoneNumber":
        """Decode {"number": str, "type": 0|1|2}. Raises ValueError on bad input."""
        if not isinstance(obj, dict):
            raise ValueError(f"Phone entry must be an object, got {type(obj).__name__}.")
        if "number" not in obj or "type" not in obj:
            raise ValueError("Phone entry is missing 'number' or 'type'.")
        number = obj["number"]
        type_value = obj["type"]
        if not isinstance(number, str):
            raise ValueError("Phone 'number' must be a string.")
        if isinstance(type_value, bool) or not isinstance(type_value, int):
            raise ValueError("Phone 'type' must be an integer.")
        try:
            category = PhoneType(type_value)
        except ValueError:
            raise ValueError(
                f"Invalid phone type: {type_value}. "
                "Valid values are: 0 (Work), 1 (Home), 2 (Mobile)"
            ) from None
        return cls(number=number, category=category)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhoneNumber):
            return NotImplemented
        return self.normalized() == other.normalized()

    def __hash__(self) -> int:
        return hash(self.normalized())

    def __str__(self) -> str:
        return f"{self.category_label()}: {self.number}"


def _text(data: dict, key: str) -> str:
    value = data.get(key, "")
    return value if isinstance(value, str) else ""


@dataclass(eq=False)
class Contact:
    """
    A person record. Construction does not validate; use the setters or validate().
    Equality covers first name, last name, patronymic and email only.
    """

    first_name: str = ""
    last_name: str = ""
    patronymic: str = ""
    address: str = ""
    birth_date: str = ""
    email: str = ""
    phones: list[PhoneNumber] = field(default_factory=list)

    # --- setters ---

    def _reject(self, field_name: str, reason: str) -> Rejected:
        logger.debug("Rejected %s: %s", field_name, reason)
        return Rejected(field=field_name, reason=reason)

    def set_first_name(self, value: str) -> Accepted | Rejected:
        value = (value or "").strip()
        if not validate_name(value):
            return self._reject("first_name", f"Invalid first name: {value!r}")
        self.first_name = value
        return ACCEPTED

    def set_last_name(self, value: str) -> Accepted | Rejected:
        value = (value or "").strip()
        if not validate_name(value):
            return self._reject("last_name", f"Invalid last name: {value!r}")
        self.last_name = value
        return ACCEPTED

    def set_patronymic(self, value: str) -> Accepted | Rejected:
        """Empty clears the patronymic."""
        value = (value or "").strip()
        if value and not validate_name(value):
            return self._reject("patronymic", f"Invalid patronymic: {value!r}")
        self.patronymic = value
        return ACCEPTED

    def set_address(self, value: str) -> Accepted:
        self.address = (value or "").strip()
        return ACCEPTED

    def set_birth_date(self, value: str) -> Accepted | Rejected:
        """Empty clears the birth date."""
        value = (value or "").strip()
        if value and not validate_birth_date(value):
            return self._reject("birth_date", f"Invalid date of birth: {value!r}")
        self.birth_date = value
        return ACCEPTED

    def set_email(self, value: str) -> Accepted | Rejected:
        value = clean_email(value)
        if not validate_email(value):
            return self._reject("email", f"Invalid email address: {value!r}")
        self.email = value
        return ACCEPTED

    def set_phones(self, phones: list[PhoneNumber]) -> Accepted | Rejected:
        phones = list(phones or [])
        if not phones:
            return self._reject("phones", "Phone list cannot be empty")
        for phone in phones:
            if not phone.is_valid():
                return self._reject("phones", f"Invalid phone number in list: {phone.number!r}")
        self.phones = phones
        return ACCEPTED

    # --- phones ---

    def add_phone(self, phone: PhoneNumber) -> Accepted | Rejected:
        if not phone.is_valid():
            return self._reject("phones", f"Invalid phone number: {phone.number!r}")
        self.phones.append(phone)
        return ACCEPTED

    def remove_phone(self, index: int) -> Accepted | Rejected:
        if not 0 <= index < len(self.phones):
            return self._reject(
                "phones",
                f"Incorrect phone index: {index}. Total phones: {len(self.phones)}",
            )
        del self.phones[index]
        return ACCEPTED

    def clear_phones(self) -> None:
        self.phones.clear()

    @property
    def phone_count(self) -> int:
        return len(self.phones)

    # --- validation ---

    def validate(self) -> Accepted | Rejected:
        """Check every invariant; return the first failing rule."""
        if not self.first_name or not self.last_name or not self.email:
            return self._reject(
                "required", "Required fields (first name, last name or email) are missing"
            )
        if not validate_name(self.first_name):
            return self._reject("first_name", "Invalid first name")
        if not validate_name(self.last_name):
            return self._reject("last_name", "Invalid last name")
        if self.patronymic and not validate_name(self.patronymic):
            return self._reject("patronymic", "Invalid patronymic")
        if not validate_email(self.email):
            return self._reject("email", "Invalid email address")
        if not self.phones:
            return self._reject("phones", "At least one phone number is required")
        if not all(phone.is_valid() for phone in self.phones):
            return self._reject("phones", "One of the phone numbers is invalid")
        if self.birth_date and not validate_birth_date(self.birth_date):
            return self._reject("birth_date", "Invalid date of birth")
        return ACCEPTED

    def is_valid(self) -> bool:
        return bool(self.validate())

    def is_empty(self) -> bool:
        return not any(
            (
                self.first_name,
                self.last_name,
                self.patronymic,
                self.address,
                self.birth_date,
                self.email,
                self.phones,
            )
        )

    def copy(self) -> "Contact":
        return Contact(
            first_name=self.first_name,
            last_name=self.last_name,
            patronymic=self.patronymic,
            address=self.address,
            birth_date=self.birth_date,
            email=self.email,
            phones=list(self.phones),
        )

    # --- JSON ---

    def to_json(self) -> dict:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "patronymic": self.patronymic,
            "address": self.address,
            "birthDate": self.birth_date,
            "email": self.email,
            "phones": [phone.to_json() for phone in self.phones],
        }

    @classmethod
    def from_json(cls, payload: dict | list | str) -> "Contact":
        """Decode a contact object.

        Accepts a dict, a JSON string, or a one-element list wrapping either.
        Missing fields become empty strings and malformed phone entries are skipped.
        A payload that cannot be read as an object yields an empty Contact; callers
        should check is_valid() before trusting the result.
        """
        data = payload
        try:
            if isinstance(data, str):
                data = json.loads(data)
            if isinstance(data, list) and data:
                data = data[0]
                if isinstance(data, str):
                    data = json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning("Contact JSON parse error: %s", e)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Contact JSON is not an object: %s", type(data).__name__)
            return cls()

        phones = []
        raw_phones = data.get("phones")
        if isinstance(raw_phones, list):
            for entry in raw_phones:
                try:
                    phones.append(PhoneNumber.from_json(entry))
                except ValueError as e:
                    logger.debug("Skipping phone entry %r: %s", entry, e)

        return cls(
            first_name=_text(data, "firstName"),
            last_name=_text(data, "lastName"),
            patronymic=_text(data, "patronymic"),
            address=_text(data, "address"),
            birth_date=_text(data, "birthDate"),
            email=_text(data, "email"),
            phones=phones,
        )

    # --- rendering ---

    def __str__(self) -> str:
        result = f"{self.last_name} {self.first_name} {self.patronymic}"
        if self.birth_date:
            result += f", birthDate: {self.birth_date}"
        if self.email:
            result += f", email: {self.email}"
        if self.phones:
            result += f", phones: {len(self.phones)}"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contact):
            return NotImplemented
        return (
            self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.patronymic == other.patronymic
            and self.email == other.email
        )

    __hash__ = None
