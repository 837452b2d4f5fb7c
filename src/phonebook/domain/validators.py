"""Field validators for contact data. Pure functions: every check returns a bool."""

import calendar
import re
from datetime import date

PHONE_SEPARATORS = frozenset(" -()+")
PHONE_DIGITS = 11

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_DIGITS = frozenset("0123456789")

_DAYS_IN_MONTH = {
    1: 31, 2: 28, 3: 31, 4: 30, 5: 31, 6: 30,
    7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31,
}


def clean_email(raw: str) -> str:
    """Trim and drop every embedded whitespace character."""
    return "".join((raw or "").split())


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(month: int, year: int) -> int:
    """Number of days in the month, or 0 for a month outside 1..12."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH.get(month, 0)


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


def validate_name(name: str) -> bool:
    """First name, last name, or patronymic.

    Letters (any alphabet), ASCII digits, '-' and spaces; must start with a letter
    and must not start or end with '-'.
    """
    value = (name or "").strip()
    if not value:
        return False
    if value[0] == "-" or value[-1] == "-":
        return False
    if not _is_letter(value[0]):
        return False
    return all(_is_letter(ch) or ch in _DIGITS or ch in "- " for ch in value)


def validate_email(email: str) -> bool:
    value = clean_email(email)
    if not value:
        return False
    return _EMAIL_RE.fullmatch(value) is not None


def validate_phone(phone: str) -> bool:
    """Russian-style number: +7XXXXXXXXXX or 8XXXXXXXXXX, separators allowed."""
    value = (phone or "").strip()
    if not value:
        return False
    had_plus = value.startswith("+")
    cleaned = "".join(ch for ch in value if ch not in PHONE_SEPARATORS)
    if not cleaned or not all(ch in _DIGITS for ch in cleaned):
        return False
    if len(cleaned) != PHONE_DIGITS:
        return False
    return cleaned[0] == ("7" if had_plus else "8")


def parse_birth_date(value: str) -> tuple[int, int, int] | None:
    """Split DD.MM.YYYY into (day, month, year), or None when the shape is wrong."""
    if len(value) != 10 or value[2] != "." or value[5] != ".":
        return None
    parts = (value[0:2], value[3:5], value[6:10])
    if not all(part and all(ch in _DIGITS for ch in part) for part in parts):
        return None
    day, month, year = (int(part) for part in parts)
    return day, month, year


def validate_birth_date(birth_date: str, today: date | None = None) -> bool:
    """Calendar-valid DD.MM.YYYY strictly before today (local date)."""
    if not birth_date:
        return False
    parsed = parse_birth_date(birth_date)
    if parsed is None:
        return False
    day, month, year = parsed
    if month < 1 or month > 12:
        return False
    if day < 1 or day > days_in_month(month, year):
        return False
    today = today or date.today()
    return (year, month, day) < (today.year, today.month, today.day)
