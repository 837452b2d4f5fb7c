"""Display formatting for stored phone numbers."""

import phonenumbers

DEFAULT_REGION = "RU"


def format_phone(raw: str, default_region: str | None = DEFAULT_REGION) -> str | None:
    """Return the number in international format, or None if it cannot be parsed.

    Numbers without a leading + are read in default_region (8XXXXXXXXXX is a
    Russian national number). Validity by phonenumbers' metadata is not required:
    stored numbers are already checked by validate_phone.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL)


def to_e164(raw: str, default_region: str | None = DEFAULT_REGION) -> str | None:
    """Return E.164 form (+7XXXXXXXXXX), or None if it cannot be parsed."""
    if not raw or not str(raw).strip():
        return None
    try:
        parsed = phonenumbers.parse(str(raw).strip(), default_region)
    except phonenumbers.NumberParseException:
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
