"""Unit tests for the Contact entity: setters, validation, JSON and rendering."""

import json

from phonebook.domain import Accepted, Contact, PhoneNumber, PhoneType, Rejected


def _contact(**overrides) -> Contact:
    fields = dict(
        first_name="Ivan",
        last_name="Petrov",
        patronymic="Sergeevich",
        address="Moscow, Tverskaya 1",
        birth_date="15.03.1990",
        email="ivan@example.com",
        phones=[PhoneNumber("+79123456789"), PhoneNumber("84951234567", PhoneType.WORK)],
    )
    fields.update(overrides)
    return Contact(**fields)


def test_construction_does_not_validate() -> None:
    contact = Contact(first_name="-bad-", email="nope")
    assert contact.first_name == "-bad-"
    assert not contact.is_valid()


def test_full_contact_is_valid() -> None:
    assert _contact().is_valid()
    assert isinstance(_contact().validate(), Accepted)


def test_optional_fields_may_be_empty() -> None:
    assert _contact(patronymic="", birth_date="", address="").is_valid()


def test_validate_reports_first_failing_rule() -> None:
    result = _contact(email="").validate()
    assert isinstance(result, Rejected)
    assert result.field == "required"

    assert _contact(last_name="1x").validate().field == "last_name"
    assert _contact(patronymic="-x").validate().field == "patronymic"
    assert _contact(email="ivan@").validate().field == "email"
    assert _contact(phones=[]).validate().field == "phones"
    assert _contact(phones=[PhoneNumber("123")]).validate().field == "phones"
    assert _contact(birth_date="31.02.1990").validate().field == "birth_date"


def test_setter_accepts_and_trims() -> None:
    contact = Contact()
    result = contact.set_first_name("  Ivan  ")
    assert result
    assert isinstance(result, Accepted)
    assert contact.first_name == "Ivan"


def test_setter_rejects_and_keeps_old_value() -> None:
    contact = _contact()
    result = contact.set_last_name("-Petrov")
    assert not result
    assert isinstance(result, Rejected)
    assert result.field == "last_name"
    assert "last name" in result.reason.lower()
    assert contact.last_name == "Petrov"


def test_set_email_strips_embedded_whitespace() -> None:
    contact = Contact()
    assert contact.set_email(" ivan @ example.com ")
    assert contact.email == "ivan@example.com"
    assert not contact.set_email("not-an-email")
    assert contact.email == "ivan@example.com"


def test_optional_setters_accept_empty() -> None:
    contact = _contact()
    assert contact.set_patronymic("   ")
    assert contact.patronymic == ""
    assert contact.set_birth_date("")
    assert contact.birth_date == ""
    assert not contact.set_birth_date("01.01.2999")


def test_set_address_is_unvalidated() -> None:
    contact = Contact()
    assert contact.set_address("  #42, anything goes  ")
    assert contact.address == "#42, anything goes"


def test_set_phones() -> None:
    contact = _contact()
    assert not contact.set_phones([])
    assert not contact.set_phones([PhoneNumber("+79123456789"), PhoneNumber("123")])
    assert contact.phone_count == 2
    assert contact.set_phones([PhoneNumber("89990001122")])
    assert contact.phone_count == 1


def test_add_phone_only_when_valid() -> None:
    contact = _contact()
    assert contact.add_phone(PhoneNumber("89990001122", PhoneType.HOME))
    assert contact.phone_count == 3
    assert not contact.add_phone(PhoneNumber("12345"))
    assert contact.phone_count == 3


def test_remove_phone_by_index() -> None:
    contact = _contact()
    assert contact.remove_phone(0)
    assert [p.number for p in contact.phones] == ["84951234567"]

    result = contact.remove_phone(5)
    assert isinstance(result, Rejected)
    assert "5" in result.reason
    assert not contact.remove_phone(-1)
    assert contact.phone_count == 1


def test_clear_phones() -> None:
    contact = _contact()
    contact.clear_phones()
    assert contact.phone_count == 0
    assert not contact.is_valid()


def test_equality_ignores_phones_address_and_birth_date() -> None:
    a = _contact()
    b = _contact(address="", birth_date="", phones=[PhoneNumber("89990001122")])
    assert a == b
    assert a != _contact(email="other@example.com")
    assert a != _contact(patronymic="")


def test_copy_is_independent() -> None:
    original = _contact()
    clone = original.copy()
    clone.add_phone(PhoneNumber("89990001122"))
    clone.set_address("Elsewhere")
    assert original.phone_count == 2
    assert original.address == "Moscow, Tverskaya 1"


def test_to_json_shape() -> None:
    data = _contact().to_json()
    assert data == {
        "firstName": "Ivan",
        "lastName": "Petrov",
        "patronymic": "Sergeevich",
        "address": "Moscow, Tverskaya 1",
        "birthDate": "15.03.1990",
        "email": "ivan@example.com",
        "phones": [
            {"number": "+79123456789", "type": 2},
            {"number": "84951234567", "type": 0},
        ],
    }


def test_json_round_trip() -> None:
    original = _contact()
    restored = Contact.from_json(original.to_json())
    assert restored == original
    assert restored.address == original.address
    assert restored.birth_date == original.birth_date
    assert restored.phones == original.phones
    assert [p.category for p in restored.phones] == [PhoneType.MOBILE, PhoneType.WORK]


def test_from_json_accepts_string_and_single_element_array() -> None:
    data = _contact().to_json()
    assert Contact.from_json(json.dumps(data)) == _contact()
    assert Contact.from_json([data]) == _contact()
    assert Contact.from_json(json.dumps([data])) == _contact()
    assert Contact.from_json([json.dumps(data)]) == _contact()


def test_from_json_fills_missing_fields() -> None:
    contact = Contact.from_json({"firstName": "Ivan", "email": "ivan@example.com"})
    assert contact.first_name == "Ivan"
    assert contact.last_name == ""
    assert contact.patronymic == ""
    assert contact.birth_date == ""
    assert contact.phones == []


def test_from_json_skips_malformed_phones() -> None:
    data = _contact().to_json()
    data["phones"] = [
        {"number": "+79123456789", "type": 2},
        {"number": "89990001122", "type": 7},
        {"number": "89990001133"},
        "89990001144",
    ]
    contact = Contact.from_json(data)
    assert [p.number for p in contact.phones] == ["+79123456789"]
    assert contact.is_valid()


def test_from_json_malformed_document_yields_empty_contact() -> None:
    for payload in ("{not json", "42", [], [1], "null"):
        contact = Contact.from_json(payload)
        assert contact.is_empty()
        assert not contact.is_valid()


def test_str_with_all_segments() -> None:
    assert str(_contact()) == (
        "Petrov Ivan Sergeevich, birthDate: 15.03.1990, email: ivan@example.com, phones: 2"
    )


def test_str_omits_empty_segments() -> None:
    contact = Contact(first_name="Ivan", last_name="Petrov")
    assert str(contact) == "Petrov Ivan "
