"""
FastAPI backend: REST API over the phonebook.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel

from phonebook.application import ContactManager, SortField
from phonebook.domain import Contact, PhoneNumber, PhoneType, Rejected
from phonebook.infrastructure import JsonFileContactRepository, format_phone, to_e164

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

DEFAULT_CONTACTS_FILE = "contacts.json"
_TRUTHY = {"1", "true", "yes", "on"}


def _get_repository() -> JsonFileContactRepository:
    path = os.environ.get("PHONEBOOK_FILE", DEFAULT_CONTACTS_FILE).strip() or DEFAULT_CONTACTS_FILE
    strict = os.environ.get("PHONEBOOK_STRICT_LOAD", "").strip().lower() in _TRUTHY
    return JsonFileContactRepository(path, strict=strict)


@asynccontextmanager
async def lifespan(app: FastAPI):
    repo = _get_repository()
    report = repo.load_report
    logger.info(
        "Contacts file: %s (loaded %d, dropped %d)", repo.path, report.loaded, report.dropped
    )
    app.state.manager = ContactManager(repo)
    yield


app = FastAPI(title="Phonebook API", lifespan=lifespan)


def get_manager(request: Request) -> ContactManager:
    return request.app.state.manager


# --- schemas ---


class PhoneBody(BaseModel):
    number: str
    type: PhoneType = PhoneType.MOBILE


class UpdateContactBody(BaseModel):
    first_name: str
    last_name: str
    patronymic: str = ""
    address: str = ""
    birth_date: str = ""
    phones: list[PhoneBody]


class CreateContactBody(UpdateContactBody):
    email: str


class PhoneItem(BaseModel):
    number: str
    type: int
    label: str
    formatted: str | None = None
    e164: str | None = None


class ContactItem(BaseModel):
    first_name: str
    last_name: str
    patronymic: str
    address: str
    birth_date: str
    email: str
    phones: list[PhoneItem]
    display: str


class SortBody(BaseModel):
    field: SortField
    descending: bool = False


def _to_item(contact: Contact) -> ContactItem:
    return ContactItem(
        first_name=contact.first_name,
        last_name=contact.last_name,
        patronymic=contact.patronymic,
        address=contact.address,
        birth_date=contact.birth_date,
        email=contact.email,
        phones=[
            PhoneItem(
                number=p.number,
                type=int(p.category),
                label=p.category_label(),
                formatted=format_phone(p.number),
                e164=to_e164(p.number),
            )
            for p in contact.phones
        ],
        display=str(contact),
    )


def _build_contact(body: UpdateContactBody, email: str) -> Contact:
    """Apply every field through its setter; 422 with the first rejection reason."""
    contact = Contact()
    phones = [PhoneNumber(number=p.number, category=p.type) for p in body.phones]
    results = (
        contact.set_first_name(body.first_name),
        contact.set_last_name(body.last_name),
        contact.set_patronymic(body.patronymic),
        contact.set_address(body.address),
        contact.set_birth_date(body.birth_date),
        contact.set_email(email),
        contact.set_phones(phones),
    )
    for result in results:
        if isinstance(result, Rejected):
            raise HTTPException(
                status_code=422, detail={"field": result.field, "reason": result.reason}
            )
    return contact


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


@app.get("/contacts")
def list_contacts(request: Request) -> list[ContactItem]:
    manager = get_manager(request)
    return [_to_item(c) for c in manager.list_contacts()]


@app.get("/contacts/search")
def search_contacts(q: str, request: Request, by: str = "name") -> list[ContactItem]:
    manager = get_manager(request)
    if by == "name":
        found = manager.search_by_name(q)
    elif by == "email":
        found = manager.search_by_email(q)
    elif by == "phone":
        found = manager.search_by_phone(q)
    else:
        raise HTTPException(status_code=400, detail="by must be one of: name, email, phone")
    return [_to_item(c) for c in found]


@app.post("/contacts/sort")
def sort_contacts(body: SortBody, request: Request) -> list[ContactItem]:
    manager = get_manager(request)
    contacts = manager.sort_contacts(body.field, descending=body.descending)
    if contacts is None:
        raise HTTPException(status_code=500, detail="Failed to save sorted contacts")
    return [_to_item(c) for c in contacts]


@app.get("/contacts/{email}")
def get_contact(email: str, request: Request) -> ContactItem:
    contact = get_manager(request).get_contact(email)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return _to_item(contact)


@app.post("/contacts", status_code=201)
def create_contact(body: CreateContactBody, request: Request) -> ContactItem:
    manager = get_manager(request)
    contact = _build_contact(body, body.email)
    if manager.get_contact(contact.email) is not None:
        raise HTTPException(status_code=409, detail="Contact with this email already exists")
    if not manager.add_contact(contact):
        raise HTTPException(status_code=500, detail="Failed to save contact")
    return _to_item(contact)


@app.put("/contacts/{email}")
def update_contact(email: str, body: UpdateContactBody, request: Request) -> ContactItem:
    manager = get_manager(request)
    if manager.get_contact(email) is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    contact = _build_contact(body, email)
    if not manager.update_contact(contact):
        raise HTTPException(status_code=500, detail="Failed to save contact")
    return _to_item(contact)


@app.delete("/contacts/{email}", status_code=204)
def delete_contact(email: str, request: Request) -> Response:
    if not get_manager(request).remove_contact(email):
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=204)
