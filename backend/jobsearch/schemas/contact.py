from pydantic import BaseModel

from jobsearch.models import ContactRole


class ContactCreate(BaseModel):
    name: str
    phone: str | None = None
    email: str | None = None
    notes: str | None = None
    organization: str | None = None
    role: ContactRole | None = None


class ContactUpdate(ContactCreate):
    pass


class ContactResponse(BaseModel):
    id: int
    name: str
    phone: str | None
    email: str | None
    notes: str | None
    organization: str | None
    role: ContactRole | None
