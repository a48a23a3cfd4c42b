from datetime import datetime, timedelta

from pydantic import BaseModel

from jobsearch.schemas.contact import ContactResponse


class JobOpeningCreate(BaseModel):
    title: str
    organization: str
    url: str | None = None
    notes: str | None = None
    advertised_date: datetime
    additional_contact_ids: list[int] = []


class ApplyRequest(BaseModel):
    application_time: datetime
    contact_id: int


class InterviewCreate(BaseModel):
    start: datetime
    duration: timedelta
    contact_id: int
    description: str


class ActivityResponse(BaseModel):
    id: int
    start: datetime
    duration: timedelta
    description: str | None
    completed: bool
    contact: ContactResponse


class JobOpeningResponse(BaseModel):
    id: int
    title: str
    organization: str
    url: str | None
    notes: str | None
    advertised_date: datetime
    additional_contacts: list[ContactResponse] = []
    activities: list[ActivityResponse] = []
