from datetime import datetime
from typing import Iterable

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Table, Text
from sqlalchemy.orm import relationship, validates
from jobsearch.database import Base
from jobsearch.errors import InvalidArgument
from jobsearch.models.activity import Activity
from jobsearch.models.contact import Contact
from jobsearch.models.values import ValueEquality

job_opening_contacts = Table(
    "job_opening_contacts",
    Base.metadata,
    Column("job_opening_id", Integer, ForeignKey("job_openings.id", ondelete="CASCADE"), primary_key=True),
    Column("contact_id", Integer, ForeignKey("contacts.id", ondelete="CASCADE"), primary_key=True),
)


class JobOpening(ValueEquality, Base):
    __tablename__ = "job_openings"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    organization = Column(Text, nullable=False)
    url = Column(Text)
    notes = Column(Text)
    advertised_date = Column(DateTime, nullable=False)

    activities = relationship(
        "Activity", order_by="Activity.id", cascade="all, delete-orphan",
    )
    additional_contacts = relationship("Contact", secondary=job_opening_contacts)

    _value_fields = ("id", "title", "organization", "url", "notes", "advertised_date",
                     "additional_contacts", "activities")

    def __init__(self, title: str | None = None, organization: str | None = None,
                 url: str | None = None, notes: str | None = None,
                 advertised_date: datetime | None = None,
                 additional_contacts: Iterable[Contact] = (),
                 activities: Iterable[Activity] = (), id: int | None = None):
        self.id = id
        self.title = title
        self.organization = organization
        self.url = url
        self.notes = notes
        self.advertised_date = advertised_date
        self.additional_contacts = list(additional_contacts)
        self.activities = list(activities)

    @validates("activities", "additional_contacts")
    def _validate_entry(self, key, value):
        if value is None:
            raise InvalidArgument(f"{key} cannot contain None")
        return value

    def clone(self) -> "JobOpening":
        return JobOpening(
            id=self.id,
            title=self.title,
            organization=self.organization,
            url=self.url,
            notes=self.notes,
            advertised_date=self.advertised_date,
            additional_contacts=[c.clone() for c in self.additional_contacts],
            activities=[a.clone() for a in self.activities],
        )
