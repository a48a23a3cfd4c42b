from datetime import datetime, timedelta

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Interval, Text
from sqlalchemy.orm import relationship, validates
from jobsearch.database import Base
from jobsearch.errors import InvalidArgument
from jobsearch.models.contact import Contact
from jobsearch.models.values import ValueEquality


class Activity(ValueEquality, Base):
    """An activity, such as an interview or a follow-up call."""

    __tablename__ = "activities"

    id = Column(Integer, primary_key=True)
    start = Column(DateTime, nullable=False)
    duration = Column(Interval, nullable=False)
    description = Column(Text)
    completed = Column(Boolean, nullable=False, default=False)
    contact_id = Column(Integer, ForeignKey("contacts.id"), nullable=False)
    job_opening_id = Column(Integer, ForeignKey("job_openings.id", ondelete="CASCADE"))

    contact = relationship("Contact")

    _value_fields = ("id", "start", "duration", "contact", "description", "completed")

    def __init__(self, start: datetime, duration: timedelta, contact: Contact,
                 description: str, completed: bool = False, id: int | None = None):
        if description is None or not description.strip():
            raise InvalidArgument("description cannot be blank")
        self.id = id
        self.start = start
        self.duration = duration
        self.contact = contact
        self.description = description
        self.completed = completed

    @validates("duration")
    def _validate_duration(self, key, duration):
        if duration is None or duration < timedelta(0):
            raise InvalidArgument("duration must be zero or positive")
        return duration

    @validates("contact")
    def _validate_contact(self, key, contact):
        if contact is None:
            raise InvalidArgument("contact cannot be None")
        return contact

    def clone(self) -> "Activity":
        return Activity(self.start, self.duration, self.contact.clone(), self.description,
                        completed=self.completed, id=self.id)
