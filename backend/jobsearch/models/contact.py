import enum

from sqlalchemy import Column, Enum, Integer, Text
from jobsearch.database import Base
from jobsearch.models.values import ValueEquality


class ContactRole(enum.Enum):
    RECRUITER = "recruiter"
    HUMAN_RESOURCES = "human_resources"
    HIRING_MANAGER = "hiring_manager"


class Contact(ValueEquality, Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    phone = Column(Text)
    email = Column(Text)
    notes = Column(Text)
    organization = Column(Text)
    role = Column(Enum(ContactRole))

    _value_fields = ("id", "name", "phone", "email", "notes", "organization", "role")

    def __init__(self, name: str | None = None, phone: str | None = None,
                 email: str | None = None, notes: str | None = None,
                 organization: str | None = None, role: ContactRole | None = None,
                 id: int | None = None):
        self.id = id
        self.name = name
        self.phone = phone
        self.email = email
        self.notes = notes
        self.organization = organization
        self.role = role

    def clone(self) -> "Contact":
        return Contact(**{name: getattr(self, name) for name in self._value_fields})
