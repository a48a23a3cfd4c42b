from jobsearch.repositories.base import Repository
from jobsearch.repositories.binding import EntityBinding
from jobsearch.repositories.bindings import ACTIVITIES, CONTACTS, JOB_OPENINGS
from jobsearch.repositories.memory_repository import MemoryRepository, next_integer_id
from jobsearch.repositories.sqlalchemy_repository import SqlAlchemyRepository

__all__ = [
    "Repository",
    "EntityBinding",
    "ACTIVITIES",
    "CONTACTS",
    "JOB_OPENINGS",
    "MemoryRepository",
    "next_integer_id",
    "SqlAlchemyRepository",
]
