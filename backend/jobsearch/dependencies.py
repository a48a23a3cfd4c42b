from fastapi import Depends
from sqlalchemy.orm import Session

from jobsearch.database import get_db
from jobsearch.repositories import ACTIVITIES, CONTACTS, JOB_OPENINGS, SqlAlchemyRepository


# The request session is supplied by get_db, which also closes it.
def get_contact_repository(db: Session = Depends(get_db)) -> SqlAlchemyRepository:
    return SqlAlchemyRepository(CONTACTS, session=db)


def get_activity_repository(db: Session = Depends(get_db)) -> SqlAlchemyRepository:
    return SqlAlchemyRepository(ACTIVITIES, session=db)


def get_job_opening_repository(db: Session = Depends(get_db)) -> SqlAlchemyRepository:
    return SqlAlchemyRepository(JOB_OPENINGS, session=db)
