from sqlalchemy import create_engine, inspect

from jobsearch.database import init_db, reset_db
from jobsearch.repositories import CONTACTS, SqlAlchemyRepository
from factories import peter_smith


def test_init_db_creates_parent_directory_and_tables(tmp_path):
    db_file = tmp_path / "nested" / "data" / "jobsearch.sqlite"
    engine = create_engine(f"sqlite:///{db_file}")
    try:
        init_db(engine)
        assert db_file.parent.is_dir()
        tables = set(inspect(engine).get_table_names())
        assert {"contacts", "activities", "job_openings", "job_opening_contacts"} <= tables
    finally:
        engine.dispose()


def test_init_db_keeps_existing_rows(test_engine, session_factory):
    with SqlAlchemyRepository(CONTACTS, session_factory=session_factory) as repository:
        repository.create(peter_smith())
        repository.save()

    init_db(test_engine)

    with SqlAlchemyRepository(CONTACTS, session_factory=session_factory) as repository:
        assert [c.name for c in repository.get_all()] == ["Peter Smith"]


def test_reset_db_removes_rows(test_engine, session_factory):
    with SqlAlchemyRepository(CONTACTS, session_factory=session_factory) as repository:
        repository.create(peter_smith())
        repository.save()

    reset_db(test_engine)

    with SqlAlchemyRepository(CONTACTS, session_factory=session_factory) as repository:
        assert list(repository.get_all()) == []
