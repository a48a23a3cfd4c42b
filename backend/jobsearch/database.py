from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from jobsearch.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | None = None) -> Engine:
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
        echo=settings.echo_sql,
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None):
    """Create any missing tables. Existing data is left alone."""
    # Mapped classes register themselves on Base.metadata when imported.
    import jobsearch.models  # noqa: F401

    bind = bind or engine
    if bind.url.database:
        Path(bind.url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind)


def reset_db(bind: Engine | None = None):
    """Drop every table and create the schema again from scratch."""
    import jobsearch.models  # noqa: F401

    bind = bind or engine
    Base.metadata.drop_all(bind)
    Base.metadata.create_all(bind)
