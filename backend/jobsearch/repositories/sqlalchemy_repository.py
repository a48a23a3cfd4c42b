import logging
from typing import Callable

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from jobsearch import database
from jobsearch.errors import AlreadyExists, InvalidArgument, NotFound
from jobsearch.repositories.base import Repository, TId, TItem
from jobsearch.repositories.binding import EntityBinding

logger = logging.getLogger(__name__)


class SqlAlchemyRepository(Repository[TId, TItem]):
    """Repository over a SQLAlchemy session.

    Every mutation is flushed straight away, so generated ids are assigned and
    later queries on the same session see pending changes; ``save`` commits.
    A flush or commit that fails rolls the session back before the error is
    re-raised, discarding every unsaved change on it and leaving the
    repository clean and usable.
    A session passed in by the caller is never closed by the repository. One
    opened from ``session_factory`` is owned and closed by ``close``.

    Not thread safe.
    """

    def __init__(self, binding: EntityBinding[TId, TItem], session: Session | None = None,
                 session_factory: Callable[[], Session] | None = None):
        super().__init__()
        self.binding = binding.require("get_id", "collection", "id_matches")
        if session is None:
            session = (session_factory or database.SessionLocal)()
            self._owns_session = True
        else:
            self._owns_session = False
        self.session = session

    @property
    def owns_session(self) -> bool:
        return self._owns_session

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def get_item_id(self, item: TItem) -> TId | None:
        return self.binding.get_id(item)

    def _query(self) -> Query:
        return self.binding.collection(self.session)

    def exists(self, item_id: TId) -> bool:
        return self.get(item_id) is not None

    def get_all(self) -> Query:
        return self._query()

    def get(self, item_id: TId) -> TItem | None:
        if item_id is None:
            return None
        return self._query().filter(self.binding.id_matches(item_id)).first()

    def create(self, item: TItem) -> None:
        if item is None:
            raise InvalidArgument("item cannot be None")
        item_id = self.get_item_id(item)
        if item_id is not None and self.exists(item_id):
            raise AlreadyExists(item_id)

        self.session.add(item)
        self._run(self.session.flush)
        self._dirty = True
        logger.debug("Created %s %s", self.binding.name, self.get_item_id(item))

    def update(self, item: TItem) -> None:
        if item is None:
            raise InvalidArgument("item cannot be None")
        item_id = self.get_item_id(item)
        if not self.exists(item_id):
            raise NotFound(item_id)

        if item in self.session:
            identity = inspect(item).identity
            if identity is not None and identity != (item_id,):
                raise InvalidArgument(
                    f"{self.binding.name} {identity[0]} cannot be stored under id {item_id}"
                )
        else:
            # merge copies a detached value onto the instance the session already tracks
            self.session.merge(item)
        self._run(self.session.flush)
        self._dirty = True
        logger.debug("Updated %s %s", self.binding.name, item_id)

    def delete(self, item_id: TId) -> None:
        stored = self.get(item_id)
        if stored is None:
            raise NotFound(item_id)

        self.session.delete(stored)
        self._run(self.session.flush)
        self._dirty = True
        logger.debug("Deleted %s %s", self.binding.name, item_id)

    def _run(self, operation: Callable[[], None]) -> None:
        try:
            operation()
        except SQLAlchemyError as exc:
            # the session refuses further work until it is rolled back
            self.session.rollback()
            self._dirty = False
            logger.warning("Rolled back unsaved %s changes: %s", self.binding.name, exc)
            raise

    def save(self) -> None:
        self._run(self.session.commit)
        self._dirty = False
        logger.debug("Saved %s changes", self.binding.name)
