from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from jobsearch.errors import ConfigurationError

TId = TypeVar("TId")
TItem = TypeVar("TItem")


@dataclass(frozen=True)
class EntityBinding(Generic[TId, TItem]):
    """How a repository reaches the identifier and storage of one entity type.

    ``collection`` returns the query over every stored item for a session and
    ``id_matches`` builds the SQL predicate selecting one id. Both are only
    needed by the SQLAlchemy backend; ``set_id`` and ``clone`` only by the
    in-memory one.
    """

    name: str
    get_id: Callable[[TItem], TId | None] | None = None
    set_id: Callable[[TItem, TId], None] | None = None
    clone: Callable[[TItem], TItem] | None = None
    collection: Callable[[Any], Any] | None = None
    id_matches: Callable[[TId], Any] | None = None

    def require(self, *accessors: str) -> "EntityBinding[TId, TItem]":
        missing = [name for name in accessors if not callable(getattr(self, name, None))]
        if missing:
            raise ConfigurationError(
                f"Binding '{self.name}' is missing accessor(s): {', '.join(missing)}"
            )
        return self
