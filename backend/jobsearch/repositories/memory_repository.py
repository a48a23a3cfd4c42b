import logging
from typing import Callable, Iterable, Iterator

from jobsearch.errors import AlreadyExists, InvalidArgument, NotFound
from jobsearch.repositories.base import Repository, TId, TItem
from jobsearch.repositories.binding import EntityBinding

logger = logging.getLogger(__name__)


def next_integer_id(get_id: Callable[[TItem], int | None]) -> Callable[[Iterable[TItem]], int]:
    """Build an id generator returning one more than the largest stored id."""

    def new_id(items: Iterable[TItem]) -> int:
        return max((get_id(item) or 0 for item in items), default=0) + 1

    return new_id


class MemoryRepository(Repository[TId, TItem]):
    """List-backed repository holding private copies of its items.

    Items are cloned on the way in and on the way out, so callers never share
    state with what is stored. ``new_id`` is called with the stored items
    whenever a created item carries no id of its own.
    """

    def __init__(self, get_id: Callable[[TItem], TId | None],
                 set_id: Callable[[TItem, TId], None],
                 new_id: Callable[[Iterable[TItem]], TId],
                 clone: Callable[[TItem], TItem]):
        super().__init__()
        for name, accessor in (("get_id", get_id), ("set_id", set_id),
                               ("new_id", new_id), ("clone", clone)):
            if not callable(accessor):
                raise InvalidArgument(f"{name} must be callable")
        self._get_id = get_id
        self._set_id = set_id
        self._new_id = new_id
        self._clone = clone
        self._items: list[TItem] = []

    @classmethod
    def from_binding(cls, binding: EntityBinding[TId, TItem],
                     new_id: Callable[[Iterable[TItem]], TId] | None = None) -> "MemoryRepository[TId, TItem]":
        binding.require("get_id", "set_id", "clone")
        return cls(binding.get_id, binding.set_id,
                   new_id or next_integer_id(binding.get_id), binding.clone)

    def get_item_id(self, item: TItem) -> TId | None:
        return self._get_id(item)

    def _index(self, item_id: TId) -> int | None:
        return next(
            (i for i, item in enumerate(self._items) if self._get_id(item) == item_id), None
        )

    def exists(self, item_id: TId) -> bool:
        return self._index(item_id) is not None

    def get_all(self) -> Iterator[TItem]:
        return (self._clone(item) for item in list(self._items))

    def get(self, item_id: TId) -> TItem | None:
        index = self._index(item_id)
        return self._clone(self._items[index]) if index is not None else None

    def create(self, item: TItem) -> None:
        if item is None:
            raise InvalidArgument("item cannot be None")
        item_id = self._get_id(item)
        if item_id is None:
            item_id = self._new_id(self._items)
            self._set_id(item, item_id)
        elif self.exists(item_id):
            raise AlreadyExists(item_id)

        self._items.append(self._clone(item))
        self._dirty = True
        logger.debug("Created item %s in memory", item_id)

    def update(self, item: TItem) -> None:
        if item is None:
            raise InvalidArgument("item cannot be None")
        item_id = self._get_id(item)
        index = self._index(item_id)
        if index is None:
            raise NotFound(item_id)

        self._items[index] = self._clone(item)
        self._dirty = True
        logger.debug("Updated item %s in memory", item_id)

    def delete(self, item_id: TId) -> None:
        index = self._index(item_id)
        if index is None:
            raise NotFound(item_id)

        del self._items[index]
        self._dirty = True
        logger.debug("Deleted item %s from memory", item_id)

    def save(self) -> None:
        self._dirty = False
