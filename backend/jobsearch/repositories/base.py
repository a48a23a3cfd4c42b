from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

TId = TypeVar("TId")
TItem = TypeVar("TItem")


class Repository(ABC, Generic[TId, TItem]):
    """CRUD over one entity type keyed by an identifier.

    Mutations mark the repository dirty until ``save`` is called. Instances
    are not thread safe; callers sharing one across threads must synchronize
    access themselves.
    """

    def __init__(self):
        self._dirty = False

    @property
    def dirty(self) -> bool:
        return self._dirty

    @abstractmethod
    def get_item_id(self, item: TItem) -> TId | None:
        ...

    @abstractmethod
    def exists(self, item_id: TId) -> bool:
        ...

    @abstractmethod
    def get_all(self) -> Iterable[TItem]:
        ...

    @abstractmethod
    def get(self, item_id: TId) -> TItem | None:
        ...

    @abstractmethod
    def create(self, item: TItem) -> None:
        ...

    @abstractmethod
    def update(self, item: TItem) -> None:
        ...

    @abstractmethod
    def delete(self, item_id: TId) -> None:
        ...

    @abstractmethod
    def save(self) -> None:
        ...

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
