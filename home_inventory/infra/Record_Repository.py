"""Generic record repository over one collection of the store document.

Records are kept as plain dicts in insertion order; entities are rebuilt with
their from_dict/to_dict pair on every read/write so callers never hold
references into the document.
"""
from typing import Generic, List, Optional, Type, TypeVar

from home_inventory.errors import ItemNotFound

T = TypeVar("T")


class RecordRepository(Generic[T]):
    collection: str = ""
    entity: Type = object
    kind: str = "Record"

    def __init__(self, document: dict):
        self._records: List[dict] = document.setdefault(self.collection, [])

    def _index_of(self, record_id: str) -> Optional[int]:
        for idx, record in enumerate(self._records):
            if record.get("id") == record_id:
                return idx
        return None

    def get_all(self) -> List[T]:
        return [self.entity.from_dict(record) for record in self._records]

    def get_by_id(self, record_id: str) -> Optional[T]:
        idx = self._index_of(record_id)
        return None if idx is None else self.entity.from_dict(self._records[idx])

    def count(self) -> int:
        return len(self._records)

    def insert(self, item: T) -> T:
        '''Inserts an entity; an existing record with the same id is replaced in place.'''
        idx = self._index_of(item.id)
        if idx is None:
            self._records.append(item.to_dict())
        else:
            self._records[idx] = item.to_dict()
        return item

    def insert_many(self, items: List[T]) -> List[T]:
        for item in items:
            self.insert(item)
        return items

    def update(self, item: T) -> T:
        idx = self._index_of(item.id)
        if idx is None:
            raise ItemNotFound(self.kind, item.id)
        self._records[idx] = item.to_dict()
        return item

    def delete(self, record_id: str) -> bool:
        idx = self._index_of(record_id)
        if idx is None:
            return False
        del self._records[idx]
        return True

    def delete_where(self, predicate) -> int:
        '''Deletes every record whose entity matches predicate; returns how many were removed.'''
        keep = [r for r in self._records if not predicate(self.entity.from_dict(r))]
        removed = len(self._records) - len(keep)
        self._records[:] = keep
        return removed

    def delete_all(self) -> None:
        del self._records[:]
