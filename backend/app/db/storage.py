"""
In-memory storage engine.

Holds drivers and tours in per-collection dicts keyed by integer id. Each
collection has its own lock held for the duration of every CRUD call, so ids
stay unique and reads see prior writes even when called from worker threads.
"""

import threading
from dataclasses import fields, replace
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from backend.app.models.driver import Driver
from backend.app.models.tour import Tour

RecordT = TypeVar("RecordT", Driver, Tour)


class Collection(Generic[RecordT]):
    """A lock-guarded id -> record map with a never-reused id counter."""

    def __init__(self, record_type: Type[RecordT]):
        self._record_type = record_type
        self._field_names = {f.name for f in fields(record_type)} - {"id"}
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self) -> List[RecordT]:
        with self._lock:
            return [replace(record) for record in self._records.values()]

    def get(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            record = self._records.get(record_id)
            return replace(record) if record else None

    def create(self, data: Dict[str, Any]) -> RecordT:
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            record = self._record_type(id=record_id, **self._known(data))
            self._records[record_id] = record
            return replace(record)

    def update(self, record_id: int, partial: Dict[str, Any]) -> Optional[RecordT]:
        """
        Merge the keys present in ``partial`` over the stored record.

        A key that is present with ``None`` is stored as ``None``; absent
        keys keep their prior values. Returns None if the id is unknown.
        """
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = replace(existing, **self._known(partial))
            self._records[record_id] = updated
            return replace(updated)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._next_id = 1

    def _known(self, data: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(data) - self._field_names
        if unknown:
            raise KeyError(f"Unknown {self._record_type.__name__} fields: {sorted(unknown)}")
        return dict(data)


class MemStorage:
    """Process-wide store for drivers and tours."""

    def __init__(self):
        self.drivers: Collection[Driver] = Collection(Driver)
        self.tours: Collection[Tour] = Collection(Tour)

    # Driver operations
    def get_drivers(self) -> List[Driver]:
        return self.drivers.list()

    def get_driver(self, driver_id: int) -> Optional[Driver]:
        return self.drivers.get(driver_id)

    def create_driver(self, data: Dict[str, Any]) -> Driver:
        return self.drivers.create(data)

    def update_driver(self, driver_id: int, partial: Dict[str, Any]) -> Optional[Driver]:
        return self.drivers.update(driver_id, partial)

    def get_drivers_by_location(self, location: str) -> List[Driver]:
        wanted = location.lower()
        return [d for d in self.drivers.list() if d.location.lower() == wanted]

    # Tour operations
    def get_tours(self) -> List[Tour]:
        return self.tours.list()

    def get_tour(self, tour_id: int) -> Optional[Tour]:
        return self.tours.get(tour_id)

    def create_tour(self, data: Dict[str, Any]) -> Tour:
        data = dict(data)
        data.setdefault("driver_id", None)
        return self.tours.create(data)

    def update_tour(self, tour_id: int, partial: Dict[str, Any]) -> Optional[Tour]:
        return self.tours.update(tour_id, partial)

    def delete_tour(self, tour_id: int) -> bool:
        return self.tours.delete(tour_id)

    def reset(self) -> None:
        """Drop all records and restart both id counters at 1."""
        self.drivers.clear()
        self.tours.clear()


storage = MemStorage()


def get_storage() -> MemStorage:
    """
    FastAPI dependency for the storage engine.

    Returns the process-wide instance; tests override it with a fresh one.
    """
    return storage
