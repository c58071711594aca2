from threading import Lock
from typing import Any, Dict, List, Optional, Type

from agrimarket.core.errors import ImmutableRecord
from agrimarket.repositories.base import R, RecordStore, Repository, validate_record
from agrimarket.schemas import User, CropType, Listing, Bid, BarterOffer, PriceHistory


class InMemoryRepository(Repository[R]):
    """
    Dict-backed repository. Records are validated on the way in and copied
    on the way out so callers never hold a reference into the map.
    """

    def __init__(self, record_type: Type[R], append_only: bool = False):
        self.record_type = record_type
        self.append_only = append_only
        self._lock = Lock()
        self._records: Dict[int, R] = {}
        self._next_id = 1

    def get(self, record_id: int) -> Optional[R]:
        with self._lock:
            rec = self._records.get(record_id)
        return rec.model_copy() if rec is not None else None

    def list(self) -> List[R]:
        with self._lock:
            items = list(self._records.values())
        return [r.model_copy() for r in items]

    def create(self, data: Dict[str, Any]) -> R:
        with self._lock:
            rec = validate_record(self.record_type, {**data, "id": self._next_id})
            self._records[rec.id] = rec
            self._next_id += 1
        return rec.model_copy()

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[R]:
        if self.append_only:
            raise ImmutableRecord(f"{self.record_type.__name__} records cannot be modified")
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            merged = {**current.model_dump(), **changes, "id": record_id}
            rec = validate_record(self.record_type, merged)
            self._records[record_id] = rec
        return rec.model_copy()


def build_memory_store() -> RecordStore:
    return RecordStore(
        users=InMemoryRepository(User),
        crop_types=InMemoryRepository(CropType),
        listings=InMemoryRepository(Listing),
        bids=InMemoryRepository(Bid),
        barter_offers=InMemoryRepository(BarterOffer),
        price_history=InMemoryRepository(PriceHistory, append_only=True),
    )
