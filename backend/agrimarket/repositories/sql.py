from typing import Any, Dict, List, Optional, Type

from sqlalchemy import select

from agrimarket.core.database import Base, build_engine, build_session_factory
from agrimarket.core.errors import ImmutableRecord
from agrimarket.models import (
    UserRow,
    CropTypeRow,
    ListingRow,
    BidRow,
    BarterOfferRow,
    PriceHistoryRow,
)
from agrimarket.repositories.base import R, RecordStore, Repository, validate_record
from agrimarket.schemas import User, CropType, Listing, Bid, BarterOffer, PriceHistory


class SqlRepository(Repository[R]):
    """Repository over one SQLAlchemy table; rows are returned as pydantic records."""

    def __init__(self, session_factory, row_type, record_type: Type[R], append_only: bool = False):
        self.session_factory = session_factory
        self.row_type = row_type
        self.record_type = record_type
        self.append_only = append_only

    def _to_record(self, row) -> R:
        return self.record_type.model_validate(row)

    def get(self, record_id: int) -> Optional[R]:
        with self.session_factory() as db:
            row = db.get(self.row_type, record_id)
            return self._to_record(row) if row is not None else None

    def list(self) -> List[R]:
        with self.session_factory() as db:
            rows = db.scalars(select(self.row_type).order_by(self.row_type.id)).all()
            return [self._to_record(r) for r in rows]

    def create(self, data: Dict[str, Any]) -> R:
        # validate with a placeholder id so bad data never reaches the table
        validate_record(self.record_type, {**data, "id": 0})
        with self.session_factory() as db:
            row = self.row_type(**data)
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._to_record(row)

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[R]:
        if self.append_only:
            raise ImmutableRecord(f"{self.record_type.__name__} records cannot be modified")
        with self.session_factory() as db:
            row = db.get(self.row_type, record_id)
            if row is None:
                return None
            merged = {**self._to_record(row).model_dump(), **changes, "id": record_id}
            validate_record(self.record_type, merged)
            for key, value in changes.items():
                setattr(row, key, value)
            db.commit()
            db.refresh(row)
            return self._to_record(row)


def build_sql_store(database_url: str) -> RecordStore:
    engine = build_engine(database_url)
    Base.metadata.create_all(bind=engine)
    session_factory = build_session_factory(engine)

    return RecordStore(
        users=SqlRepository(session_factory, UserRow, User),
        crop_types=SqlRepository(session_factory, CropTypeRow, CropType),
        listings=SqlRepository(session_factory, ListingRow, Listing),
        bids=SqlRepository(session_factory, BidRow, Bid),
        barter_offers=SqlRepository(session_factory, BarterOfferRow, BarterOffer),
        price_history=SqlRepository(session_factory, PriceHistoryRow, PriceHistory, append_only=True),
    )
