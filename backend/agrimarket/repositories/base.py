from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from agrimarket.core.errors import InvalidInput
from agrimarket.schemas import User, CropType, Listing, Bid, BarterOffer, PriceHistory

R = TypeVar("R", bound=BaseModel)


def validate_record(record_type: Type[R], data: Dict[str, Any]) -> R:
    """Build a record, reporting bad field values as InvalidInput."""
    try:
        return record_type.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InvalidInput(f"Invalid {record_type.__name__} fields: {fields}") from exc


class Repository(ABC, Generic[R]):
    """
    Storage-agnostic access to one record type. Ids are integers assigned
    by the repository in creation order; `list` returns that order.
    """

    record_type: Type[R]
    append_only: bool = False

    @abstractmethod
    def get(self, record_id: int) -> Optional[R]:
        ...

    @abstractmethod
    def list(self) -> List[R]:
        ...

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> R:
        ...

    @abstractmethod
    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[R]:
        """Apply `changes` and return the new record, or None when the id is unknown."""
        ...


@dataclass
class RecordStore:
    users: Repository[User]
    crop_types: Repository[CropType]
    listings: Repository[Listing]
    bids: Repository[Bid]
    barter_offers: Repository[BarterOffer]
    price_history: Repository[PriceHistory]
