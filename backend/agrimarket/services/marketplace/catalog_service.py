# backend/agrimarket/services/marketplace/catalog_service.py

"""Users and crop types: reference data plus the small display projections used for enrichment."""

from typing import Dict, List, Optional

from agrimarket.core.errors import InvalidInput
from agrimarket.repositories import RecordStore
from agrimarket.schemas import CropType, CropTypeRef, User, UserRef


def list_crop_types(store: RecordStore) -> List[CropType]:
    return store.crop_types.list()


def find_crop_type_by_name(store: RecordStore, name: str) -> Optional[CropType]:
    wanted = name.strip().lower()
    for crop in store.crop_types.list():
        if crop.name.lower() == wanted:
            return crop
    return None


def resolve_crop_type_id(store: RecordStore, name: str) -> int:
    crop = find_crop_type_by_name(store, name)
    if crop is None:
        raise InvalidInput(f"Unknown crop type: {name}")
    return crop.id


def get_user(store: RecordStore, user_id: int) -> Optional[User]:
    return store.users.get(user_id)


def find_user_by_username(store: RecordStore, username: str) -> Optional[User]:
    for user in store.users.list():
        if user.username == username:
            return user
    return None


def crop_type_map(store: RecordStore) -> Dict[int, CropTypeRef]:
    return {c.id: CropTypeRef(id=c.id, name=c.name) for c in store.crop_types.list()}


def user_map(store: RecordStore) -> Dict[int, UserRef]:
    return {u.id: UserRef(id=u.id, name=u.name, location=u.location) for u in store.users.list()}
