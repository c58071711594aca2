from .base import Repository, RecordStore
from .memory import InMemoryRepository, build_memory_store
from .sql import SqlRepository, build_sql_store


def build_store(settings) -> RecordStore:
    if settings.STORAGE_BACKEND == "sql":
        return build_sql_store(settings.DATABASE_URL)
    return build_memory_store()


__all__ = [
    "Repository",
    "RecordStore",
    "InMemoryRepository",
    "SqlRepository",
    "build_memory_store",
    "build_sql_store",
    "build_store",
]
