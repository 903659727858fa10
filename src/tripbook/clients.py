"""Lazily-created store shared by scripts within one process."""

from functools import lru_cache

from tripbook.config import get_config
from tripbook.db.store import TripStore


@lru_cache(maxsize=1)
def get_store() -> TripStore:
    store = TripStore(get_config())
    store.connect()
    store.create_schema()
    return store
