from tokenledger.store.base import EntityStore, Found, LoadResult, NotFound
from tokenledger.store.memory import InMemoryEntityStore
from tokenledger.store.sql import SqlEntityStore

__all__ = ["EntityStore", "Found", "InMemoryEntityStore", "LoadResult", "NotFound", "SqlEntityStore"]
