from .store import JsonFileStore, MemoryStore, StoreAdapter, open_default_store

__all__ = ["JsonFileStore",
           "MemoryStore",
           "StoreAdapter",
           "open_default_store"
           ]
