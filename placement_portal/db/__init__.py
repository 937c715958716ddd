"""
Database module - MongoDB store.
"""
from placement_portal.db.mongodb import MongoStore, get_store, COLLECTIONS

__all__ = [
    "MongoStore",
    "get_store",
    "COLLECTIONS"
]
