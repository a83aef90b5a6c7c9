"""
Document-store boundary: MongoDB store and connection helpers.

Dependencies: pymongo, paging.configs
"""

from paging.boundary.mongo.connection import get_collection, get_mongo_client
from paging.boundary.mongo.mongo_store import MongoStore, new_mongo_store

__all__ = ["MongoStore", "new_mongo_store", "get_collection", "get_mongo_client"]
