"""
MongoDB connection helpers.

Dependencies: pymongo, paging.configs
System role: Convenience construction of the collections stores operate on
"""

from pymongo import MongoClient
from pymongo.collection import Collection

from paging.configs import get_settings
from paging.configs.mongo import MongoSettings
from paging.core.exceptions import StoreConfigurationError


def get_mongo_client(mongo_config: MongoSettings | None = None) -> MongoClient:
    """
    Create a MongoClient from settings.

    The client connects lazily; no server round trip happens here.

    Args:
        mongo_config: Mongo settings (defaults to global settings)

    Returns:
        MongoClient: Configured client, to be closed by the caller
    """
    mongo_config = mongo_config or get_settings().mongo
    return MongoClient(
        mongo_config.uri,
        serverSelectionTimeoutMS=mongo_config.server_selection_timeout_ms,
    )


def get_collection(
    name: str,
    client: MongoClient | None = None,
    mongo_config: MongoSettings | None = None,
) -> Collection:
    """
    Get a collection from the configured database.

    Args:
        name: Collection name
        client: Client to use (defaults to get_mongo_client())
        mongo_config: Mongo settings (defaults to global settings)

    Returns:
        Collection: pymongo collection handle

    Raises:
        StoreConfigurationError: If no database or collection name is set
    """
    mongo_config = mongo_config or get_settings().mongo
    if not mongo_config.database:
        raise StoreConfigurationError("Mongo database name is not configured", store="mongo")
    if not name:
        raise StoreConfigurationError("Collection name must not be empty", store="mongo")

    client = client or get_mongo_client(mongo_config)
    return client[mongo_config.database][name]
