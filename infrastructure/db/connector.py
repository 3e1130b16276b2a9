"""
MongoDB connector.

Builds the single motor client shared by every request handler. The client
is concurrency safe and owns its own connection pool, so one instance per
process is enough.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConfigurationError, PyMongoError

from application.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


async def connect_to_mongo(
    uri: Optional[str],
    *,
    server_selection_timeout_ms: int = 5000,
) -> AsyncIOMotorClient:
    """
    Connect to MongoDB and verify the server is reachable.

    Lists the accessible databases as a connectivity check and logs them.

    Args:
        uri: MongoDB connection string
        server_selection_timeout_ms: Driver wait for a reachable server

    Returns:
        AsyncIOMotorClient: Connected client handle

    Raises:
        StoreConnectionError: if the URI is missing or malformed, or the
            server cannot be reached
    """
    if not uri:
        raise StoreConnectionError("MONGODB_URI is not set")

    try:
        client = AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
    except (ConfigurationError, ValueError) as e:
        raise StoreConnectionError(f"Invalid MongoDB URI: {e}") from e

    try:
        names = await client.list_database_names()
    except PyMongoError as e:
        client.close()
        raise StoreConnectionError(f"Failed to connect to MongoDB: {e}") from e

    logger.info("Databases:")
    for name in names:
        logger.info("- %s", name)

    return client


def close_mongo(client: Optional[AsyncIOMotorClient]) -> None:
    """Close the client if one was created."""
    if client is not None:
        client.close()
        logger.info("MongoDB client closed")
