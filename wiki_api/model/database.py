"""
Database Model - MongoDB connection manager
"""
import atexit
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.collection import Collection

logger = logging.getLogger(__name__)


class Database:
    """
    Owns a single MongoClient for the lifetime of the application.

    The client is opened once by ``connect()`` and shared by every request.
    ``close()`` releases it; a connected Database is also closed at
    interpreter exit unless it was closed explicitly first.
    """

    def __init__(self, client: Optional[MongoClient] = None):
        """
        Args:
            client: An already constructed client to use instead of opening one
        """
        self._client = client
        self._db = None

    def connect(self, connection_string: str = "mongodb://localhost:27017/",
                database_name: str = "wikiDB",
                timeout_ms: int = 5000) -> None:
        """Establish database connection with connection pooling"""
        if self._db is not None:
            logger.debug("MongoDB client already connected")
            return

        if self._client is None:
            self._client = MongoClient(
                connection_string,
                maxPoolSize=50,
                serverSelectionTimeoutMS=timeout_ms
            )
        self._db = self._client[database_name]
        atexit.register(self.close)
        logger.info(f"Connected to MongoDB database: {database_name}")

    def get_collection(self, collection_name: str) -> Collection:
        """Get a collection from the database"""
        if self._db is None:
            raise ConnectionError("Database not connected. Call connect() first.")
        return self._db[collection_name]

    def close(self) -> None:
        """Close database connection"""
        atexit.unregister(self.close)
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")

    @property
    def is_connected(self) -> bool:
        """Check if database is connected"""
        return self._client is not None and self._db is not None
