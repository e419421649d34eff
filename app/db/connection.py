import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import InvalidURI, PyMongoError

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, DatabaseConnectionError, DatabaseUsageError

logger = logging.getLogger(__name__)

HEALTH_CONNECTED = "connected"
HEALTH_DISCONNECTED = "disconnected"
HEALTH_ERROR = "error"

class DatabaseConnection:
    """
    Owns one MongoClient and the database handle derived from it.

    Created by the entry point (setup script, API startup, connectivity
    check) and passed to whatever needs the database; its lifetime is the
    lifetime of that process.
    """

    def __init__(self, settings: Settings, client_factory: Callable[..., MongoClient] = MongoClient):
        self.settings = settings
        self._client_factory = client_factory
        self.client: Optional[MongoClient] = None
        self.db: Optional[Database] = None

    @property
    def is_connected(self) -> bool:
        return self.client is not None and self.db is not None

    def connect(self) -> Database:
        """
        Connect and ping the server.

        Returns the same handle on repeated calls while connected.

        Raises:
            ConfigurationError: MONGODB_URI or MONGODB_DB_NAME is not set, or the URI is malformed
            DatabaseConnectionError: the host could not be resolved or did not answer the ping in time
        """
        if self.is_connected:
            logger.info("Database already connected")
            return self.db

        self.settings.require_mongodb()
        db_name = self.settings.MONGODB_DB_NAME

        logger.info("Connecting to MongoDB...")
        client = None
        try:
            # SRV URIs are resolved here, before any ping
            client = self._client_factory(
                self.settings.MONGODB_URI,
                serverSelectionTimeoutMS=self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                connectTimeoutMS=self.settings.MONGODB_CONNECT_TIMEOUT_MS,
            )
            client.admin.command("ping")
        except InvalidURI as e:
            logger.error(f"Invalid MONGODB_URI: {e}")
            raise ConfigurationError(f"Invalid MONGODB_URI: {e}") from e
        except PyMongoError as e:
            logger.error(f"MongoDB connection failed: {e}")
            if client is not None:
                client.close()
            raise DatabaseConnectionError(str(e)) from e

        self.client = client
        self.db = client[db_name]
        logger.info(f"Connected to MongoDB database: {db_name}")
        return self.db

    def disconnect(self) -> None:
        """Close the client. Does nothing when not connected."""
        if self.client is None:
            return
        try:
            self.client.close()
            logger.info("Disconnected from MongoDB")
        finally:
            self.client = None
            self.db = None

    def get_database(self) -> Database:
        if not self.is_connected:
            raise DatabaseUsageError("Database not connected. Call connect() first.")
        return self.db

    def health_check(self) -> Dict[str, Any]:
        """
        Report connection health without raising.

        Returns:
            dict: status ('connected', 'disconnected' or 'error') and a message
        """
        if not self.is_connected:
            return {"status": HEALTH_DISCONNECTED, "message": "Not connected to database"}

        try:
            self.client.admin.command("ping")
        except PyMongoError as e:
            return {"status": HEALTH_ERROR, "message": str(e)}

        return {
            "status": HEALTH_CONNECTED,
            "message": "Database connection is healthy",
            "database": self.settings.MONGODB_DB_NAME,
        }

    def __enter__(self) -> Database:
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

# Dependency to get the process-wide connection
def get_db_connection(request: Request) -> DatabaseConnection:
    """
    Dependency for FastAPI endpoints that need the database connection.
    The connection is created on startup and stored on the application state.
    """
    return request.app.state.db_connection
