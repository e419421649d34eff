"""
Connectivity self-test for the configured MongoDB deployment.

Connects, lists collections, round-trips a test document through the
`connection_test` collection, and runs the health check. Always
disconnects before returning.
"""

import logging
import os
import platform
import signal
import sys
from datetime import datetime

from app.core.exceptions import ConfigurationError, DatabaseConnectionError
from app.db.connection import DatabaseConnection

logger = logging.getLogger(__name__)

TEST_COLLECTION = "connection_test"

def _log_troubleshooting(error: Exception) -> None:
    if isinstance(error, ConfigurationError):
        logger.info("Environment setup:")
        logger.info("  - Copy .env.example to .env")
        logger.info("  - Set MONGODB_URI and MONGODB_DB_NAME")
    elif isinstance(error, DatabaseConnectionError):
        logger.info("Troubleshooting tips:")
        logger.info("  - Make sure MongoDB is installed and running")
        logger.info("  - Check that MONGODB_URI points at a reachable host")

def run_connection_check(connection: DatabaseConnection) -> int:
    """
    Run the self-test.

    Returns:
        int: Process exit code, 0 on success and 1 on any failure
    """
    try:
        logger.info("Testing MongoDB connection...")
        logger.info(f"Database name: {connection.settings.MONGODB_DB_NAME}")
        db = connection.connect()

        collections = db.list_collection_names()
        logger.info(f"Found {len(collections)} existing collections")
        for name in collections:
            logger.info(f"  - {name}")

        test_collection = db[TEST_COLLECTION]
        result = test_collection.insert_one({
            "timestamp": datetime.utcnow(),
            "test": "MongoDB connection successful",
            "environment": os.getenv("ENVIRONMENT", "development"),
            "platform": platform.system().lower(),
        })
        logger.info(f"Test document inserted with ID: {result.inserted_id}")

        found = test_collection.find_one({"_id": result.inserted_id})
        if found is None:
            raise DatabaseConnectionError("Test document could not be read back")
        logger.info("Test document retrieved successfully")

        test_collection.delete_one({"_id": result.inserted_id})
        logger.info("Test document cleaned up")

        health = connection.health_check()
        logger.info(f"Health status: {health['status']} ({health['message']})")
        if health["status"] != "connected":
            raise DatabaseConnectionError(health["message"])

        logger.info("All database tests passed successfully")
        return 0
    except Exception as e:
        logger.error(f"Database connection test failed: {e}")
        _log_troubleshooting(e)
        return 1
    finally:
        connection.disconnect()

def install_signal_handlers(connection: DatabaseConnection) -> None:
    """Disconnect and exit 0 on SIGINT/SIGTERM."""
    def handle(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}, shutting down gracefully...")
        connection.disconnect()
        sys.exit(0)

    signal.signal(signal.SIGINT, handle)
    signal.signal(signal.SIGTERM, handle)
