"""
Setup script for provisioning the car rental platform database.
Creates the validated collections and indexes, then inserts the seed data.
"""

import argparse
import logging
import sys

from app.core.config import settings
from app.db.connection import DatabaseConnection
from app.db.init_db import init_db, verify_setup

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def setup_database(seed: bool = True):
    """Initialize collections, indexes and seed data."""
    connection = DatabaseConnection(settings)
    try:
        db = connection.connect()
        logger.info(f"Provisioning database {db.name}...")
        summary = init_db(db, settings, seed=seed)
        logger.info(f"Collections created: {', '.join(summary['collections_created']) or 'none'}")
        logger.info(f"Indexes per collection: {summary['index_counts']}")
        if summary["seed"]:
            logger.info(f"Admin user email: {settings.SEED_ADMIN_EMAIL}")
            logger.info(f"Sample vehicles: {len(summary['seed']['vehicle_ids'])} vehicles created")
        return summary
    except Exception as e:
        logger.error(f"Error provisioning database: {e}")
        raise
    finally:
        connection.disconnect()

def validate_database() -> bool:
    """Report missing collections, indexes and seed data without writing."""
    connection = DatabaseConnection(settings)
    try:
        report = verify_setup(connection.connect(), settings)
    except Exception as e:
        logger.error(f"Error validating database: {e}")
        raise
    finally:
        connection.disconnect()

    for name in report["missing_collections"]:
        logger.warning(f"Missing collection: {name}")
    for name, keys in report["missing_indexes"].items():
        logger.warning(f"Missing indexes on {name}: {keys}")
    logger.info(f"Seed counts: {report['seed_counts']}")
    if not report["seed_ok"]:
        logger.warning("Seed data is missing or incomplete")
    return report["ok"]

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Provision the car rental platform database.")
    parser.add_argument("--skip-seed", action="store_true", help="Create collections and indexes only")
    parser.add_argument("--validate-only", action="store_true", help="Check an existing setup, write nothing")
    args = parser.parse_args(argv)

    try:
        if args.validate_only:
            return 0 if validate_database() else 1
        setup_database(seed=not args.skip_seed)
    except Exception:
        # Already logged; the operator must inspect and clean up before re-running
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
