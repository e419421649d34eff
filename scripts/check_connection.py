#!/usr/bin/env python3

import argparse
import logging
import os
import sys

# Add project root to sys.path so the app package is importable
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from app.core.config import settings
from app.db.connection import DatabaseConnection
from app.db.connectivity import install_signal_handlers, run_connection_check

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

def main():
    parser = argparse.ArgumentParser(description="Check connectivity to the configured MongoDB database.")
    parser.add_argument("--uri", help="Override MONGODB_URI")
    parser.add_argument("--db-name", help="Override MONGODB_DB_NAME")
    args = parser.parse_args()

    run_settings = settings
    overrides = {}
    if args.uri:
        overrides["MONGODB_URI"] = args.uri
    if args.db_name:
        overrides["MONGODB_DB_NAME"] = args.db_name
    if overrides:
        run_settings = settings.model_copy(update=overrides)

    connection = DatabaseConnection(run_settings)
    install_signal_handlers(connection)
    sys.exit(run_connection_check(connection))

if __name__ == "__main__":
    main()
