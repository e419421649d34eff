import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database
from pymongo.errors import CollectionInvalid, PyMongoError

from app.core.config import Settings
from app.db.base_model import IndexSpec
from app.db.indexes import create_indexes
from app.db.seed import SEED_AGENCY_NAME, seed_database
from app.models import COLLECTIONS
from app.schemas.enums import UserRole

logger = logging.getLogger(__name__)

# One admin owning one agency with two vehicles
EXPECTED_SEED_COUNTS = {"super_admins": 1, "admin_agencies": 1, "agency_vehicles": 2}

def create_collections(db: Database) -> List[str]:
    """
    Create every collection with its validator attached.

    A collection that already exists is kept and its validator refreshed.
    """
    created = []
    try:
        for definition in COLLECTIONS:
            try:
                db.create_collection(definition.name, validator=definition.validator)
                created.append(definition.name)
                logger.info(f"Collection {definition.name} created successfully")
            except CollectionInvalid:
                logger.warning(f"Collection {definition.name} already exists, updating validator")
                db.command("collMod", definition.name, validator=definition.validator)
    except PyMongoError as e:
        logger.error(f"Error creating collections: {e}")
        raise
    return created

def init_db(db: Database, settings: Settings, seed: bool = True) -> Dict[str, Any]:
    """
    Provision collections, indexes and seed data.

    Indexes are created before any seed insert so the unique email index
    already guards the admin user. Errors propagate and abort the remaining
    steps; nothing already written is rolled back.

    Returns:
        dict: Summary of what was provisioned
    """
    logger.info("Creating collections with validation schemas...")
    collections = create_collections(db)

    logger.info("Creating indexes...")
    indexes = create_indexes(db)

    seeded: Optional[Dict[str, Any]] = None
    if seed:
        logger.info("Creating sample data...")
        seeded = seed_database(db, settings)

    summary = {
        "database": db.name,
        "collections_created": collections,
        "index_counts": {name: len(names) for name, names in indexes.items()},
        "seed": seeded,
    }
    logger.info("Database initialization completed successfully")
    return summary

def _index_present(spec: IndexSpec, present: List[List[tuple]]) -> bool:
    if spec.kind == "text":
        # The server reports text indexes as {_fts: 'text', _ftsx: 1}
        return any(("_fts", "text") in keys for keys in present)
    return [tuple(key) for key in spec.keys] in present

def verify_setup(db: Database, settings: Settings) -> Dict[str, Any]:
    """
    Check an already provisioned database without writing to it.

    Returns:
        dict: missing_collections, missing_indexes (per collection, as key
        lists), seed counts, and ok, true only when both the schema and
        the seed chain are complete
    """
    existing = set(db.list_collection_names())
    missing_collections = [c.name for c in COLLECTIONS if c.name not in existing]

    missing_indexes: Dict[str, List[List[Any]]] = {}
    for definition in COLLECTIONS:
        if definition.name not in existing:
            continue
        present = [
            [tuple(key) for key in info["key"]]
            for info in db[definition.name].index_information().values()
        ]
        missing = [
            [list(key) for key in spec.keys]
            for spec in definition.indexes
            if not _index_present(spec, present)
        ]
        if missing:
            missing_indexes[definition.name] = missing

    seed_counts = {"super_admins": 0, "admin_agencies": 0, "agency_vehicles": 0}
    if not missing_collections:
        admin = db["users"].find_one({"email": settings.SEED_ADMIN_EMAIL})
        seed_counts["super_admins"] = db["users"].count_documents({"role": UserRole.SUPER_ADMIN.value})
        if admin is not None:
            agency = db["agencies"].find_one({"ownerId": admin["_id"], "name": SEED_AGENCY_NAME})
            seed_counts["admin_agencies"] = db["agencies"].count_documents({"ownerId": admin["_id"]})
            if agency is not None:
                seed_counts["agency_vehicles"] = db["vehicles"].count_documents({"agencyId": agency["_id"]})

    schema_ok = not missing_collections and not missing_indexes
    seed_ok = seed_counts == EXPECTED_SEED_COUNTS
    return {
        "missing_collections": missing_collections,
        "missing_indexes": missing_indexes,
        "seed_counts": seed_counts,
        "schema_ok": schema_ok,
        "seed_ok": seed_ok,
        "ok": schema_ok and seed_ok,
    }
