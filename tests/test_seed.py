from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure

from app.core.exceptions import DuplicateKeyError
from app.core.security import verify_password
from app.db.indexes import create_indexes
from app.db.seed import SEED_AGENCY_NAME, build_vehicles, seed_database


def test_seed_builds_the_referential_chain(mongo_db, settings):
    result = seed_database(mongo_db, settings)

    admins = list(mongo_db["users"].find({"role": "super_admin"}))
    assert len(admins) == 1
    assert admins[0]["_id"] == result["admin_user_id"]
    assert admins[0]["email"] == "admin@carrentalplatform.com"

    agencies = list(mongo_db["agencies"].find())
    assert len(agencies) == 1
    assert agencies[0]["ownerId"] == result["admin_user_id"]
    assert agencies[0]["name"] == SEED_AGENCY_NAME
    assert agencies[0]["status"] == "approved"

    vehicles = list(mongo_db["vehicles"].find({"agencyId": result["agency_id"]}))
    assert len(vehicles) == 2
    assert mongo_db["vehicles"].count_documents({}) == 2
    assert sorted(result["vehicle_ids"]) == sorted(v["_id"] for v in vehicles)


def test_seed_vehicles():
    agency_id = ObjectId()
    camry, x5 = build_vehicles(agency_id)
    assert camry["agencyId"] == x5["agencyId"] == agency_id
    assert (camry["make"], camry["model"], camry["category"]) == ("Toyota", "Camry", "midsize")
    assert (x5["make"], x5["model"], x5["category"]) == ("BMW", "X5", "luxury")
    assert isinstance(camry["pricePerDay"], float)
    assert isinstance(camry["year"], int)
    assert camry["location"]["coordinates"] == [-74.0060, 40.7128]


def test_admin_password_is_stored_hashed(mongo_db, settings):
    seed_database(mongo_db, settings)
    admin = mongo_db["users"].find_one({"email": settings.SEED_ADMIN_EMAIL})
    assert admin["password"] != settings.SEED_ADMIN_PASSWORD
    assert verify_password(settings.SEED_ADMIN_PASSWORD, admin["password"])


def test_agency_coordinates_are_longitude_first(mongo_db, settings):
    seed_database(mongo_db, settings)
    agency = mongo_db["agencies"].find_one()
    assert list(agency["address"]["coordinates"]) == ["longitude", "latitude"]


def test_second_run_is_stopped_by_unique_email(mongo_db, settings):
    create_indexes(mongo_db, collections=["users"])
    seed_database(mongo_db, settings)

    with pytest.raises(DuplicateKeyError):
        seed_database(mongo_db, settings)

    assert mongo_db["users"].count_documents({}) == 1
    assert mongo_db["agencies"].count_documents({}) == 1
    assert mongo_db["vehicles"].count_documents({}) == 2


def test_failure_aborts_remaining_steps(settings):
    collections = {name: MagicMock() for name in ("users", "agencies", "vehicles")}
    collections["users"].insert_one.return_value.inserted_id = ObjectId()
    collections["agencies"].insert_one.side_effect = OperationFailure("Document failed validation")
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections[name]

    with pytest.raises(OperationFailure):
        seed_database(db, settings)

    collections["users"].insert_one.assert_called_once()
    collections["vehicles"].insert_many.assert_not_called()
