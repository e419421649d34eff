"""
Storage contract for the vehicles collection.
"""

from pymongo import ASCENDING, DESCENDING, GEOSPHERE

from app.db.base_model import CollectionDefinition, index, timestamp_properties
from app.schemas.enums import FuelType, Transmission, VehicleCategory, VehicleStatus, values

string_array = {"bsonType": "array", "items": {"bsonType": "string"}}

vehicles = CollectionDefinition(
    name="vehicles",
    json_schema={
        "bsonType": "object",
        "required": ["agencyId", "make", "model", "year", "category", "pricePerDay", "status"],
        "properties": {
            "agencyId": {"bsonType": "objectId"},
            "make": {"bsonType": "string", "minLength": 1},
            "model": {"bsonType": "string", "minLength": 1},
            "year": {"bsonType": "int", "minimum": 1990, "maximum": 2030},
            "category": {"bsonType": "string", "enum": values(VehicleCategory)},
            "pricePerDay": {"bsonType": "double", "minimum": 0},
            "status": {"bsonType": "string", "enum": values(VehicleStatus)},
            "licensePlate": {"bsonType": "string"},
            "vin": {"bsonType": "string"},
            "color": {"bsonType": "string"},
            "fuelType": {"bsonType": "string", "enum": values(FuelType)},
            "transmission": {"bsonType": "string", "enum": values(Transmission)},
            "seats": {"bsonType": "int", "minimum": 1, "maximum": 20},
            "mileage": {"bsonType": "int", "minimum": 0},
            "features": string_array,
            "images": string_array,
            "location": {
                "bsonType": "object",
                "properties": {
                    # [longitude, latitude]
                    "coordinates": {"bsonType": "array", "items": {"bsonType": "double"}},
                    "address": {"bsonType": "string"},
                },
            },
            "rating": {"bsonType": "double", "minimum": 0, "maximum": 5},
            "totalReviews": {"bsonType": "int", "minimum": 0},
            **timestamp_properties(),
        },
    },
    indexes=[
        index(("agencyId", ASCENDING)),
        index(("category", ASCENDING)),
        index(("status", ASCENDING)),
        index(("pricePerDay", ASCENDING)),
        index(("location.coordinates", GEOSPHERE)),
        index(("make", ASCENDING), ("model", ASCENDING)),
        index(("rating", DESCENDING)),
        # Agency fleet listing filtered by status and category
        index(("agencyId", ASCENDING), ("status", ASCENDING), ("category", ASCENDING)),
    ],
)
