"""
Storage contract for the agencies collection.

ownerId must reference an existing user; the store does not check it.
"""

from pymongo import ASCENDING, DESCENDING, GEOSPHERE, TEXT

from app.db.base_model import CollectionDefinition, EMAIL_PATTERN, index, timestamp_properties
from app.schemas.enums import AgencyStatus, values

agencies = CollectionDefinition(
    name="agencies",
    json_schema={
        "bsonType": "object",
        "required": ["name", "email", "address", "ownerId", "status"],
        "properties": {
            "name": {"bsonType": "string", "minLength": 1},
            "email": {"bsonType": "string", "pattern": EMAIL_PATTERN},
            "phoneNumber": {"bsonType": "string"},
            "address": {
                "bsonType": "object",
                "required": ["street", "city", "country"],
                "properties": {
                    "street": {"bsonType": "string"},
                    "city": {"bsonType": "string"},
                    "state": {"bsonType": "string"},
                    "country": {"bsonType": "string"},
                    "zipCode": {"bsonType": "string"},
                    "coordinates": {
                        "bsonType": "object",
                        "properties": {
                            "latitude": {"bsonType": "double"},
                            "longitude": {"bsonType": "double"},
                        },
                    },
                },
            },
            "ownerId": {"bsonType": "objectId"},
            "status": {"bsonType": "string", "enum": values(AgencyStatus)},
            "businessLicense": {"bsonType": "string"},
            "description": {"bsonType": "string"},
            "website": {"bsonType": "string"},
            "rating": {"bsonType": "double", "minimum": 0, "maximum": 5},
            "totalReviews": {"bsonType": "int", "minimum": 0},
            **timestamp_properties(),
        },
    },
    indexes=[
        index(("ownerId", ASCENDING)),
        index(("status", ASCENDING)),
        index(("address.coordinates", GEOSPHERE)),
        index(("name", TEXT), ("description", TEXT)),
        index(("rating", DESCENDING)),
    ],
)
