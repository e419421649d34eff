"""
Storage contract for the users collection.
"""

from pymongo import ASCENDING

from app.db.base_model import CollectionDefinition, EMAIL_PATTERN, index, timestamp_properties
from app.schemas.enums import UserRole, values

users = CollectionDefinition(
    name="users",
    json_schema={
        "bsonType": "object",
        "required": ["email", "password", "firstName", "lastName", "role"],
        "properties": {
            "email": {"bsonType": "string", "pattern": EMAIL_PATTERN},
            "password": {"bsonType": "string", "minLength": 6},  # hashed value
            "firstName": {"bsonType": "string", "minLength": 1},
            "lastName": {"bsonType": "string", "minLength": 1},
            "role": {"bsonType": "string", "enum": values(UserRole)},
            "phoneNumber": {"bsonType": "string"},
            "dateOfBirth": {"bsonType": "date"},
            "drivingLicense": {
                "bsonType": "object",
                "properties": {
                    "number": {"bsonType": "string"},
                    "expiryDate": {"bsonType": "date"},
                    "country": {"bsonType": "string"},
                },
            },
            "isActive": {"bsonType": "bool"},
            "emailVerified": {"bsonType": "bool"},
            **timestamp_properties(),
        },
    },
    indexes=[
        # The only durable guard against duplicate accounts
        index(("email", ASCENDING), unique=True),
        index(("role", ASCENDING)),
        index(("isActive", ASCENDING)),
        index(("createdAt", ASCENDING)),
    ],
)
