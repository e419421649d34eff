"""
Storage contract for the reviews collection.

targetId points into vehicles or agencies depending on targetType.
"""

from pymongo import ASCENDING, DESCENDING

from app.db.base_model import CollectionDefinition, index, timestamp_properties
from app.schemas.enums import ReviewStatus, ReviewTargetType, values

reviews = CollectionDefinition(
    name="reviews",
    json_schema={
        "bsonType": "object",
        "required": ["userId", "targetType", "targetId", "rating", "status"],
        "properties": {
            "userId": {"bsonType": "objectId"},
            "targetType": {"bsonType": "string", "enum": values(ReviewTargetType)},
            "targetId": {"bsonType": "objectId"},
            "reservationId": {"bsonType": "objectId"},
            "rating": {"bsonType": "int", "minimum": 1, "maximum": 5},
            "title": {"bsonType": "string"},
            "comment": {"bsonType": "string"},
            "status": {"bsonType": "string", "enum": values(ReviewStatus)},
            "images": {"bsonType": "array", "items": {"bsonType": "string"}},
            "helpfulVotes": {"bsonType": "int", "minimum": 0},
            **timestamp_properties(),
        },
    },
    indexes=[
        index(("targetType", ASCENDING), ("targetId", ASCENDING)),
        index(("userId", ASCENDING)),
        index(("status", ASCENDING)),
        index(("rating", ASCENDING)),
        index(("createdAt", DESCENDING)),
    ],
)
