"""
Storage contract for the supportTickets collection.
"""

from pymongo import ASCENDING, DESCENDING

from app.db.base_model import CollectionDefinition, index, timestamp_properties
from app.schemas.enums import TicketCategory, TicketPriority, TicketStatus, values

support_tickets = CollectionDefinition(
    name="supportTickets",
    json_schema={
        "bsonType": "object",
        "required": ["userId", "subject", "status", "priority"],
        "properties": {
            "userId": {"bsonType": "objectId"},
            "subject": {"bsonType": "string", "minLength": 1},
            "description": {"bsonType": "string"},
            "status": {"bsonType": "string", "enum": values(TicketStatus)},
            "priority": {"bsonType": "string", "enum": values(TicketPriority)},
            "category": {"bsonType": "string", "enum": values(TicketCategory)},
            "assignedTo": {"bsonType": "objectId"},
            "reservationId": {"bsonType": "objectId"},
            "messages": {
                "bsonType": "array",
                "items": {
                    "bsonType": "object",
                    "properties": {
                        "fromUserId": {"bsonType": "objectId"},
                        "message": {"bsonType": "string"},
                        "timestamp": {"bsonType": "date"},
                        "attachments": {"bsonType": "array"},
                    },
                },
            },
            **timestamp_properties(),
        },
    },
    indexes=[
        index(("userId", ASCENDING)),
        index(("status", ASCENDING)),
        index(("priority", ASCENDING)),
        index(("assignedTo", ASCENDING)),
        index(("category", ASCENDING)),
        index(("createdAt", DESCENDING)),
    ],
)
