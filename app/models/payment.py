"""
Storage contract for the payments collection.
"""

from pymongo import ASCENDING

from app.db.base_model import CollectionDefinition, index, timestamp_properties
from app.schemas.enums import Currency, PaymentMethod, PaymentStatus, values

payments = CollectionDefinition(
    name="payments",
    json_schema={
        "bsonType": "object",
        "required": ["reservationId", "userId", "amount", "currency", "status", "paymentMethod"],
        "properties": {
            "reservationId": {"bsonType": "objectId"},
            "userId": {"bsonType": "objectId"},
            "amount": {"bsonType": "double", "minimum": 0},
            "currency": {"bsonType": "string", "enum": values(Currency)},
            "status": {"bsonType": "string", "enum": values(PaymentStatus)},
            "paymentMethod": {"bsonType": "string", "enum": values(PaymentMethod)},
            "transactionId": {"bsonType": "string"},
            "gatewayResponse": {"bsonType": "object"},
            "refundAmount": {"bsonType": "double", "minimum": 0},
            "refundReason": {"bsonType": "string"},
            **timestamp_properties(),
        },
    },
    indexes=[
        index(("reservationId", ASCENDING)),
        index(("userId", ASCENDING)),
        index(("status", ASCENDING)),
        index(("transactionId", ASCENDING)),
        index(("createdAt", ASCENDING)),
    ],
)
