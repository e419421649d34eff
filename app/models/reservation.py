"""
Storage contract for the reservations collection.

startDate < endDate and non-overlapping bookings per vehicle are not
expressible here; see app.services.availability.
"""

from pymongo import ASCENDING

from app.db.base_model import CollectionDefinition, index, timestamp_properties
from app.schemas.enums import ReservationPaymentStatus, ReservationStatus, values

location_schema = {
    "bsonType": "object",
    "properties": {
        "address": {"bsonType": "string"},
        "coordinates": {"bsonType": "array", "items": {"bsonType": "double"}},
    },
}

reservations = CollectionDefinition(
    name="reservations",
    json_schema={
        "bsonType": "object",
        "required": ["userId", "vehicleId", "agencyId", "startDate", "endDate", "status", "totalAmount"],
        "properties": {
            "userId": {"bsonType": "objectId"},
            "vehicleId": {"bsonType": "objectId"},
            "agencyId": {"bsonType": "objectId"},
            "startDate": {"bsonType": "date"},
            "endDate": {"bsonType": "date"},
            "status": {"bsonType": "string", "enum": values(ReservationStatus)},
            "totalAmount": {"bsonType": "double", "minimum": 0},
            "pickupLocation": location_schema,
            "dropoffLocation": location_schema,
            "additionalDrivers": {"bsonType": "array"},
            "specialRequests": {"bsonType": "string"},
            "paymentStatus": {"bsonType": "string", "enum": values(ReservationPaymentStatus)},
            "contractId": {"bsonType": "objectId"},
            **timestamp_properties(),
        },
    },
    indexes=[
        index(("userId", ASCENDING)),
        index(("vehicleId", ASCENDING)),
        index(("agencyId", ASCENDING)),
        index(("status", ASCENDING)),
        index(("startDate", ASCENDING), ("endDate", ASCENDING)),
        index(("paymentStatus", ASCENDING)),
        # Availability / overlap checks
        index(("vehicleId", ASCENDING), ("startDate", ASCENDING), ("endDate", ASCENDING)),
    ],
)
