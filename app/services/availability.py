"""
Reservation overlap checks.

The reservations validator cannot express "no two bookings of one vehicle
overlap", so booking code is expected to call these helpers before
inserting or confirming a reservation. Periods are half-open:
[startDate, endDate). The query is served by the
(vehicleId, startDate, endDate) index.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pymongo.database import Database

from app.schemas.common import object_id
from app.schemas.enums import ReservationStatus

logger = logging.getLogger(__name__)

# Statuses that hold the vehicle for their period
BLOCKING_STATUSES = (
    ReservationStatus.PENDING,
    ReservationStatus.CONFIRMED,
    ReservationStatus.ACTIVE,
)

def overlap_filter(
    vehicle_id: Union[ObjectId, str],
    start: datetime,
    end: datetime,
    exclude_reservation_id: Optional[Union[ObjectId, str]] = None,
) -> Dict[str, Any]:
    """Build the query matching blocking reservations that intersect [start, end)."""
    if start >= end:
        raise ValueError("start must be before end")

    query: Dict[str, Any] = {
        "vehicleId": object_id(vehicle_id),
        "startDate": {"$lt": end},
        "endDate": {"$gt": start},
        "status": {"$in": [status.value for status in BLOCKING_STATUSES]},
    }
    if exclude_reservation_id is not None:
        query["_id"] = {"$ne": object_id(exclude_reservation_id)}
    return query

def find_conflicting_reservations(
    db: Database,
    vehicle_id: Union[ObjectId, str],
    start: datetime,
    end: datetime,
    exclude_reservation_id: Optional[Union[ObjectId, str]] = None,
) -> List[Dict[str, Any]]:
    query = overlap_filter(vehicle_id, start, end, exclude_reservation_id)
    return list(db["reservations"].find(query).sort("startDate", 1))

def is_vehicle_available(
    db: Database,
    vehicle_id: Union[ObjectId, str],
    start: datetime,
    end: datetime,
) -> bool:
    """True when no blocking reservation of the vehicle intersects [start, end)."""
    query = overlap_filter(vehicle_id, start, end)
    conflict = db["reservations"].find_one(query, projection={"_id": 1})
    if conflict is not None:
        logger.info(f"Vehicle {vehicle_id} already booked by reservation {conflict['_id']}")
    return conflict is None
