from datetime import datetime
from typing import List, Optional
from bson import ObjectId
from pydantic import Field, model_validator

from app.schemas.common import DocumentBase, GeoLocation
from app.schemas.enums import ReservationPaymentStatus, ReservationStatus

class ReservationCreate(DocumentBase):
    """
    Schema for a new reservation document.

    The booked period is the half-open interval [startDate, endDate).
    """
    userId: ObjectId
    vehicleId: ObjectId
    agencyId: ObjectId
    startDate: datetime
    endDate: datetime
    status: ReservationStatus = Field(ReservationStatus.PENDING)
    totalAmount: float = Field(..., ge=0)
    pickupLocation: Optional[GeoLocation] = None
    dropoffLocation: Optional[GeoLocation] = None
    additionalDrivers: List[dict] = Field(default_factory=list)
    specialRequests: Optional[str] = None
    paymentStatus: ReservationPaymentStatus = Field(ReservationPaymentStatus.PENDING)
    contractId: Optional[ObjectId] = None

    @model_validator(mode="after")
    def check_period(self):
        if self.startDate >= self.endDate:
            raise ValueError("startDate must be before endDate")
        return self
