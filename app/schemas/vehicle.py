from typing import List, Optional
from bson import ObjectId
from pydantic import Field

from app.schemas.common import DocumentBase, GeoLocation
from app.schemas.enums import FuelType, Transmission, VehicleCategory, VehicleStatus

class VehicleCreate(DocumentBase):
    """Schema for a new vehicle document owned by an agency."""
    agencyId: ObjectId
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int = Field(..., ge=1990, le=2030)
    category: VehicleCategory
    pricePerDay: float = Field(..., ge=0, description="Daily rate")
    status: VehicleStatus = Field(VehicleStatus.AVAILABLE)
    licensePlate: Optional[str] = None
    vin: Optional[str] = None
    color: Optional[str] = None
    fuelType: Optional[FuelType] = None
    transmission: Optional[Transmission] = None
    seats: Optional[int] = Field(None, ge=1, le=20)
    mileage: Optional[int] = Field(None, ge=0)
    features: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    location: Optional[GeoLocation] = None
    rating: float = Field(0.0, ge=0, le=5)
    totalReviews: int = Field(0, ge=0)
