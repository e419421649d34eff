from typing import Optional
from bson import ObjectId
from pydantic import BaseModel, Field

from app.db.base_model import EMAIL_PATTERN
from app.schemas.common import Coordinates, DocumentBase
from app.schemas.enums import AgencyStatus

class Address(BaseModel):
    street: str
    city: str
    country: str
    state: Optional[str] = None
    zipCode: Optional[str] = None
    coordinates: Optional[Coordinates] = None

class AgencyCreate(DocumentBase):
    """Schema for a new agency document. ownerId must reference an existing user."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    address: Address
    ownerId: ObjectId
    status: AgencyStatus = Field(AgencyStatus.PENDING)
    phoneNumber: Optional[str] = None
    businessLicense: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    rating: float = Field(0.0, ge=0, le=5)
    totalReviews: int = Field(0, ge=0)
