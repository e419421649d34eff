from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from app.db.base_model import EMAIL_PATTERN
from app.schemas.common import DocumentBase
from app.schemas.enums import UserRole

class DrivingLicense(BaseModel):
    number: Optional[str] = None
    expiryDate: Optional[datetime] = None
    country: Optional[str] = None

class UserCreate(DocumentBase):
    """Schema for a new user document. `password` holds the hash, never the plain value."""
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Login email, unique")
    password: str = Field(..., min_length=6, description="Hashed password")
    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)
    role: UserRole = Field(UserRole.CUSTOMER)
    phoneNumber: Optional[str] = None
    dateOfBirth: Optional[datetime] = None
    drivingLicense: Optional[DrivingLicense] = None
    isActive: bool = True
    emailVerified: bool = False
