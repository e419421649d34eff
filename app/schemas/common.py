from datetime import datetime
from typing import Any, Dict, List, Optional
from bson import ObjectId
from pydantic import BaseModel, Field

class DocumentBase(BaseModel):
    """Base schema for documents stored in MongoDB."""
    createdAt: datetime = Field(default_factory=datetime.utcnow, description="Creation timestamp")
    updatedAt: datetime = Field(default_factory=datetime.utcnow, description="Last update timestamp")

    model_config = {
        "arbitrary_types_allowed": True,
        "use_enum_values": True,
        "validate_default": True,
    }

    def to_document(self) -> Dict[str, Any]:
        """Dump to a store-ready dict, leaving out unset optional fields."""
        return self.model_dump(exclude_none=True)

class Coordinates(BaseModel):
    """Legacy coordinate pair; longitude first for 2dsphere indexing."""
    longitude: float = Field(..., ge=-180, le=180)
    latitude: float = Field(..., ge=-90, le=90)

class GeoLocation(BaseModel):
    """Location stored as [longitude, latitude] plus a readable address."""
    coordinates: Optional[List[float]] = Field(None, min_length=2, max_length=2, description="[longitude, latitude]")
    address: Optional[str] = None

def object_id(value: Any) -> ObjectId:
    """Coerce a string or ObjectId into an ObjectId."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise ValueError(f"Invalid ObjectId: {value!r}")
