from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union
from bson import ObjectId
from pydantic import BaseModel, Field

from app.schemas.common import DocumentBase
from app.schemas.enums import ReviewStatus

class VehicleTarget(BaseModel):
    """Review of a vehicle; targetId is a vehicles._id."""
    targetType: Literal["vehicle"] = "vehicle"
    targetId: ObjectId

    model_config = {"arbitrary_types_allowed": True}

    @property
    def collection(self) -> str:
        return "vehicles"

class AgencyTarget(BaseModel):
    """Review of an agency; targetId is an agencies._id."""
    targetType: Literal["agency"] = "agency"
    targetId: ObjectId

    model_config = {"arbitrary_types_allowed": True}

    @property
    def collection(self) -> str:
        return "agencies"

ReviewTarget = Annotated[Union[VehicleTarget, AgencyTarget], Field(discriminator="targetType")]

class ReviewCreate(DocumentBase):
    """
    Schema for a review of either a vehicle or an agency.

    The target is kept as a tagged union in Python and flattened into
    targetType/targetId fields in the stored document.
    """
    userId: ObjectId
    target: ReviewTarget
    rating: int = Field(..., ge=1, le=5, strict=True)
    reservationId: Optional[ObjectId] = None
    title: Optional[str] = None
    comment: Optional[str] = None
    status: ReviewStatus = Field(ReviewStatus.PENDING)
    images: List[str] = Field(default_factory=list)
    helpfulVotes: int = Field(0, ge=0)

    @property
    def target_collection(self) -> str:
        return self.target.collection

    def to_document(self) -> Dict[str, Any]:
        document = super().to_document()
        target = document.pop("target")
        document["targetType"] = target["targetType"]
        document["targetId"] = target["targetId"]
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "ReviewCreate":
        data = {k: v for k, v in document.items() if k not in ("_id", "targetType", "targetId")}
        data["target"] = {"targetType": document["targetType"], "targetId": document["targetId"]}
        return cls(**data)
