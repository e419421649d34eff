from datetime import datetime
from typing import List, Optional
from bson import ObjectId
from pydantic import BaseModel, Field

from app.schemas.common import DocumentBase
from app.schemas.enums import TicketCategory, TicketPriority, TicketStatus

class TicketMessage(BaseModel):
    """One entry of a ticket conversation, in posting order."""
    fromUserId: ObjectId
    message: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    attachments: List[str] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}

class SupportTicketCreate(DocumentBase):
    """Schema for a new support ticket."""
    userId: ObjectId
    subject: str = Field(..., min_length=1)
    description: Optional[str] = None
    status: TicketStatus = Field(TicketStatus.OPEN)
    priority: TicketPriority = Field(TicketPriority.MEDIUM)
    category: Optional[TicketCategory] = None
    assignedTo: Optional[ObjectId] = None
    reservationId: Optional[ObjectId] = None
    messages: List[TicketMessage] = Field(default_factory=list)

    def add_message(self, from_user_id: ObjectId, message: str) -> TicketMessage:
        entry = TicketMessage(fromUserId=from_user_id, message=message)
        self.messages.append(entry)
        self.updatedAt = entry.timestamp
        return entry
