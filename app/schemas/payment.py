from typing import Any, Dict, Optional
from bson import ObjectId
from pydantic import Field, model_validator

from app.schemas.common import DocumentBase
from app.schemas.enums import Currency, PaymentMethod, PaymentStatus

class PaymentCreate(DocumentBase):
    """Schema for a payment attached to a reservation."""
    reservationId: ObjectId
    userId: ObjectId
    amount: float = Field(..., ge=0)
    currency: Currency = Field(Currency.USD)
    status: PaymentStatus = Field(PaymentStatus.PENDING)
    paymentMethod: PaymentMethod
    transactionId: Optional[str] = None
    gatewayResponse: Optional[Dict[str, Any]] = None
    refundAmount: Optional[float] = Field(None, ge=0)
    refundReason: Optional[str] = None

    @model_validator(mode="after")
    def check_refund(self):
        if self.refundAmount is not None and self.refundAmount > self.amount:
            raise ValueError("refundAmount cannot exceed amount")
        return self
