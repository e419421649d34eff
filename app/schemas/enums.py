"""
Closed value sets used by the stored documents.

Each enum is the single source of the allowed values: the collection
validators list them as `enum` constraints and the Pydantic models use them
as field types.
"""

from enum import Enum
from typing import List, Type


class UserRole(str, Enum):
    CUSTOMER = "customer"
    AGENCY_ADMIN = "agency_admin"
    SUPER_ADMIN = "super_admin"


class AgencyStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    SUSPENDED = "suspended"
    REJECTED = "rejected"


class VehicleCategory(str, Enum):
    ECONOMY = "economy"
    COMPACT = "compact"
    MIDSIZE = "midsize"
    FULLSIZE = "fullsize"
    LUXURY = "luxury"
    SUV = "suv"
    VAN = "van"
    TRUCK = "truck"


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"
    MAINTENANCE = "maintenance"
    RETIRED = "retired"


class FuelType(str, Enum):
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


class Transmission(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class ReservationPaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
    FAILED = "failed"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"
    STRIPE = "stripe"
    CASH = "cash"


class ReviewTargetType(str, Enum):
    VEHICLE = "vehicle"
    AGENCY = "agency"


class ReviewStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TicketCategory(str, Enum):
    BOOKING = "booking"
    PAYMENT = "payment"
    VEHICLE = "vehicle"
    ACCOUNT = "account"
    TECHNICAL = "technical"
    OTHER = "other"


def values(enum_cls: Type[Enum]) -> List[str]:
    """Allowed string values of an enum, in declaration order."""
    return [member.value for member in enum_cls]
