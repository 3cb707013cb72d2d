"""Global enums — must match DB CHECK constraints exactly."""

from enum import Enum


class UserRole(str, Enum):
    FINDER = "finder"
    POSTER = "poster"


class JobStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class JobCategory(str, Enum):
    TUTOR = "tutor"
    RECEPTION = "reception"
    CATERING = "catering"
    MARKETING = "marketing"
    HOTEL_CARE = "hotel-care"
    CUSTOMER_SERVICE = "customer-service"
    ADMIN = "admin"
    EVENTS = "events"
    PHOTOGRAPHY = "photography"
    DELIVERY = "delivery"


# Job Browser sentinel: matches every category
ALL_CATEGORIES = "all"


class EngagementKind(str, Enum):
    """Discriminant of the Application | Negotiation union."""
    APPLICATION = "application"
    NEGOTIATION = "negotiation"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NegotiationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class TransactionType(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    WITHDRAWAL = "withdrawal"


class WithdrawalStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
