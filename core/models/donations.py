# =============================================================================
# core/models/donations.py - Donation Schemas
# =============================================================================

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from .base import AdminRecord


class DonationType(str, Enum):
    TITHE = "tithe"
    OFFERING = "offering"
    MISSION = "mission"
    BUILDING = "building"
    OTHER = "other"


class PaymentMethod(str, Enum):
    CARD = "card"
    BANK = "bank"
    CASH = "cash"
    CHECK = "check"
    MOBILE = "mobile"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class RecurrenceFrequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class Donation(AdminRecord):
    """
    A single gift. Anonymous donations keep the amount but hide the donor
    on every screen.
    """

    donor_name: str | None = None
    donor_email: str | None = None
    donor_id: str | None = None
    amount: float = Field(..., gt=0)
    currency: str = "EUR"
    donation_type: DonationType = DonationType.OFFERING
    payment_method: PaymentMethod = PaymentMethod.CASH
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_id: str | None = None
    notes: str | None = None
    is_recurring: bool = False
    recurrence_frequency: RecurrenceFrequency | None = None
    next_recurrence_date: date | None = None
    is_anonymous: bool = False

    @property
    def display_donor(self) -> str:
        if self.is_anonymous or not self.donor_name:
            return "Anonymous"
        return self.donor_name


class AmountByType(BaseModel):
    type: str = Field(..., alias="_id")
    total_amount: float = Field(0, alias="totalAmount")
    count: int = 0


class DonationStats(BaseModel):
    """Aggregates returned by GET /donations/stats."""

    total_amount: float = Field(0, alias="totalAmount")
    total_donations: int = Field(0, alias="totalDonations")
    average_amount: float = Field(0, alias="averageAmount")
    max_amount: float = Field(0, alias="maxAmount")
    min_amount: float = Field(0, alias="minAmount")
    by_type: list[AmountByType] = Field(default_factory=list, alias="byType")
