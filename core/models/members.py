# =============================================================================
# core/models/members.py - Member Schemas
# =============================================================================

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field

from .base import AdminRecord


class MembershipStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"


class MemberRole(str, Enum):
    ADMIN = "admin"
    PASTOR = "pastor"
    LEADER = "leader"
    MEMBER = "member"
    VOLUNTEER = "volunteer"


class EmergencyContact(BaseModel):
    name: str
    phone: str | None = None
    relationship: str | None = None


class Member(AdminRecord):
    """A church member profile."""

    email: str
    full_name: str
    phone: str | None = None
    address: str | None = None
    membership_status: MembershipStatus = MembershipStatus.PENDING
    role: MemberRole = MemberRole.MEMBER
    date_of_birth: date | None = None
    baptism_date: date | None = None
    join_date: date | None = None
    emergency_contact: EmergencyContact | None = None
    spiritual_gifts: list[str] = Field(default_factory=list)
    ministries: list[str] = Field(default_factory=list)
    notes: str | None = None
    avatar_url: str | None = None
    is_email_verified: bool = False
    last_activity: datetime | None = None


class StatusCount(BaseModel):
    status: str = Field(..., alias="_id")
    count: int = 0


class MemberStats(BaseModel):
    """Aggregates returned by GET /members/stats."""

    total: int = 0
    active: int = 0
    by_status: list[StatusCount] = Field(default_factory=list, alias="byStatus")
