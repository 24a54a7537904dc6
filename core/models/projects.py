# =============================================================================
# core/models/projects.py - Fundraising Project Schemas
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .base import AdminRecord


class ProjectCategory(str, Enum):
    CONSTRUCTION = "construction"
    HUMANITARIAN = "humanitarian"
    EDUCATION = "education"
    HEALTH = "health"
    SPIRITUAL = "spiritual"
    OTHER = "other"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PAUSED = "paused"


class ProjectStep(BaseModel):
    name: str
    status: str = "pending"
    order: int = 0


class DonationExample(BaseModel):
    amount: float
    description: str


class Project(AdminRecord):
    """A fundraising project shown on the public site."""

    title: str
    description: str
    short_description: str | None = None
    category: ProjectCategory = ProjectCategory.OTHER
    image_url: str | None = None
    goal_amount: float = 0
    current_amount: float = 0
    progress: float = 0
    status: ProjectStatus = ProjectStatus.PLANNING
    steps: list[ProjectStep] = Field(default_factory=list)
    impact_points: list[str] = Field(default_factory=list)
    donation_examples: list[DonationExample] = Field(default_factory=list)
    is_featured: bool = False
    is_published: bool = False
    published_at: datetime | None = None
    start_date: datetime | None = None
    estimated_end_date: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    order: int = 0


class ProjectCategoryStats(BaseModel):
    category: str = Field(..., alias="_id")
    count: int = 0
    published: int = 0
    total_goal: float = Field(0, alias="totalGoal")
    total_current: float = Field(0, alias="totalCurrent")


class ProjectStats(BaseModel):
    by_category: list[ProjectCategoryStats] = Field(default_factory=list, alias="byCategory")
    total: int = 0
    total_published: int = Field(0, alias="totalPublished")
    total_goal: float = Field(0, alias="totalGoal")
    total_current: float = Field(0, alias="totalCurrent")
