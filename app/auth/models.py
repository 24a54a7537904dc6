# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Email/password credentials posted to /auth/login."""
    email: str = Field(..., min_length=3, examples=["pastor@church.org"])
    password: str = Field(..., min_length=1)


class AuthUser(BaseModel):
    """
    The signed-in admin, as reported by Supabase Auth.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None


class LoginResponse(BaseModel):
    """Returned after a successful sign-in; the token itself goes in a cookie."""
    user: AuthUser
    expires_at: Optional[datetime] = None
    message: str = "Signed in"
