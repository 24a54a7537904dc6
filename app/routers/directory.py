# =============================================================================
# app/routers/directory.py - Member Directory Endpoints
# =============================================================================
# Read straight from Supabase tables (no REST backend involved).
# =============================================================================

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body

from app.exceptions import NotFoundError
from core.models.members import MembershipStatus
from core.services.directory_service import DirectoryService
from lib.utils import normalize_uuid, status_badge

router = APIRouter()


@router.get("/members")
def list_directory_members(
    search: str | None = None,
    status: MembershipStatus | None = None,
) -> dict:
    """
    List member profiles with header counts.

    Each profile carries the badge variant for its membership status.
    """
    members = DirectoryService.list_members(search=search, status=status)
    for member in members:
        member["badge"] = status_badge(member.get("membership_status"))

    return {
        "members": members,
        "stats": DirectoryService.summarize_members(members),
    }


@router.get("/members/{member_id}")
def get_directory_member(member_id: UUID) -> dict:
    """
    Member profile plus donations, prayer requests, registrations and roles.

    Raises:
        404: If no profile has this id
    """
    member_id = normalize_uuid(member_id)
    profile = DirectoryService.get_member_profile(member_id)
    if profile is None:
        raise NotFoundError("Member", member_id)

    return {
        "profile": profile,
        "activity": DirectoryService.get_member_activity(member_id),
    }


@router.post("/members", status_code=201)
def create_directory_member(data: Annotated[dict[str, Any], Body()]) -> dict:
    return DirectoryService.create_member_profile(data)


@router.put("/members/{member_id}")
def update_directory_member(
    member_id: UUID,
    data: Annotated[dict[str, Any], Body()],
) -> dict:
    member_id = normalize_uuid(member_id)
    profile = DirectoryService.update_member_profile(member_id, data)
    if profile is None:
        raise NotFoundError("Member", member_id)
    return profile


@router.get("/volunteers")
def list_volunteers() -> list[dict]:
    return DirectoryService.list_volunteers()


@router.get("/messages")
def list_contact_messages() -> list[dict]:
    return DirectoryService.list_contact_messages()


@router.delete("/messages/{message_id}", status_code=204)
def delete_contact_message(message_id: UUID) -> None:
    message_id = normalize_uuid(message_id)
    if not DirectoryService.delete_contact_message(message_id):
        raise NotFoundError("Message", message_id)
