# =============================================================================
# app/routers/members.py - Member Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query

from app.dependencies import service
from core.models.members import Member, MemberStats
from core.services.member_service import MemberService
from lib.envelope import Page

router = APIRouter()

MemberServiceDep = Annotated[MemberService, Depends(service(MemberService))]
MemberId = Annotated[str, Path(description="Member id")]


@router.get("", response_model=Page[Member])
def list_members(
    members: MemberServiceDep,
    membership_status: str | None = None,
    role: str | None = None,
    search: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    sort: str | None = None,
):
    return members.list_members(membership_status, role, search, page, limit, sort)


@router.get("/stats", response_model=MemberStats)
def member_stats(members: MemberServiceDep):
    return members.get_stats()


@router.get("/check-email")
def check_email(
    members: MemberServiceDep,
    email: str,
    exclude_id: Annotated[str | None, Query(alias="excludeId")] = None,
) -> dict:
    return {"email": email, "available": members.check_email_availability(email, exclude_id)}


@router.get("/email/{email}", response_model=Member)
def get_member_by_email(email: str, members: MemberServiceDep):
    return members.get_member_by_email(email)


@router.get("/{member_id}", response_model=Member)
def get_member(member_id: MemberId, members: MemberServiceDep):
    return members.get_member(member_id)


@router.post("", response_model=Member, status_code=201)
def create_member(member: Member, members: MemberServiceDep):
    return members.create_member(member)


@router.put("/{member_id}", response_model=Member)
def update_member(
    member_id: MemberId,
    members: MemberServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return members.update_member(member_id, changes)


@router.patch("/{member_id}/activity", response_model=Member)
def touch_member_activity(member_id: MemberId, members: MemberServiceDep):
    return members.touch_last_activity(member_id)


@router.delete("/{member_id}", status_code=204)
def delete_member(member_id: MemberId, members: MemberServiceDep) -> None:
    members.delete_member(member_id)
