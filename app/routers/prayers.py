# =============================================================================
# app/routers/prayers.py - Prayer Request Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query

from app.dependencies import service
from core.models.prayers import PrayerRequest
from core.services.prayer_service import PrayerRequestService
from lib.envelope import Page

router = APIRouter()

PrayerServiceDep = Annotated[PrayerRequestService, Depends(service(PrayerRequestService))]
RequestId = Annotated[str, Path(description="Prayer request id")]


@router.get("", response_model=Page[PrayerRequest])
def list_prayer_requests(
    prayers: PrayerServiceDep,
    status: str | None = None,
    is_public: bool | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return prayers.list_requests(status, is_public, page, limit)


@router.get("/public", response_model=Page[PrayerRequest])
def list_public_prayer_requests(
    prayers: PrayerServiceDep,
    status: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return prayers.list_public(status, page, limit)


@router.get("/{request_id}", response_model=PrayerRequest)
def get_prayer_request(request_id: RequestId, prayers: PrayerServiceDep):
    return prayers.get_request(request_id)


@router.post("", response_model=PrayerRequest, status_code=201)
def create_prayer_request(prayer: PrayerRequest, prayers: PrayerServiceDep):
    return prayers.create_request(prayer)


@router.put("/{request_id}", response_model=PrayerRequest)
def update_prayer_request(
    request_id: RequestId,
    prayers: PrayerServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return prayers.update_request(request_id, changes)


@router.patch("/{request_id}/pray", response_model=PrayerRequest)
def pray_for_request(request_id: RequestId, prayers: PrayerServiceDep):
    """Increment the prayer counter."""
    return prayers.increment_prayer_count(request_id)


@router.delete("/{request_id}", status_code=204)
def delete_prayer_request(request_id: RequestId, prayers: PrayerServiceDep) -> None:
    prayers.delete_request(request_id)
