# =============================================================================
# app/routers/donations.py - Donation Endpoints
# =============================================================================

from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query

from app.dependencies import service
from core.models.donations import Donation, DonationStats
from core.services.donation_service import DonationService
from lib.envelope import Page

router = APIRouter()

DonationServiceDep = Annotated[DonationService, Depends(service(DonationService))]
DonationId = Annotated[str, Path(description="Donation id")]


@router.get("", response_model=Page[Donation])
def list_donations(
    donations: DonationServiceDep,
    payment_status: str | None = None,
    donation_type: str | None = None,
    payment_method: str | None = None,
    is_recurring: bool | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return donations.list_donations(
        payment_status=payment_status,
        donation_type=donation_type,
        payment_method=payment_method,
        is_recurring=is_recurring,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )


@router.get("/stats", response_model=DonationStats)
def donation_stats(
    donations: DonationServiceDep,
    start_date: date | None = None,
    end_date: date | None = None,
):
    return donations.get_stats(start_date, end_date)


@router.get("/user/{user_id}", response_model=Page[Donation])
def user_donations(
    user_id: str,
    donations: DonationServiceDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return donations.list_user_donations(user_id, page, limit)


@router.get("/{donation_id}", response_model=Donation)
def get_donation(donation_id: DonationId, donations: DonationServiceDep):
    return donations.get_donation(donation_id)


@router.post("", response_model=Donation, status_code=201)
def create_donation(donation: Donation, donations: DonationServiceDep):
    return donations.create_donation(donation)


@router.put("/{donation_id}", response_model=Donation)
def update_donation(
    donation_id: DonationId,
    donations: DonationServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return donations.update_donation(donation_id, changes)


@router.delete("/{donation_id}", status_code=204)
def delete_donation(donation_id: DonationId, donations: DonationServiceDep) -> None:
    donations.delete_donation(donation_id)
