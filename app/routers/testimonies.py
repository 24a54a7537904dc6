# =============================================================================
# app/routers/testimonies.py - Testimony Moderation Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import MultipartDep, service
from core.models.testimonies import LikeResult, Testimony, TestimonyStats, TestimonyStatusUpdate
from core.services.testimony_service import TestimonyService
from lib.envelope import Page

router = APIRouter()

TestimonyServiceDep = Annotated[TestimonyService, Depends(service(TestimonyService))]
PageNumber = Annotated[int, Query(ge=1)]
PageSize = Annotated[int, Query(ge=1, le=100)]


@router.get("", response_model=Page[Testimony])
def list_testimonies(
    testimonies: TestimonyServiceDep,
    status: str | None = None,
    category: str | None = None,
    page: PageNumber = 1,
    limit: PageSize = 20,
):
    """Moderation queue; filter by status to see pending submissions."""
    return testimonies.list_testimonies(status, category, page, limit)


@router.get("/approved", response_model=Page[Testimony])
def list_approved_testimonies(
    testimonies: TestimonyServiceDep,
    category: str | None = None,
    featured: bool | None = None,
    page: PageNumber = 1,
    limit: PageSize = 10,
):
    return testimonies.list_approved(category, featured, page, limit)


@router.get("/search", response_model=Page[Testimony])
def search_testimonies(
    testimonies: TestimonyServiceDep,
    q: Annotated[str, Query(min_length=1)],
    category: str | None = None,
    page: PageNumber = 1,
    limit: PageSize = 10,
):
    return testimonies.search(q, category, page, limit)


@router.get("/stats", response_model=TestimonyStats)
def testimony_stats(testimonies: TestimonyServiceDep):
    return testimonies.get_stats()


@router.get("/{testimony_id}", response_model=Testimony)
def get_testimony(testimony_id: str, testimonies: TestimonyServiceDep):
    return testimonies.get_testimony(testimony_id)


@router.post("", response_model=Testimony, status_code=201)
def create_testimony(testimonies: TestimonyServiceDep, data: Annotated[dict[str, Any], Body()]):
    return testimonies.create_testimony(data)


@router.post("/form", response_model=Testimony, status_code=201)
def create_testimony_from_form(form: MultipartDep, testimonies: TestimonyServiceDep):
    """Create a testimony with an attached photo."""
    return testimonies.create_testimony(form)


@router.post("/submit", status_code=201)
def submit_testimony(testimonies: TestimonyServiceDep, data: Annotated[dict[str, Any], Body()]):
    """Submit on behalf of a member; it enters the queue as pending."""
    return testimonies.submit_testimony(data)


@router.put("/{testimony_id}/status", response_model=Testimony)
def update_testimony_status(
    testimony_id: str,
    update: TestimonyStatusUpdate,
    testimonies: TestimonyServiceDep,
):
    return testimonies.update_status(
        testimony_id,
        update.status,
        scheduled_date=update.scheduled_date,
        is_featured=update.is_featured,
    )


@router.post("/{testimony_id}/like", response_model=LikeResult)
def like_testimony(testimony_id: str, testimonies: TestimonyServiceDep):
    return testimonies.toggle_like(testimony_id)


@router.delete("/{testimony_id}", status_code=204)
def delete_testimony(testimony_id: str, testimonies: TestimonyServiceDep) -> None:
    testimonies.delete_testimony(testimony_id)
