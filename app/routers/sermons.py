# =============================================================================
# app/routers/sermons.py - Sermon Endpoints
# =============================================================================

from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Query

from app.dependencies import MultipartDep, service
from core.models.sermons import Sermon, SermonSearch
from core.services.sermon_service import SermonService

router = APIRouter()

SermonServiceDep = Annotated[SermonService, Depends(service(SermonService))]
SermonId = Annotated[str, Path(description="Sermon id")]


@router.get("", response_model=list[Sermon])
def list_sermons(sermons: SermonServiceDep):
    return sermons.list_sermons()


@router.get("/search", response_model=list[Sermon])
def search_sermons(
    sermons: SermonServiceDep,
    query: str | None = None,
    pastor: str | None = None,
    series: str | None = None,
    tags: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
):
    """Search by text, pastor, series, tags and date range."""
    search = SermonSearch(
        query=query,
        pastor=pastor,
        series=series,
        tags=tags,
        start_date=start_date,
        end_date=end_date,
    )
    return sermons.search_sermons(search)


@router.get("/recent", response_model=list[Sermon])
def recent_sermons(
    sermons: SermonServiceDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
):
    return sermons.list_recent(limit)


@router.get("/series/{series}", response_model=list[Sermon])
def sermons_by_series(series: str, sermons: SermonServiceDep):
    return sermons.list_by_series(series)


@router.get("/pastor/{pastor_name}", response_model=list[Sermon])
def sermons_by_pastor(pastor_name: str, sermons: SermonServiceDep):
    return sermons.list_by_pastor(pastor_name)


@router.get("/{sermon_id}", response_model=Sermon)
def get_sermon(sermon_id: SermonId, sermons: SermonServiceDep):
    return sermons.get_sermon(sermon_id)


@router.post("", response_model=Sermon, status_code=201)
def create_sermon(sermon: Sermon, sermons: SermonServiceDep):
    return sermons.create_sermon(sermon)


@router.post("/form", response_model=Sermon, status_code=201)
def create_sermon_from_form(form: MultipartDep, sermons: SermonServiceDep):
    return sermons.create_sermon(form)


@router.put("/{sermon_id}", response_model=Sermon)
def update_sermon(
    sermon_id: SermonId,
    sermons: SermonServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return sermons.update_sermon(sermon_id, changes)


@router.delete("/{sermon_id}", status_code=204)
def delete_sermon(sermon_id: SermonId, sermons: SermonServiceDep) -> None:
    sermons.delete_sermon(sermon_id)
