# =============================================================================
# app/routers/resources.py - Resource Endpoints
# =============================================================================
# Books, brochures, songs and FAQs.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import service
from core.models.resources import Resource, ResourceStats
from core.services.resource_service import ResourceService
from lib.envelope import Page

router = APIRouter()

ResourceServiceDep = Annotated[ResourceService, Depends(service(ResourceService))]


@router.get("", response_model=Page[Resource])
def list_resources(
    resources: ResourceServiceDep,
    category: str | None = None,
    published: bool | None = None,
    search: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return resources.list_resources(category, published, search, page, limit)


@router.get("/published", response_model=Page[Resource])
def list_published_resources(
    resources: ResourceServiceDep,
    category: str | None = None,
    search: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return resources.list_published(category, search, page, limit)


@router.get("/faqs", response_model=list[Resource])
def list_faqs(resources: ResourceServiceDep):
    return resources.list_faqs()


@router.get("/stats", response_model=ResourceStats)
def resource_stats(resources: ResourceServiceDep):
    return resources.get_stats()


@router.get("/{resource_id}")
def get_resource(resource_id: str, resources: ResourceServiceDep) -> dict:
    """Resource detail, with the file size formatted for display."""
    resource = resources.get_resource(resource_id)
    return {
        **resource.model_dump(by_alias=True, mode="json"),
        "display_size": resource.display_size,
    }


@router.put("/{resource_id}/download", response_model=Resource)
def count_download(resource_id: str, resources: ResourceServiceDep):
    return resources.increment_download_count(resource_id)


@router.post("", response_model=Resource, status_code=201)
def create_resource(resource: Resource, resources: ResourceServiceDep):
    return resources.create_resource(resource)


@router.put("/{resource_id}", response_model=Resource)
def update_resource(
    resource_id: str,
    resources: ResourceServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return resources.update_resource(resource_id, changes)


@router.delete("/{resource_id}", status_code=204)
def delete_resource(resource_id: str, resources: ResourceServiceDep) -> None:
    resources.delete_resource(resource_id)
