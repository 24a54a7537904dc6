# =============================================================================
# app/routers/projects.py - Project Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import service
from core.models.projects import Project, ProjectStats
from core.services.project_service import ProjectService
from lib.envelope import Page

router = APIRouter()

ProjectServiceDep = Annotated[ProjectService, Depends(service(ProjectService))]


@router.get("", response_model=Page[Project])
def list_projects(
    projects: ProjectServiceDep,
    category: str | None = None,
    published: bool | None = None,
    featured: bool | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return projects.list_projects(category, published, featured, page, limit)


@router.get("/published", response_model=Page[Project])
def list_published_projects(
    projects: ProjectServiceDep,
    category: str | None = None,
    featured: bool | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    return projects.list_published(category, featured, page, limit)


@router.get("/stats", response_model=ProjectStats)
def project_stats(projects: ProjectServiceDep):
    return projects.get_stats()


@router.get("/{project_id}", response_model=Project)
def get_project(project_id: str, projects: ProjectServiceDep):
    return projects.get_project(project_id)


@router.post("", response_model=Project, status_code=201)
def create_project(project: Project, projects: ProjectServiceDep):
    return projects.create_project(project)


@router.put("/{project_id}", response_model=Project)
def update_project(
    project_id: str,
    projects: ProjectServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return projects.update_project(project_id, changes)


@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: str, projects: ProjectServiceDep) -> None:
    projects.delete_project(project_id)
