# =============================================================================
# core/services/project_service.py - Fundraising Project Endpoints
# =============================================================================
# Public endpoints live under /projects/public, admin ones under
# /projects/admin. Lists come back as {data, pagination}; single records
# as {data}.
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.projects import Project, ProjectStats
from core.services.base import ApiService, logs_failure, request_body
from lib.envelope import Page, unwrap_data, unwrap_page


def _flag(value: bool | None) -> str | None:
    return None if value is None else str(value).lower()


class ProjectService(ApiService):

    @logs_failure("load published projects")
    def list_published(
        self,
        category: str | None = None,
        featured: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Project]:
        query = {"category": category, "featured": _flag(featured), "page": page, "limit": limit}
        return unwrap_page(self.client.get("/projects/public", query), Project)

    @logs_failure("load project")
    def get_project(self, project_id: str) -> Project:
        return unwrap_data(self.client.get(f"/projects/public/{project_id}"), Project)

    @logs_failure("load projects")
    def list_projects(
        self,
        category: str | None = None,
        published: bool | None = None,
        featured: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Project]:
        query = {
            "category": category,
            "published": _flag(published),
            "featured": _flag(featured),
            "page": page,
            "limit": limit,
        }
        return unwrap_page(self.client.get("/projects/admin", query), Project)

    @logs_failure("create project")
    def create_project(self, data: Project | Mapping[str, Any]) -> Project:
        return unwrap_data(self.client.post("/projects/admin", request_body(data)), Project)

    @logs_failure("update project")
    def update_project(self, project_id: str, data: Project | Mapping[str, Any]) -> Project:
        return unwrap_data(
            self.client.put(f"/projects/admin/{project_id}", request_body(data)), Project
        )

    @logs_failure("delete project")
    def delete_project(self, project_id: str) -> None:
        self.client.remove(f"/projects/admin/{project_id}")
        self.logger.info(f"Deleted project: {project_id}")

    @logs_failure("load project statistics")
    def get_stats(self) -> ProjectStats:
        return unwrap_data(self.client.get("/projects/admin/stats"), ProjectStats)
