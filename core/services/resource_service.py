# =============================================================================
# core/services/resource_service.py - Downloadable Resource Endpoints
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.resources import Resource, ResourceStats
from core.services.base import ApiService, logs_failure, request_body
from lib.envelope import Page, unwrap_data, unwrap_list, unwrap_page


class ResourceService(ApiService):
    """Public catalogue and admin CRUD for books, brochures, songs and FAQs."""

    @logs_failure("load published resources")
    def list_published(
        self,
        category: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Resource]:
        query = {"category": category, "search": search, "page": page, "limit": limit}
        return unwrap_page(self.client.get("/resources/public", query), Resource)

    @logs_failure("load FAQs")
    def list_faqs(self) -> list[Resource]:
        return unwrap_list(self.client.get("/resources/public/faqs"), Resource)

    @logs_failure("load resource")
    def get_resource(self, resource_id: str) -> Resource:
        return unwrap_data(self.client.get(f"/resources/public/{resource_id}"), Resource)

    @logs_failure("increment download count")
    def increment_download_count(self, resource_id: str) -> Resource:
        return unwrap_data(
            self.client.put(f"/resources/public/{resource_id}/download"), Resource
        )

    @logs_failure("load resources")
    def list_resources(
        self,
        category: str | None = None,
        published: bool | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Resource]:
        query = {
            "category": category,
            "published": None if published is None else str(published).lower(),
            "search": search,
            "page": page,
            "limit": limit,
        }
        return unwrap_page(self.client.get("/resources/admin", query), Resource)

    @logs_failure("create resource")
    def create_resource(self, data: Resource | Mapping[str, Any]) -> Resource:
        return unwrap_data(self.client.post("/resources/admin", request_body(data)), Resource)

    @logs_failure("update resource")
    def update_resource(self, resource_id: str, data: Resource | Mapping[str, Any]) -> Resource:
        return unwrap_data(
            self.client.put(f"/resources/admin/{resource_id}", request_body(data)), Resource
        )

    @logs_failure("delete resource")
    def delete_resource(self, resource_id: str) -> None:
        self.client.remove(f"/resources/admin/{resource_id}")
        self.logger.info(f"Deleted resource: {resource_id}")

    @logs_failure("load resource statistics")
    def get_stats(self) -> ResourceStats:
        return unwrap_data(self.client.get("/resources/admin/stats"), ResourceStats)
