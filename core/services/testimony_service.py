# =============================================================================
# core/services/testimony_service.py - Testimony Endpoints
# =============================================================================
# Testimonies are submitted publicly, moderated by admins, then shown on
# the public site. Admin detail responses use {data}; creation, status
# updates and statistics return the bare object.
# =============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterator, Mapping

from core.models.testimonies import (
    LikeResult,
    Testimony,
    TestimonyStats,
    TestimonyStatus,
    TestimonyStatusUpdate,
)
from core.services.base import ApiService, logs_failure, request_body
from lib.api_client import MultipartPayload
from lib.envelope import Page, parse_model, unwrap_data, unwrap_page


def _flag(value: bool | None) -> str | None:
    return None if value is None else str(value).lower()


class TestimonyService(ApiService):
    """Submission, moderation and public listing of testimonies."""

    __test__ = False  # not a pytest test class

    # -------------------------------------------------------------------------
    # Public
    # -------------------------------------------------------------------------

    @logs_failure("submit testimony")
    def submit_testimony(self, data: Mapping[str, Any] | MultipartPayload) -> dict[str, Any]:
        """Submit a testimony for moderation; returns {success, message, data}."""
        return self.client.post("/testimonies/submit", request_body(data))

    @logs_failure("load testimonies")
    def list_approved(
        self,
        category: str | None = None,
        featured: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Testimony]:
        query = {"category": category, "featured": _flag(featured), "page": page, "limit": limit}
        return unwrap_page(self.client.get("/testimonies/public", query), Testimony)

    def iter_approved(
        self,
        category: str | None = None,
        featured: bool | None = None,
        limit: int = 10,
    ) -> Iterator[Testimony]:
        """
        Yield approved testimonies page by page until the last page.

        Mirrors the "load more" button: the next page is only requested
        once the current one has been consumed.
        """
        page_number = 1
        while True:
            page = self.list_approved(category, featured, page=page_number, limit=limit)
            yield from page.data
            if not page.pagination.has_more:
                return
            page_number = page.pagination.page + 1

    @logs_failure("like testimony")
    def toggle_like(self, testimony_id: str) -> LikeResult:
        return parse_model(self.client.post(f"/testimonies/{testimony_id}/like"), LikeResult)

    @logs_failure("search testimonies")
    def search(
        self,
        q: str,
        category: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Testimony]:
        query = {"q": q, "category": category, "page": page, "limit": limit}
        return unwrap_page(self.client.get("/testimonies/search", query), Testimony)

    # -------------------------------------------------------------------------
    # Admin
    # -------------------------------------------------------------------------

    @logs_failure("load testimony")
    def get_testimony(self, testimony_id: str) -> Testimony:
        return unwrap_data(self.client.get(f"/testimonies/admin/{testimony_id}"), Testimony)

    @logs_failure("create testimony")
    def create_testimony(self, data: Testimony | Mapping[str, Any] | MultipartPayload) -> Testimony:
        return parse_model(
            self.client.post("/testimonies/admin/create", request_body(data)), Testimony
        )

    @logs_failure("update testimony status")
    def update_status(
        self,
        testimony_id: str,
        status: TestimonyStatus | str,
        scheduled_date: datetime | None = None,
        is_featured: bool | None = None,
    ) -> Testimony:
        update = TestimonyStatusUpdate(
            status=status, scheduled_date=scheduled_date, is_featured=is_featured
        )
        payload = self.client.put(f"/testimonies/admin/{testimony_id}/status", request_body(update))
        self.logger.info(f"Testimony {testimony_id} -> {update.status.value}")
        return parse_model(payload, Testimony)

    @logs_failure("delete testimony")
    def delete_testimony(self, testimony_id: str) -> None:
        self.client.remove(f"/testimonies/admin/{testimony_id}")
        self.logger.info(f"Deleted testimony: {testimony_id}")

    @logs_failure("load testimony statistics")
    def get_stats(self) -> TestimonyStats:
        return parse_model(self.client.get("/testimonies/admin/stats"), TestimonyStats)

    @logs_failure("load testimonies")
    def list_testimonies(
        self,
        status: str | None = None,
        category: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Testimony]:
        query = {"status": status, "category": category, "page": page, "limit": limit}
        return unwrap_page(self.client.get("/testimonies/admin", query), Testimony)
