# =============================================================================
# core/services/prayer_service.py - Prayer Request Endpoints
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.prayers import PrayerRequest
from core.services.base import ApiService, logs_failure, request_body
from lib.envelope import Page, unwrap_data, unwrap_page

REQUESTS_PATH = "/prayers/prayer-requests"


class PrayerRequestService(ApiService):
    """CRUD over prayer requests plus the "I prayed" counter."""

    @logs_failure("load prayer requests")
    def list_requests(
        self,
        status: str | None = None,
        is_public: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[PrayerRequest]:
        query = {
            "status": status,
            "is_public": None if is_public is None else str(is_public).lower(),
            "page": page,
            "limit": limit,
        }
        return unwrap_page(self.client.get(REQUESTS_PATH, query), PrayerRequest)

    @logs_failure("load prayer request")
    def get_request(self, request_id: str) -> PrayerRequest:
        return unwrap_data(self.client.get(f"{REQUESTS_PATH}/{request_id}"), PrayerRequest)

    @logs_failure("create prayer request")
    def create_request(self, data: PrayerRequest | Mapping[str, Any]) -> PrayerRequest:
        return unwrap_data(self.client.post(REQUESTS_PATH, request_body(data)), PrayerRequest)

    @logs_failure("update prayer request")
    def update_request(
        self,
        request_id: str,
        data: PrayerRequest | Mapping[str, Any],
    ) -> PrayerRequest:
        return unwrap_data(
            self.client.put(f"{REQUESTS_PATH}/{request_id}", request_body(data)), PrayerRequest
        )

    @logs_failure("delete prayer request")
    def delete_request(self, request_id: str) -> None:
        self.client.remove(f"{REQUESTS_PATH}/{request_id}")
        self.logger.info(f"Deleted prayer request: {request_id}")

    @logs_failure("increment prayer count")
    def increment_prayer_count(self, request_id: str) -> PrayerRequest:
        return unwrap_data(self.client.patch(f"{REQUESTS_PATH}/{request_id}/pray"), PrayerRequest)

    @logs_failure("load public prayer requests")
    def list_public(
        self,
        status: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[PrayerRequest]:
        query = {"status": status, "page": page, "limit": limit}
        return unwrap_page(self.client.get("/prayer-requests/public", query), PrayerRequest)
