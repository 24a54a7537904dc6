# =============================================================================
# core/services/member_service.py - Member Endpoints
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.members import Member, MemberStats
from core.services.base import ApiService, logs_failure, request_body
from lib.api_client import ApiRequestError
from lib.envelope import Page, unwrap_data, unwrap_flag, unwrap_page


class MemberService(ApiService):
    """CRUD over /members plus statistics, activity and email checks."""

    @logs_failure("create member")
    def create_member(self, data: Member | Mapping[str, Any]) -> Member:
        return unwrap_data(self.client.post("/members", request_body(data)), Member)

    @logs_failure("load members")
    def list_members(
        self,
        membership_status: str | None = None,
        role: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
    ) -> Page[Member]:
        query = {
            "membership_status": membership_status,
            "role": role,
            "search": search,
            "page": page,
            "limit": limit,
            "sort": sort,
        }
        return unwrap_page(self.client.get("/members", query), Member)

    @logs_failure("load member")
    def get_member(self, member_id: str) -> Member:
        return unwrap_data(self.client.get(f"/members/{member_id}"), Member)

    @logs_failure("load member by email")
    def get_member_by_email(self, email: str) -> Member:
        return unwrap_data(self.client.get(f"/members/email/{email}"), Member)

    @logs_failure("update member")
    def update_member(self, member_id: str, data: Member | Mapping[str, Any]) -> Member:
        return unwrap_data(self.client.put(f"/members/{member_id}", request_body(data)), Member)

    @logs_failure("delete member")
    def delete_member(self, member_id: str) -> None:
        self.client.remove(f"/members/{member_id}")
        self.logger.info(f"Deleted member: {member_id}")

    @logs_failure("load member statistics")
    def get_stats(self) -> MemberStats:
        return unwrap_data(self.client.get("/members/stats"), MemberStats)

    @logs_failure("update member activity")
    def touch_last_activity(self, member_id: str) -> Member:
        return unwrap_data(self.client.patch(f"/members/{member_id}/activity"), Member)

    def check_email_availability(self, email: str, exclude_id: str | None = None) -> bool:
        """
        True if no other member uses `email`.

        The backend answers 400 when the email is taken, so that status
        means "unavailable" rather than an error.
        """
        query = {"email": email, "excludeId": exclude_id}
        try:
            payload = self.client.get("/members/check-email", query)
        except ApiRequestError as e:
            if e.status_code == 400:
                return False
            self.logger.error(f"check email availability failed: {e.message}")
            raise
        return unwrap_flag(payload, "available")
