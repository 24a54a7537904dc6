# =============================================================================
# core/services/donation_service.py - Donation Endpoints
# =============================================================================

from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from core.models.donations import Donation, DonationStats
from core.services.base import ApiService, logs_failure, request_body
from lib.envelope import Page, unwrap_data, unwrap_page


def _iso(value: date | str | None) -> str | None:
    return value.isoformat() if isinstance(value, date) else value


class DonationService(ApiService):
    """CRUD over /donations plus statistics and per-donor history."""

    @logs_failure("create donation")
    def create_donation(self, data: Donation | Mapping[str, Any]) -> Donation:
        return unwrap_data(self.client.post("/donations", request_body(data)), Donation)

    @logs_failure("load donations")
    def list_donations(
        self,
        payment_status: str | None = None,
        donation_type: str | None = None,
        payment_method: str | None = None,
        is_recurring: bool | None = None,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Donation]:
        query = {
            "payment_status": payment_status,
            "donation_type": donation_type,
            "payment_method": payment_method,
            "is_recurring": None if is_recurring is None else str(is_recurring).lower(),
            "start_date": _iso(start_date),
            "end_date": _iso(end_date),
            "page": page,
            "limit": limit,
        }
        return unwrap_page(self.client.get("/donations", query), Donation)

    @logs_failure("load donation")
    def get_donation(self, donation_id: str) -> Donation:
        return unwrap_data(self.client.get(f"/donations/{donation_id}"), Donation)

    @logs_failure("update donation")
    def update_donation(self, donation_id: str, data: Donation | Mapping[str, Any]) -> Donation:
        return unwrap_data(
            self.client.put(f"/donations/{donation_id}", request_body(data)), Donation
        )

    @logs_failure("delete donation")
    def delete_donation(self, donation_id: str) -> None:
        self.client.remove(f"/donations/{donation_id}")
        self.logger.info(f"Deleted donation: {donation_id}")

    @logs_failure("load donation statistics")
    def get_stats(
        self,
        start_date: date | str | None = None,
        end_date: date | str | None = None,
    ) -> DonationStats:
        query = {"start_date": _iso(start_date), "end_date": _iso(end_date)}
        return unwrap_data(self.client.get("/donations/stats", query), DonationStats)

    @logs_failure("load donor history")
    def list_user_donations(
        self,
        user_id: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> Page[Donation]:
        query = {"page": page, "limit": limit}
        return unwrap_page(self.client.get(f"/donations/user/{user_id}", query), Donation)
