# =============================================================================
# core/services/directory_service.py - Supabase-backed Admin Screens
# =============================================================================
# Member directory, volunteers and contact messages read straight from
# Supabase tables rather than the REST backend.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from core.models.members import MembershipStatus
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

PROFILES_TABLE = "user_profiles"


class DirectoryService:
    """
    Service for the Supabase-backed directory screens.

    Provides a clean interface between API routes and database.
    """

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    @staticmethod
    def list_members(
        search: str | None = None,
        status: MembershipStatus | str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List member profiles, newest first.

        Args:
            search: Case-insensitive match on full name or email
            status: Optional membership_status filter
        """
        if isinstance(status, MembershipStatus):
            status = status.value

        return SupabaseClient.fetch_rows(
            PROFILES_TABLE,
            filters={"membership_status": status},
            search=(["full_name", "email"], search) if search else None,
        )

    @staticmethod
    def summarize_members(members: list[dict[str, Any]]) -> dict[str, int]:
        """Count members per status for the directory header cards."""
        summary = {"total": len(members)}
        for status in ("active", "inactive", "pending"):
            summary[status] = sum(1 for m in members if m.get("membership_status") == status)
        return summary

    @staticmethod
    def get_member_profile(member_id: str | UUID) -> dict[str, Any] | None:
        return SupabaseClient.fetch_row(PROFILES_TABLE, member_id)

    @staticmethod
    def create_member_profile(data: dict[str, Any]) -> dict[str, Any]:
        profile = SupabaseClient.insert_row(PROFILES_TABLE, data)
        logger.info(f"Created member profile: {profile.get('id')}")
        return profile

    @staticmethod
    def update_member_profile(
        member_id: str | UUID,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        return SupabaseClient.update_row(PROFILES_TABLE, member_id, data)

    @staticmethod
    def get_member_activity(member_id: str | UUID) -> dict[str, Any]:
        """
        Gather everything the member detail screen shows.

        Returns:
            Dict with donations, prayer_requests, event_registrations,
            volunteer_roles and total_donations (sum of donation amounts)
        """
        donations = SupabaseClient.fetch_rows(
            "donations", filters={"donor_id": member_id}, order_by="donation_date"
        )
        prayers = SupabaseClient.fetch_rows(
            "prayer_requests", filters={"requester_id": member_id}
        )
        registrations = SupabaseClient.fetch_rows(
            "event_registrations", columns="*, events(*)", filters={"user_id": member_id}
        )
        volunteer_roles = SupabaseClient.fetch_rows(
            "volunteers", filters={"user_id": member_id}, order_by=None
        )

        total = sum(float(d.get("amount") or 0) for d in donations)

        return {
            "donations": donations,
            "prayer_requests": prayers,
            "event_registrations": registrations,
            "volunteer_roles": volunteer_roles,
            "total_donations": round(total, 2),
        }

    # -------------------------------------------------------------------------
    # Volunteers & Messages
    # -------------------------------------------------------------------------

    @staticmethod
    def list_volunteers() -> list[dict[str, Any]]:
        return SupabaseClient.fetch_rows(
            "volunteers", columns="*, profiles(first_name, last_name, email, phone)"
        )

    @staticmethod
    def list_contact_messages() -> list[dict[str, Any]]:
        return SupabaseClient.fetch_rows("contact_messages")

    @staticmethod
    def delete_contact_message(message_id: str | UUID) -> bool:
        """Delete a handled message; False if it was already gone."""
        return SupabaseClient.delete_row("contact_messages", message_id)
