# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for the Supabase-backed admin screens
# (member profiles, donations history, volunteers, contact messages).
# It implements the singleton pattern to reuse a single service client and
# exposes generic table helpers:
# - fetch_rows / fetch_row for list and detail screens
# - insert_row / update_row / delete_row for forms and delete buttons
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   donations = SupabaseClient.fetch_rows("donations", order_by="created_at")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Mapping
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for "no rows" on .single()
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase table operations.

    Implements singleton pattern - one service client instance is shared
    across the application. All methods are class methods for easy access
    without instantiation.

    Example:
        # Newest donations first
        donations = SupabaseClient.fetch_rows(
            "donations", order_by="created_at", desc=True
        )

        # One member profile, or None
        member = SupabaseClient.fetch_row("user_profiles", member_id)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses the service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side admin operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def create_anon_client(cls) -> Client:
        """
        Create a fresh client with the anon key.

        Used for password sign-in; each sign-in gets its own client so
        sessions never leak between users.
        """
        try:
            return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase auth client: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        columns: str = "*",
        filters: Mapping[str, Any] | None = None,
        search: tuple[list[str], str] | None = None,
        order_by: str | None = "created_at",
        desc: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch rows from a table.

        Args:
            table: Table name
            columns: PostgREST select expression (may embed relations)
            filters: Equality filters, {column: value}; None values are skipped
            search: (columns, term) for a case-insensitive OR match
            order_by: Column to sort by (None for no ordering)
            desc: Sort newest/highest first
            limit: Maximum number of rows

        Returns:
            List of row dicts (empty if none)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table(table).select(columns)

            for column, value in (filters or {}).items():
                if value is None:
                    continue
                query = query.eq(column, normalize_uuid(value))

            if search and search[1]:
                search_columns, term = search
                query = query.or_(
                    ",".join(f"{column}.ilike.%{term}%" for column in search_columns)
                )

            if order_by:
                query = query.order(order_by, desc=desc)
            if limit:
                query = query.limit(limit)

            response = query.execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch rows from {table}: {e}",
                code="FETCH_ROWS_FAILED",
                suggestion=f"Check that the {table} table exists and is accessible",
                details={"table": table}
            )

    @classmethod
    def fetch_row(
        cls,
        table: str,
        row_id: str | UUID,
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row by id.

        Returns:
            Row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq("id", row_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch row from {table}: {e}",
                code="FETCH_ROW_FAILED",
                suggestion="Check that the id exists",
                details={"table": table, "id": row_id_str}
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Insert one row.

        Returns:
            Inserted row with generated id and created_at

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        try:
            response = client.table(table).insert(dict(data)).execute()

            if response.data:
                logger.info(f"Inserted row into {table}: {response.data[0].get('id')}")
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table}
            )

    @classmethod
    def update_row(
        cls,
        table: str,
        row_id: str | UUID,
        data: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        """
        Update one row by id.

        Returns:
            Updated row, or None if no row matched

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .update(dict(data))
                .eq("id", row_id_str)
                .execute()
            )

            if response.data:
                logger.info(f"Updated {table} row: {row_id_str}")
                return response.data[0]
            return None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table} row: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "id": row_id_str}
            )

    @classmethod
    def delete_row(cls, table: str, row_id: str | UUID) -> bool:
        """
        Delete one row by id.

        Returns:
            True if a row was deleted, False if none matched

        Raises:
            SupabaseClientError: If delete fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = client.table(table).delete().eq("id", row_id_str).execute()
            deleted = bool(response.data)
            if deleted:
                logger.info(f"Deleted {table} row: {row_id_str}")
            return deleted

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete {table} row: {e}",
                code="DELETE_FAILED",
                details={"table": table, "id": row_id_str}
            )
