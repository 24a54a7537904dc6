# =============================================================================
# core/services/sermon_service.py - Sermon Endpoints
# =============================================================================
# Response shapes differ per endpoint:
# - GET /sermons/sermons/{id} wraps the sermon in {success, data}
# - every other endpoint returns the bare sermon or array
# Tags are sent as a "a, b" string on writes.
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.sermons import Sermon, SermonSearch
from core.services.base import ApiService, logs_failure, request_body
from lib.api_client import MultipartPayload
from lib.envelope import parse_model, parse_models, unwrap_data
from lib.utils import join_tags


def _sermon_body(data: Sermon | Mapping[str, Any] | MultipartPayload) -> Any:
    body = request_body(data)
    if isinstance(body, dict) and "tags" in body:
        body["tags"] = join_tags(body["tags"])
    return body


class SermonService(ApiService):
    """CRUD and search over /sermons."""

    @logs_failure("load sermons")
    def list_sermons(self) -> list[Sermon]:
        return parse_models(self.client.get("/sermons/sermons"), Sermon)

    @logs_failure("load sermon")
    def get_sermon(self, sermon_id: str) -> Sermon:
        return unwrap_data(self.client.get(f"/sermons/sermons/{sermon_id}"), Sermon)

    @logs_failure("create sermon")
    def create_sermon(self, data: Sermon | Mapping[str, Any] | MultipartPayload) -> Sermon:
        return parse_model(self.client.post("/sermons/sermons", _sermon_body(data)), Sermon)

    @logs_failure("update sermon")
    def update_sermon(
        self,
        sermon_id: str,
        data: Sermon | Mapping[str, Any] | MultipartPayload,
    ) -> Sermon:
        return parse_model(
            self.client.put(f"/sermons/sermons/{sermon_id}", _sermon_body(data)), Sermon
        )

    @logs_failure("delete sermon")
    def delete_sermon(self, sermon_id: str) -> None:
        self.client.remove(f"/sermons/sermons/{sermon_id}")
        self.logger.info(f"Deleted sermon: {sermon_id}")

    @logs_failure("search sermons")
    def search_sermons(self, search: SermonSearch | None = None, **filters: Any) -> list[Sermon]:
        """
        Search sermons.

        Accepts a SermonSearch or the same fields as keyword arguments:
            service.search_sermons(pastor="John", start_date=date(2024, 1, 1))
        """
        search = search or SermonSearch(**filters)
        return parse_models(self.client.get("/sermons/search", search.to_query()), Sermon)

    @logs_failure("load sermons by series")
    def list_by_series(self, series: str) -> list[Sermon]:
        return parse_models(self.client.get(f"/sermons/series/{series}"), Sermon)

    @logs_failure("load sermons by pastor")
    def list_by_pastor(self, pastor_name: str) -> list[Sermon]:
        return parse_models(self.client.get(f"/sermons/pastor/{pastor_name}"), Sermon)

    @logs_failure("load recent sermons")
    def list_recent(self, limit: int = 10) -> list[Sermon]:
        return parse_models(self.client.get("/sermons/recent", {"limit": limit}), Sermon)
