# =============================================================================
# core/services/event_service.py - Event Endpoints
# =============================================================================
# The events API predates the envelope convention: every endpoint returns
# the bare event (or array of events).
# =============================================================================

from __future__ import annotations

from typing import Any, Mapping

from core.models.events import Event
from core.services.base import ApiService, logs_failure, request_body
from lib.api_client import MultipartPayload
from lib.envelope import parse_model, parse_models


class EventService(ApiService):
    """CRUD over /events. Create and update accept multipart for images."""

    @logs_failure("load events")
    def list_events(self) -> list[Event]:
        return parse_models(self.client.get("/events/get"), Event)

    @logs_failure("load event")
    def get_event(self, event_id: str) -> Event:
        return parse_model(self.client.get(f"/events/getone/{event_id}"), Event)

    @logs_failure("create event")
    def create_event(self, data: Event | Mapping[str, Any] | MultipartPayload) -> Event:
        event = parse_model(self.client.post("/events/create", request_body(data)), Event)
        self.logger.info(f"Created event: {event.id}")
        return event

    @logs_failure("update event")
    def update_event(
        self,
        event_id: str,
        data: Event | Mapping[str, Any] | MultipartPayload,
    ) -> Event:
        return parse_model(self.client.put(f"/events/update/{event_id}", request_body(data)), Event)

    @logs_failure("delete event")
    def delete_event(self, event_id: str) -> None:
        self.client.remove(f"/events/delete/{event_id}")
        self.logger.info(f"Deleted event: {event_id}")
