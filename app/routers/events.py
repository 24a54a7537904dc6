# =============================================================================
# app/routers/events.py - Event Endpoints
# =============================================================================
# Admin CRUD over church events. Create and update also accept a multipart
# form so cover images travel with the event fields.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path

from app.dependencies import MultipartDep, service
from core.models.events import Event
from core.services.event_service import EventService

router = APIRouter()

EventServiceDep = Annotated[EventService, Depends(service(EventService))]
EventId = Annotated[str, Path(description="Event id")]


@router.get("", response_model=list[Event])
def list_events(events: EventServiceDep):
    """List every event."""
    return events.list_events()


@router.get("/{event_id}", response_model=Event)
def get_event(event_id: EventId, events: EventServiceDep):
    return events.get_event(event_id)


@router.post("", response_model=Event, status_code=201)
def create_event(event: Event, events: EventServiceDep):
    """Create an event from a JSON body."""
    return events.create_event(event)


@router.post("/form", response_model=Event, status_code=201)
def create_event_from_form(form: MultipartDep, events: EventServiceDep):
    """Create an event from a multipart form (fields + `images` files)."""
    return events.create_event(form)


@router.put("/{event_id}", response_model=Event)
def update_event(
    event_id: EventId,
    events: EventServiceDep,
    changes: Annotated[dict[str, Any], Body()],
):
    return events.update_event(event_id, changes)


@router.put("/{event_id}/form", response_model=Event)
def update_event_from_form(event_id: EventId, form: MultipartDep, events: EventServiceDep):
    return events.update_event(event_id, form)


@router.delete("/{event_id}", status_code=204)
def delete_event(event_id: EventId, events: EventServiceDep) -> None:
    events.delete_event(event_id)
