"""Endpoints for managing events and registering for them."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from eventhub.application.use_cases.events import (
    ALREADY_REGISTERED,
    EVENT_FORBIDDEN,
    EVENT_NOT_FOUND,
    REGISTRATION_NOT_FOUND,
    cancel_registration as cancel_registration_uc,
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_events as list_events_uc,
    register_for_event as register_for_event_uc,
    update_event as update_event_uc,
)
from eventhub.domain.entities import Event
from eventhub.infrastructure.database import get_db
from eventhub.interfaces.api.dependencies import get_current_user_id
from eventhub.interfaces.api.schemas import (
    EventCreate,
    EventRead,
    EventUpdate,
    MessageResponse,
)

router = APIRouter(prefix="/events", tags=["events"])

_STATUS_BY_DETAIL = {
    EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    REGISTRATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    EVENT_FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
}


def _event_to_read_model(event: Event) -> EventRead:
    return EventRead.model_validate(event)


def _http_error(exc: ValueError) -> HTTPException:
    detail = str(exc)
    status_code = _STATUS_BY_DETAIL.get(detail, status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=detail)


@router.get("/", response_model=list[EventRead])
def list_events(db: Session = Depends(get_db)) -> list[EventRead]:
    """Return every event, soonest first."""

    return [_event_to_read_model(event) for event in list_events_uc(db)]


@router.get("/{event_id}", response_model=EventRead)
def get_event(event_id: int, db: Session = Depends(get_db)) -> EventRead:
    try:
        event = get_event_uc(db, event_id)
    except ValueError as exc:
        raise _http_error(exc) from exc
    return _event_to_read_model(event)


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> EventRead:
    """Create an event owned by the caller."""

    try:
        event = create_event_uc(
            db,
            user_id=user_id,
            name=event_in.name,
            description=event_in.description,
            location=event_in.location,
            starts_at=event_in.starts_at,
        )
    except ValueError as exc:
        raise _http_error(exc) from exc
    return _event_to_read_model(event)


@router.put("/{event_id}", response_model=EventRead)
def update_event(
    event_id: int,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> EventRead:
    """Update one of the caller's events."""

    update_data = event_in.model_dump(exclude_unset=True)
    try:
        event = update_event_uc(
            db,
            event_id=event_id,
            user_id=user_id,
            name=update_data.get("name"),
            description=update_data.get("description"),
            location=update_data.get("location"),
            starts_at=update_data.get("starts_at"),
        )
    except ValueError as exc:
        raise _http_error(exc) from exc
    return _event_to_read_model(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Response:
    """Delete one of the caller's events."""

    try:
        delete_event_uc(db, event_id, user_id=user_id)
    except ValueError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{event_id}/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_for_event(
    event_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> MessageResponse:
    try:
        register_for_event_uc(db, event_id, user_id=user_id)
    except ValueError as exc:
        raise _http_error(exc) from exc
    return MessageResponse(message="Event registration success")


@router.delete("/{event_id}/cancel", response_model=MessageResponse)
def cancel_registration(
    event_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> MessageResponse:
    try:
        cancel_registration_uc(db, event_id, user_id=user_id)
    except ValueError as exc:
        raise _http_error(exc) from exc
    return MessageResponse(message="Event cancelled")
