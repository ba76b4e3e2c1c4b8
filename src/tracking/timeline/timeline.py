"""Tracking timeline: append status/location entries and read them back in order."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from shared.logging import bound_context
from tracking.lifecycle.state_machine import Transition
from tracking.timeline.tracking_event import SubjectType, TrackingEvent

logger = structlog.get_logger(__name__)

# Protean querysets return at most this many rows per page
_PAGE_SIZE = 100

DEFAULT_PAGE_LIMIT = 50

_SUBJECT_LABELS = {
    SubjectType.ORDER.value: "Order",
    SubjectType.DELIVERY.value: "Delivery",
    SubjectType.MECHANIC_BOOKING.value: "Booking",
    SubjectType.LOGISTICS_BOOKING.value: "Booking",
}


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _value(item) -> str:
    return item.value if hasattr(item, "value") else str(item)


def default_message(subject_type: str, status: str) -> str:
    return f"{_SUBJECT_LABELS.get(subject_type, 'Subject')} status updated to {status}"


def latest_event(subject_id: str) -> TrackingEvent | None:
    dao = current_domain.repository_for(TrackingEvent)._dao
    results = dao.query.filter(subject_id=str(subject_id)).order_by("-sequence").limit(1).all().items
    return results[0] if results else None


def append_event(subject_id, subject_type, status, location=None, message=None, occurred_at=None) -> TrackingEvent:
    """Append one entry to ``subject_id``'s timeline.

    The entry's timestamp is clamped so it is never earlier than the
    subject's previous entry.
    """
    subject_type = _value(subject_type)
    status = _value(status)
    if not status:
        raise ValidationError({"status": ["Status is required"]})

    with bound_context(subject_id=str(subject_id)):
        return _append(subject_id, subject_type, status, location, message, occurred_at)


def _append(subject_id, subject_type, status, location, message, occurred_at) -> TrackingEvent:
    previous = latest_event(subject_id)
    occurred_at = _aware(occurred_at or datetime.now(UTC))
    sequence = 1
    if previous is not None:
        sequence = previous.sequence + 1
        occurred_at = max(occurred_at, _aware(previous.occurred_at))

    tracking_event = TrackingEvent.record(
        subject_id=str(subject_id),
        subject_type=subject_type,
        status=status,
        location=location,
        message=message or default_message(subject_type, status),
        sequence=sequence,
        occurred_at=occurred_at,
    )
    current_domain.repository_for(TrackingEvent).add(tracking_event)

    logger.info(
        "Tracking event recorded",
        subject_type=subject_type,
        status=status,
        sequence=sequence,
    )
    return tracking_event


def record_transition(subject_id, transition: Transition, location=None, message=None) -> TrackingEvent | None:
    """Append the entry for an accepted state machine transition.

    Same-status no-ops leave the timeline untouched and return None.
    """
    if not transition.changed:
        return None

    subject_type = transition.subject_kind.value
    return append_event(
        subject_id,
        subject_type,
        transition.status.value,
        location=location,
        message=message,
        occurred_at=transition.occurred_at,
    )


@dataclass(frozen=True)
class TimelinePage:
    """A window of a subject's timeline and the subject's total entry count."""

    total: int
    events: list[TrackingEvent] = field(default_factory=list)


def _entries_query(subject_id):
    dao = current_domain.repository_for(TrackingEvent)._dao
    return dao.query.filter(subject_id=str(subject_id)).order_by("sequence")


def _check_window(limit, offset) -> None:
    errors = {}
    if limit is not None and limit < 1:
        errors["limit"] = ["Limit must be at least 1"]
    if offset < 0:
        errors["offset"] = ["Offset cannot be negative"]
    if errors:
        raise ValidationError(errors)


def timeline_page(subject_id, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0) -> TimelinePage:
    """``limit`` entries for ``subject_id`` starting at ``offset``, ascending. Read-only."""
    _check_window(limit, offset)
    page = _entries_query(subject_id).offset(offset).limit(limit).all()
    return TimelinePage(total=page.total, events=list(page.items))


def get_timeline(subject_id, limit: int | None = None, offset: int = 0) -> list[TrackingEvent]:
    """Entries for ``subject_id`` in ascending order. Read-only.

    Without a ``limit`` every entry from ``offset`` onwards is returned.
    """
    if limit is not None:
        return timeline_page(subject_id, limit=limit, offset=offset).events

    _check_window(limit, offset)
    events: list[TrackingEvent] = []
    while True:
        page = _entries_query(subject_id).offset(offset).limit(_PAGE_SIZE).all()
        events.extend(page.items)
        offset += _PAGE_SIZE
        if offset >= page.total or not page.items:
            return events
