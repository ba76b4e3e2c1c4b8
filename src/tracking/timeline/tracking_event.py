"""TrackingEvent aggregate: one immutable entry on a subject's timeline.

Entries are insert-only. ``sequence`` numbers entries per subject starting
at 1 and is the timeline's sort key; ``occurred_at`` never goes backwards
within a subject.
"""

from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, Text

from tracking.domain import tracking
from tracking.timeline.events import TrackingEventRecorded


class SubjectType(Enum):
    ORDER = "ORDER"
    DELIVERY = "DELIVERY"
    MECHANIC_BOOKING = "MECHANIC_BOOKING"
    LOGISTICS_BOOKING = "LOGISTICS_BOOKING"


@tracking.aggregate
class TrackingEvent:
    subject_id: Identifier(required=True)
    subject_type: String(choices=SubjectType, required=True)
    status: String(required=True, max_length=50)
    location: String(max_length=500)
    message: Text()
    sequence: Integer(required=True, min_value=1)
    occurred_at: DateTime(required=True)

    @classmethod
    def record(cls, subject_id, subject_type, status, sequence, occurred_at, location=None, message=None):
        tracking_event = cls(
            subject_id=subject_id,
            subject_type=subject_type,
            status=status,
            location=location,
            message=message,
            sequence=sequence,
            occurred_at=occurred_at,
        )

        tracking_event.raise_(
            TrackingEventRecorded(
                tracking_event_id=str(tracking_event.id),
                subject_id=str(subject_id),
                subject_type=subject_type,
                status=status,
                location=location,
                message=message,
                sequence=sequence,
                occurred_at=occurred_at,
            )
        )

        return tracking_event
