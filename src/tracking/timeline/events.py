"""Domain events for the TrackingEvent aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from tracking.domain import tracking


@tracking.event(part_of="TrackingEvent")
class TrackingEventRecorded:
    """A status or location change was appended to a subject's timeline."""

    __version__ = 1

    tracking_event_id: Identifier(required=True)
    subject_id: Identifier(required=True)
    subject_type: String(required=True)
    status: String(required=True)
    location: String()
    message: Text()
    sequence: Integer(required=True)
    occurred_at: DateTime(required=True)
