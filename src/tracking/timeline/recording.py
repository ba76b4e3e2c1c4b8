"""RecordTrackingEvent command + handler: location pings and manual status notes."""

from protean.fields import Identifier, String, Text
from protean.utils.mixins import handle

from tracking.domain import tracking
from tracking.timeline.timeline import append_event
from tracking.timeline.tracking_event import TrackingEvent


@tracking.command(part_of="TrackingEvent")
class RecordTrackingEvent:
    subject_id: Identifier(required=True)
    subject_type: String(required=True, max_length=50)
    status: String(required=True, max_length=50)
    location: String(max_length=500)
    message: Text()


@tracking.command_handler(part_of=TrackingEvent)
class TrackingEventCommandHandler:
    @handle(RecordTrackingEvent)
    def record_tracking_event(self, command: RecordTrackingEvent):
        tracking_event = append_event(
            subject_id=command.subject_id,
            subject_type=command.subject_type,
            status=command.status,
            location=command.location,
            message=command.message,
        )
        return str(tracking_event.id)
