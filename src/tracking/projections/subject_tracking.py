"""SubjectTracking: the customer-facing "where is my order" summary."""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tracking.domain import tracking
from tracking.timeline.events import TrackingEventRecorded
from tracking.timeline.tracking_event import TrackingEvent


@tracking.projection
class SubjectTracking:
    subject_id: Identifier(identifier=True, required=True)
    subject_type: String(required=True)
    current_status: String(required=True)
    last_location: String(max_length=500)
    last_message: Text()
    event_count: Integer(default=0)
    last_updated_at: DateTime()


@tracking.projector(projector_for=SubjectTracking, aggregates=[TrackingEvent])
class SubjectTrackingProjector:
    @on(TrackingEventRecorded)
    def on_tracking_event_recorded(self, event):
        repo = current_domain.repository_for(SubjectTracking)
        try:
            view = repo.get(event.subject_id)
        except ObjectNotFoundError:
            view = SubjectTracking(
                subject_id=event.subject_id,
                subject_type=event.subject_type,
                current_status=event.status,
                event_count=0,
            )

        view.current_status = event.status
        if event.location:
            view.last_location = event.location
        view.last_message = event.message
        view.event_count += 1
        view.last_updated_at = event.occurred_at
        repo.add(view)
