"""Integration tests for the SubjectTracking projection."""

from protean import current_domain
from tracking.projections.subject_tracking import SubjectTracking
from tracking.timeline.timeline import append_event


class TestSubjectTrackingProjection:
    def test_created_on_first_event(self):
        append_event("ord-proj-1", "ORDER", "PENDING")
        view = current_domain.repository_for(SubjectTracking).get("ord-proj-1")
        assert view.current_status == "PENDING"
        assert view.subject_type == "ORDER"
        assert view.event_count == 1

    def test_tracks_latest_status(self):
        append_event("ord-proj-2", "ORDER", "PENDING")
        append_event("ord-proj-2", "ORDER", "CONFIRMED")
        append_event("ord-proj-2", "ORDER", "SHIPPED")

        view = current_domain.repository_for(SubjectTracking).get("ord-proj-2")
        assert view.current_status == "SHIPPED"
        assert view.event_count == 3
        assert view.last_message == "Order status updated to SHIPPED"

    def test_keeps_last_known_location(self):
        append_event("dlv-proj-1", "DELIVERY", "IN_TRANSIT", location="Oshodi")
        append_event("dlv-proj-1", "DELIVERY", "OUT_FOR_DELIVERY")

        view = current_domain.repository_for(SubjectTracking).get("dlv-proj-1")
        assert view.current_status == "OUT_FOR_DELIVERY"
        assert view.last_location == "Oshodi"
