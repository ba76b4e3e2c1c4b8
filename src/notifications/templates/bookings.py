"""Mechanic and logistics booking templates."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification, with_reason


class BookingConfirmedTemplate:
    notification_type = NotificationType.BOOKING.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        booking_id = str(event.booking_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Booking Confirmed",
            message=f"Your booking for {event.service_name} has been confirmed",
            link=f"/booking/{booking_id}",
            push_data={"bookingId": booking_id, "status": "CONFIRMED", "serviceName": event.service_name},
        )


class BookingCancelledTemplate:
    notification_type = NotificationType.BOOKING.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        booking_id = str(event.booking_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Booking Cancelled",
            message=with_reason(f"Your booking #{booking_id} has been cancelled", event.reason),
            link="/bookings",
            push_data={"bookingId": booking_id, "status": "CANCELLED", "reason": event.reason},
        )


class MechanicAssignedTemplate:
    notification_type = NotificationType.BOOKING.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        booking_id = str(event.booking_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Mechanic Assigned",
            message=f"{event.mechanic_name} has been assigned to your booking and will contact you soon.",
            link=f"/booking/{booking_id}",
            push_data={"bookingId": booking_id, "status": "ASSIGNED", "mechanicName": event.mechanic_name},
        )
