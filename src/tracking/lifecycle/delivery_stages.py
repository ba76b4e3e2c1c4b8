"""Driver-reported delivery stages for logistics bookings.

Drivers report finer-grained stages than the booking lifecycle knows about.
Each stage maps onto a booking status; the timeline records the stage itself
so customers see "OUT_FOR_DELIVERY" while the booking stays IN_PROGRESS.
"""

from enum import Enum

from protean.exceptions import ValidationError

from tracking.lifecycle.state_machine import BookingStatus, SubjectKind, Transition, transition


class DeliveryStage(Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    IN_TRANSIT = "IN_TRANSIT"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    FAILED = "FAILED"


_STAGE_TO_STATUS = {
    DeliveryStage.PENDING: BookingStatus.PENDING,
    DeliveryStage.ACCEPTED: BookingStatus.CONFIRMED,
    DeliveryStage.IN_TRANSIT: BookingStatus.IN_PROGRESS,
    DeliveryStage.OUT_FOR_DELIVERY: BookingStatus.IN_PROGRESS,
    DeliveryStage.DELIVERED: BookingStatus.COMPLETED,
    DeliveryStage.FAILED: BookingStatus.CANCELLED,
}


def coerce_stage(stage) -> DeliveryStage:
    if isinstance(stage, DeliveryStage):
        return stage
    try:
        return DeliveryStage(str(stage).upper())
    except ValueError:
        raise ValidationError({"stage": [f"Invalid delivery status: {stage}"]}) from None


def booking_status_for_stage(stage) -> BookingStatus:
    return _STAGE_TO_STATUS[coerce_stage(stage)]


def advance_delivery(current_status, stage) -> Transition:
    """Apply a driver-reported stage to a logistics booking's status."""
    return transition(SubjectKind.LOGISTICS_BOOKING, current_status, booking_status_for_stage(stage))
