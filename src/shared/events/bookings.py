"""Cross-domain event contracts for mechanic and logistics bookings."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, String


class BookingConfirmed(BaseEvent):
    """A provider confirmed a service booking."""

    __version__ = 1

    booking_id = Identifier(required=True)
    service_name = String(required=True, max_length=255)


class BookingCancelled(BaseEvent):
    """A service booking was cancelled."""

    __version__ = 1

    booking_id = Identifier(required=True)
    reason = String(max_length=500)


class MechanicAssigned(BaseEvent):
    """A mechanic was assigned to a booking."""

    __version__ = 1

    booking_id = Identifier(required=True)
    mechanic_name = String(required=True, max_length=255)
