"""Tracking bounded context: lifecycle state machines and status timelines.

Validates status transitions for orders, mechanic bookings and logistics
bookings, and keeps the append-only timeline of status/location events that
customer-facing tracking views read from.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

tracking = Domain(name="tracking")
