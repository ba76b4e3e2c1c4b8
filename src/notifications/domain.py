"""Notifications bounded context: in-app records and push fan-out.

Turns marketplace lifecycle events (orders, payments, products, deliveries,
bookings) into an in-app Notification for the recipient and a best-effort
push to every active device the recipient has registered.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

notifications = Domain(name="notifications")
