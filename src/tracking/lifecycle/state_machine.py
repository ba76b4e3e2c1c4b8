"""Lifecycle state machines for orders and service bookings.

Pure transition logic: nothing here persists. Callers store the new status
and then hand the returned ``Transition`` to the tracking timeline and the
matching event to the notification orchestrator.

Order:
    PENDING → CONFIRMED → SHIPPED → DELIVERED
    {PENDING, CONFIRMED} → CANCELLED

Mechanic / Logistics booking:
    PENDING → CONFIRMED → IN_PROGRESS → COMPLETED
    {PENDING, CONFIRMED} → CANCELLED
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class SubjectKind(Enum):
    ORDER = "ORDER"
    MECHANIC_BOOKING = "MECHANIC_BOOKING"
    LOGISTICS_BOOKING = "LOGISTICS_BOOKING"


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class BookingStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# ---------------------------------------------------------------------------
# Transition tables
# ---------------------------------------------------------------------------
_ORDER_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

_BOOKING_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED},
    BookingStatus.IN_PROGRESS: {BookingStatus.COMPLETED},
    BookingStatus.COMPLETED: set(),  # Terminal
    BookingStatus.CANCELLED: set(),  # Terminal
}

_STATUS_ENUMS = {
    SubjectKind.ORDER: OrderStatus,
    SubjectKind.MECHANIC_BOOKING: BookingStatus,
    SubjectKind.LOGISTICS_BOOKING: BookingStatus,
}

_VALID_TRANSITIONS = {
    SubjectKind.ORDER: _ORDER_TRANSITIONS,
    SubjectKind.MECHANIC_BOOKING: _BOOKING_TRANSITIONS,
    SubjectKind.LOGISTICS_BOOKING: _BOOKING_TRANSITIONS,
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class TransitionError(ValidationError):
    """A requested status change was refused."""

    def __init__(self, subject_kind: SubjectKind, from_status: Enum, to_status: Enum, message: str):
        self.subject_kind = subject_kind
        self.from_status = from_status
        self.to_status = to_status
        super().__init__({"status": [message]})


class InvalidTransition(TransitionError):
    """No edge exists between the two statuses."""

    def __init__(self, subject_kind: SubjectKind, from_status: Enum, to_status: Enum):
        super().__init__(
            subject_kind,
            from_status,
            to_status,
            f"Cannot transition from {from_status.value} to {to_status.value}",
        )


class TerminalState(TransitionError):
    """The subject already reached a status with no outgoing edges."""

    def __init__(self, subject_kind: SubjectKind, from_status: Enum, to_status: Enum):
        super().__init__(
            subject_kind,
            from_status,
            to_status,
            f"{from_status.value} is terminal; cannot transition to {to_status.value}",
        )


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Transition:
    """Outcome of an accepted status change."""

    subject_kind: SubjectKind
    previous_status: Enum
    status: Enum
    occurred_at: datetime

    @property
    def changed(self) -> bool:
        """False when the request repeated the current status."""
        return self.previous_status != self.status

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.subject_kind, self.status)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------
def _coerce_kind(subject_kind) -> SubjectKind:
    if isinstance(subject_kind, SubjectKind):
        return subject_kind
    try:
        return SubjectKind(str(subject_kind).upper())
    except ValueError:
        raise ValidationError({"subject_kind": [f"Unknown subject kind: {subject_kind}"]}) from None


def coerce_status(subject_kind, status) -> Enum:
    """Return the status enum member for ``status`` (member or raw value)."""
    kind = _coerce_kind(subject_kind)
    status_enum = _STATUS_ENUMS[kind]
    if isinstance(status, status_enum):
        return status
    if isinstance(status, Enum):
        status = status.value
    try:
        return status_enum(str(status).upper())
    except ValueError:
        raise ValidationError({"status": [f"Unknown {kind.value} status: {status}"]}) from None


def is_terminal(subject_kind, status) -> bool:
    kind = _coerce_kind(subject_kind)
    return not _VALID_TRANSITIONS[kind][coerce_status(kind, status)]


def allowed_transitions(subject_kind, status) -> set:
    """Statuses reachable in one step from ``status``."""
    kind = _coerce_kind(subject_kind)
    return set(_VALID_TRANSITIONS[kind][coerce_status(kind, status)])


def transition(subject_kind, current_status, requested_status, now: datetime | None = None) -> Transition:
    """Validate a status change and return the resulting ``Transition``.

    Requesting the current status is accepted as a no-op so that repeated
    webhook deliveries do not fail.

    Raises:
        TerminalState: ``current_status`` has no outgoing edges.
        InvalidTransition: the edge is not in the allow-list.
    """
    kind = _coerce_kind(subject_kind)
    current = coerce_status(kind, current_status)
    requested = coerce_status(kind, requested_status)
    occurred_at = now or datetime.now(UTC)

    if requested == current:
        return Transition(kind, current, current, occurred_at)

    allowed = _VALID_TRANSITIONS[kind][current]
    if not allowed:
        raise TerminalState(kind, current, requested)
    if requested not in allowed:
        raise InvalidTransition(kind, current, requested)

    return Transition(kind, current, requested, occurred_at)
