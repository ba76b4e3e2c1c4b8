"""Rendered template output shared by the in-app record and the push payload."""

from dataclasses import dataclass, field

from notifications.notification.notification import TITLE_MAX_LENGTH
from shared.settings import get_settings


@dataclass(frozen=True)
class RenderedNotification:
    notification_type: str
    title: str
    message: str
    link: str | None = None
    push_data: dict = field(default_factory=dict)
    push_type: str | None = None  # Overrides notification_type in the push payload


def format_money(amount) -> str:
    """Render an amount as ``₦12,500`` (or ``₦12,500.5`` when fractional)."""
    value = float(amount or 0)
    if value.is_integer():
        formatted = f"{int(value):,}"
    else:
        formatted = f"{value:,.2f}".rstrip("0").rstrip(".")
    return f"{get_settings().CURRENCY_SYMBOL}{formatted}"


def clip_title(title: str) -> str:
    """Cut a rendered title to what the in-app record can store."""
    if len(title) <= TITLE_MAX_LENGTH:
        return title
    return title[: TITLE_MAX_LENGTH - 3] + "..."


def with_reason(text: str, reason: str | None, default: str = "") -> str:
    """Append ``: <reason>`` when a reason was given, otherwise ``default``."""
    return f"{text}: {reason}" if reason else f"{text}{default}"
