"""Notification orchestrator: the entry point callers use after a lifecycle change.

For each recipient: render the event's template, store the in-app
Notification, then push the same title and message to the recipient's
devices. The in-app record is the guaranteed channel; push is best-effort,
so push failures are collected on the result instead of being raised.
"""

import asyncio
from dataclasses import dataclass, field

import structlog
from notifications.channel.dispatcher import BatchResult, PushDispatcher
from notifications.notification.notification import Notification
from notifications.recipients import get_directory
from notifications.templates import event_type_of, render
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from shared.logging import bound_context

logger = structlog.get_logger(__name__)


class RecipientNotFound(ObjectNotFoundError):
    """The recipient does not exist, so no in-app notification could be stored."""

    def __init__(self, recipient_id: str):
        self.recipient_id = str(recipient_id)
        super().__init__({"recipient_id": [f"Recipient {recipient_id} does not exist"]})


@dataclass
class NotificationResult:
    recipient_id: str
    notification_id: str | None = None
    push_attempted: bool = False
    push_errors: list[str] = field(default_factory=list)
    batches: list[BatchResult] = field(default_factory=list)
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        """True when the in-app notification was stored, whatever happened to push."""
        return self.error is None and self.notification_id is not None

    @property
    def invalid_tokens(self) -> list[str]:
        return [token for batch in self.batches for token in batch.invalid_tokens]


def _store_notification(recipient_id: str, event, rendered) -> Notification:
    if not get_directory().exists(recipient_id):
        raise RecipientNotFound(recipient_id)

    notification = Notification.create(
        user_id=recipient_id,
        notification_type=rendered.notification_type,
        title=rendered.title,
        message=rendered.message,
        link=rendered.link,
        source_event_type=event_type_of(event),
    )
    current_domain.repository_for(Notification).add(notification)
    return notification


async def notify(recipient_id: str, event, dispatcher: PushDispatcher | None = None) -> NotificationResult:
    """Deliver ``event`` to one recipient as an in-app record plus a push.

    Raises:
        RecipientNotFound: the recipient is unknown; nothing was stored.
        ValueError: no template exists for the event class.
    """
    recipient_id = str(recipient_id)
    with bound_context(recipient_id=recipient_id):
        return await _deliver(recipient_id, event, dispatcher)


async def _deliver(recipient_id: str, event, dispatcher: PushDispatcher | None) -> NotificationResult:
    rendered = render(event)
    notification = _store_notification(recipient_id, event, rendered)

    result = NotificationResult(recipient_id=recipient_id, notification_id=str(notification.id))

    push_data = {
        "type": rendered.push_type or rendered.notification_type,
        "notificationId": str(notification.id),
        **{key: value for key, value in rendered.push_data.items() if value is not None},
    }
    if rendered.link:
        push_data["link"] = rendered.link

    dispatcher = dispatcher or PushDispatcher()
    result.push_attempted = True
    try:
        result.batches = await dispatcher.send_batched(recipient_id, rendered.title, rendered.message, push_data)
    except Exception as exc:  # Push is best-effort; the in-app record already exists
        logger.exception(
            "Push dispatch failed",
            notification_id=str(notification.id),
        )
        result.push_errors.append(str(exc))
    else:
        result.push_errors.extend(
            f"Batch {batch.batch_index} failed: {batch.error}" for batch in result.batches if not batch.success
        )

    logger.info(
        "Notification delivered",
        notification_id=str(notification.id),
        notification_type=rendered.notification_type,
        push_batches=len(result.batches),
        push_errors=len(result.push_errors),
    )
    return result


async def notify_many(recipient_ids: list[str], event, dispatcher: PushDispatcher | None = None) -> list[NotificationResult]:
    """Notify every recipient concurrently; one result per recipient, in input order.

    A failure for one recipient is captured on its own result and never
    affects the others.
    """
    dispatcher = dispatcher or PushDispatcher()
    outcomes = await asyncio.gather(
        *(notify(recipient_id, event, dispatcher=dispatcher) for recipient_id in recipient_ids),
        return_exceptions=True,
    )

    results = []
    for recipient_id, outcome in zip(recipient_ids, outcomes, strict=True):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.warning("Notification failed for recipient", recipient_id=str(recipient_id), error=str(outcome))
            results.append(NotificationResult(recipient_id=str(recipient_id), error=outcome))
        else:
            results.append(outcome)
    return results
