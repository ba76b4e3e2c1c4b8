"""Application tests for notify / notify_many."""

import asyncio

import pytest
import structlog
from notifications.channel.dispatcher import BatchResult, PushDispatcher
from notifications.notification.notification import Notification, NotificationType
from notifications.notification.orchestrator import (
    NotificationResult,
    RecipientNotFound,
    notify,
    notify_many,
)
from protean import current_domain
from shared.events.engagement import MessageReceived
from shared.events.ordering import OrderDelivered, OrderPlaced, OrderShipped
from shared.events.payments import PaymentFailed


class RecordingDispatcher(PushDispatcher):
    """Captures send_batched calls without touching the gateway."""

    def __init__(self):
        super().__init__()
        self.calls = []

    async def send_batched(self, user_id, title, body, data=None):
        self.calls.append({"user_id": user_id, "title": title, "body": body, "data": data})
        return [BatchResult(batch_index=0, size=1, success=True)]


class ExplodingDispatcher(PushDispatcher):
    async def send_batched(self, user_id, title, body, data=None):
        raise RuntimeError("push backend down")


class ContextCapturingDispatcher(PushDispatcher):
    """Records the logging context bound while each push is sent."""

    def __init__(self):
        super().__init__()
        self.contexts = {}

    async def send_batched(self, user_id, title, body, data=None):
        await asyncio.sleep(0)
        self.contexts[user_id] = structlog.contextvars.get_contextvars()
        return []


def _notifications_for(user_id):
    repo = current_domain.repository_for(Notification)
    return repo._dao.query.filter(user_id=user_id).all().items


class TestNotify:
    @pytest.mark.asyncio
    async def test_order_delivered_creates_one_delivery_notification(self, fake_directory):
        dispatcher = RecordingDispatcher()
        result = await notify("buyer-orc-1", OrderDelivered(order_id="o-orc-1"), dispatcher=dispatcher)

        stored = _notifications_for("buyer-orc-1")
        assert len(stored) == 1
        assert stored[0].notification_type == NotificationType.DELIVERY.value
        assert stored[0].title == "Order Delivered"
        assert stored[0].link == "/order/o-orc-1"
        assert stored[0].source_event_type == "Ordering.OrderDelivered.v1"

        assert len(dispatcher.calls) == 1
        assert dispatcher.calls[0]["user_id"] == "buyer-orc-1"
        assert result.succeeded is True
        assert result.notification_id == str(stored[0].id)
        assert result.push_attempted is True
        assert result.push_errors == []

    @pytest.mark.asyncio
    async def test_push_payload_carries_notification_id(self, fake_directory):
        dispatcher = RecordingDispatcher()
        result = await notify("buyer-orc-2", OrderShipped(order_id="o-orc-2", tracking_id="TRK-1"), dispatcher=dispatcher)

        data = dispatcher.calls[0]["data"]
        assert data["notificationId"] == result.notification_id
        assert data["type"] == NotificationType.ORDER_STATUS_UPDATED.value
        assert data["orderId"] == "o-orc-2"
        assert data["trackingId"] == "TRK-1"
        assert data["link"] == "/order/o-orc-2"
        assert dispatcher.calls[0]["title"] == "Order Shipped"
        assert dispatcher.calls[0]["body"] == "Your order #o-orc-2 has been shipped (Tracking: TRK-1)"

    @pytest.mark.asyncio
    async def test_push_type_override(self, fake_directory):
        dispatcher = RecordingDispatcher()
        await notify("supplier-orc-1", OrderPlaced(order_id="o-orc-3", total=7500), dispatcher=dispatcher)
        assert dispatcher.calls[0]["data"]["type"] == "ORDER_PLACED"

    @pytest.mark.asyncio
    async def test_missing_optional_fields_left_out_of_payload(self, fake_directory):
        dispatcher = RecordingDispatcher()
        await notify("buyer-orc-3", PaymentFailed(order_id="o-orc-4"), dispatcher=dispatcher)
        assert "reason" not in dispatcher.calls[0]["data"]

    @pytest.mark.asyncio
    async def test_push_exception_is_absorbed(self, fake_directory):
        result = await notify("buyer-orc-4", OrderDelivered(order_id="o-orc-5"), dispatcher=ExplodingDispatcher())

        assert result.succeeded is True
        assert result.push_errors == ["push backend down"]
        assert len(_notifications_for("buyer-orc-4")) == 1

    @pytest.mark.asyncio
    async def test_failed_batches_reported_as_push_errors(self, fake_directory, fake_gateway, register_tokens):
        register_tokens("buyer-orc-5", count=150)
        fake_gateway.configure(failing_batches={0})

        result = await notify("buyer-orc-5", OrderDelivered(order_id="o-orc-6"))

        assert result.succeeded is True
        assert len(result.batches) == 2
        assert result.push_errors == ["Batch 0 failed: Push gateway unavailable"]

    @pytest.mark.asyncio
    async def test_invalid_tokens_surface_on_result(self, fake_directory, fake_gateway, register_tokens):
        tokens = register_tokens("buyer-orc-6", count=2)
        fake_gateway.configure(unregistered_tokens={tokens[0]})

        result = await notify("buyer-orc-6", OrderDelivered(order_id="o-orc-7"))
        assert result.invalid_tokens == [tokens[0]]

    @pytest.mark.asyncio
    async def test_no_devices_is_not_an_error(self, fake_directory, fake_gateway):
        result = await notify("buyer-orc-7", OrderDelivered(order_id="o-orc-8"))
        assert result.succeeded is True
        assert result.batches == []
        assert result.push_errors == []

    @pytest.mark.asyncio
    async def test_long_sender_name_is_stored(self, fake_directory):
        dispatcher = RecordingDispatcher()
        event = MessageReceived(sender_id="s-orc-1", sender_name="n" * 255, preview="hi")
        result = await notify("buyer-orc-9", event, dispatcher=dispatcher)

        stored = _notifications_for("buyer-orc-9")
        assert result.succeeded is True
        assert len(stored) == 1
        assert len(stored[0].title) <= 255
        assert dispatcher.calls[0]["title"] == stored[0].title

    @pytest.mark.asyncio
    async def test_recipient_bound_to_log_context_while_delivering(self, fake_directory):
        dispatcher = ContextCapturingDispatcher()
        await notify("buyer-orc-10", OrderDelivered(order_id="o-orc-10"), dispatcher=dispatcher)

        assert dispatcher.contexts["buyer-orc-10"]["recipient_id"] == "buyer-orc-10"
        assert "recipient_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.asyncio
    async def test_unknown_recipient_raises(self, fake_directory):
        fake_directory.configure(known_ids={"someone-else"})
        dispatcher = RecordingDispatcher()

        with pytest.raises(RecipientNotFound) as exc:
            await notify("ghost-orc-1", OrderDelivered(order_id="o-orc-9"), dispatcher=dispatcher)

        assert exc.value.recipient_id == "ghost-orc-1"
        assert _notifications_for("ghost-orc-1") == []
        assert dispatcher.calls == []

    @pytest.mark.asyncio
    async def test_unknown_event_raises(self, fake_directory):
        with pytest.raises(ValueError, match="No template registered"):
            await notify("buyer-orc-8", object(), dispatcher=RecordingDispatcher())


class TestNotifyMany:
    @pytest.mark.asyncio
    async def test_one_result_per_recipient_in_order(self, fake_directory):
        dispatcher = RecordingDispatcher()
        results = await notify_many(["a-many-1", "b-many-1"], OrderDelivered(order_id="o-many-1"), dispatcher=dispatcher)

        assert [r.recipient_id for r in results] == ["a-many-1", "b-many-1"]
        assert all(r.succeeded for r in results)
        assert len(dispatcher.calls) == 2

    @pytest.mark.asyncio
    async def test_failure_is_isolated(self, fake_directory):
        fake_directory.configure(known_ids={"a-many-2"})
        results = await notify_many(
            ["a-many-2", "b-many-2"],
            OrderDelivered(order_id="o-many-2"),
            dispatcher=RecordingDispatcher(),
        )

        a, b = results
        assert a.succeeded is True
        assert b.succeeded is False
        assert isinstance(b.error, RecipientNotFound)
        assert len(_notifications_for("a-many-2")) == 1
        assert _notifications_for("b-many-2") == []

    @pytest.mark.asyncio
    async def test_each_recipient_logs_under_its_own_context(self, fake_directory):
        dispatcher = ContextCapturingDispatcher()
        await notify_many(["a-many-4", "b-many-4"], OrderDelivered(order_id="o-many-4"), dispatcher=dispatcher)

        assert dispatcher.contexts["a-many-4"]["recipient_id"] == "a-many-4"
        assert dispatcher.contexts["b-many-4"]["recipient_id"] == "b-many-4"

    @pytest.mark.asyncio
    async def test_empty_recipient_list(self, fake_directory):
        assert await notify_many([], OrderDelivered(order_id="o-many-3")) == []

    def test_result_defaults(self):
        result = NotificationResult(recipient_id="x")
        assert result.succeeded is False
        assert result.push_attempted is False
        assert result.invalid_tokens == []
