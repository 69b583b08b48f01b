"""Unit tests for EventBus."""

import unittest
from unittest.mock import MagicMock

from stasis.events import EventBus, GamePausedEvent, SceneLoadedEvent, SceneUnloadedEvent


class _Listener:
    def __init__(self) -> None:
        self.received: list[object] = []

    def on_event(self, event: object) -> None:
        self.received.append(event)


class TestEventBus(unittest.TestCase):
    """Unit test class for EventBus."""

    def setUp(self) -> None:
        """Create an empty event bus."""
        self.event_bus = EventBus()

    def test_publish_reaches_subscribers_of_that_type(self) -> None:
        """Test that handlers only receive events of the subscribed type."""
        loaded = MagicMock()
        unloaded = MagicMock()
        self.event_bus.subscribe(SceneLoadedEvent, loaded)
        self.event_bus.subscribe(SceneUnloadedEvent, unloaded)

        event = SceneLoadedEvent("GameScene", 2)
        self.event_bus.publish(event)

        loaded.assert_called_once_with(event)
        unloaded.assert_not_called()

    def test_handlers_run_in_registration_order(self) -> None:
        """Test that handlers are called in the order they subscribed."""
        order: list[str] = []
        self.event_bus.subscribe(GamePausedEvent, lambda _: order.append("first"))
        self.event_bus.subscribe(GamePausedEvent, lambda _: order.append("second"))

        self.event_bus.publish(GamePausedEvent())

        assert order == ["first", "second"]

    def test_unsubscribe_stops_delivery(self) -> None:
        """Test that an unsubscribed handler is no longer called."""
        handler = MagicMock()
        self.event_bus.subscribe(GamePausedEvent, handler)
        self.event_bus.unsubscribe(GamePausedEvent, handler)

        self.event_bus.publish(GamePausedEvent())

        handler.assert_not_called()

    def test_handler_can_unsubscribe_while_publishing(self) -> None:
        """Test that changing subscriptions inside a handler does not skip others."""
        later = MagicMock()

        def once(event: object) -> None:
            self.event_bus.unsubscribe(GamePausedEvent, once)

        self.event_bus.subscribe(GamePausedEvent, once)
        self.event_bus.subscribe(GamePausedEvent, later)

        self.event_bus.publish(GamePausedEvent())

        later.assert_called_once()

    def test_unregister_all_removes_bound_methods(self) -> None:
        """Test that every handler bound to a subscriber is removed."""
        listener = _Listener()
        other = _Listener()
        self.event_bus.subscribe(SceneLoadedEvent, listener.on_event)
        self.event_bus.subscribe(SceneUnloadedEvent, listener.on_event)
        self.event_bus.subscribe(SceneLoadedEvent, other.on_event)

        self.event_bus.unregister_all(listener)
        self.event_bus.publish(SceneLoadedEvent("GameScene"))
        self.event_bus.publish(SceneUnloadedEvent("GameScene"))

        assert listener.received == []
        assert len(other.received) == 1

    def test_clear_removes_everything(self) -> None:
        """Test that clear() drops all subscriptions."""
        handler = MagicMock()
        self.event_bus.subscribe(GamePausedEvent, handler)
        self.event_bus.clear()

        self.event_bus.publish(GamePausedEvent())

        handler.assert_not_called()
