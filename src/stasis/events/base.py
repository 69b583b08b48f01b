"""Event system for decoupled game event handling.

This module provides a publish/subscribe event system that lets the scene loader,
the state system, the pause controller and the transition coordinator react to
each other without holding direct references.

The event system consists of:
- Event: Base class for all game events
- Concrete event classes: Scene lifecycle, pause and persistence events
- EventBus: Central hub for subscribing to and publishing events

Example usage:
    event_bus = EventBus()

    def handle_scene_loaded(event: SceneLoadedEvent):
        print(f"Scene {event.scene_name} ready")

    event_bus.subscribe(SceneLoadedEvent, handle_scene_loaded)
    event_bus.publish(SceneLoadedEvent("GameScene", 2))
    event_bus.clear()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


@dataclass
class SceneLoadedEvent(Event):
    """Fired once a scene has been built.

    Objects spawned by the scene have had their start callbacks scheduled but not
    necessarily run when this event is published. Anything that reads registrations
    must wait for the end of the frame.

    Attributes:
        scene_name: Name of the scene that finished loading.
        scene_index: Build index of the scene, or -1 if it is not in the build list.
    """

    scene_name: str
    scene_index: int = -1


@dataclass
class SceneUnloadedEvent(Event):
    """Fired right before a scene's objects are destroyed.

    Attributes:
        scene_name: Name of the scene being torn down.
    """

    scene_name: str


@dataclass
class GamePausedEvent(Event):
    """Fired when the game enters the paused state."""


@dataclass
class GameResumedEvent(Event):
    """Fired when the game leaves the paused state."""


@dataclass
class GameSavedEvent(Event):
    """Fired after a snapshot was written to the store.

    Attributes:
        scene_name: Scene recorded in the snapshot.
    """

    scene_name: str


@dataclass
class GameRestoredEvent(Event):
    """Fired after a saved snapshot was applied to the live objects.

    Attributes:
        scene_name: Scene recorded in the applied snapshot.
    """

    scene_name: str


@dataclass
class NewGameEvent(Event):
    """Fired when the saved snapshot is discarded to start a fresh game."""


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Publishers emit events without knowing who handles them, and subscribers listen
    for event types without knowing who publishes them.

    Thread safety: This implementation is NOT thread-safe. All subscribe, publish, and
    unsubscribe calls should happen on the main game thread.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        Handlers for the same event type are called in registration order. The same
        handler can be subscribed multiple times and is called once per subscription.

        Args:
            event_type: The type of event to listen for (e.g., SceneLoadedEvent).
            handler: Callback taking the event as its only argument.
        """
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        self.listeners[event_type].append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type.

        Removes every subscription of the handler. Unknown handlers are ignored.

        Args:
            event_type: The type of event to stop listening for.
            handler: The handler function to remove.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        Handlers are called synchronously in registration order. Events without
        subscribers are ignored. Exceptions raised by a handler propagate and stop
        later handlers from running.

        Args:
            event: The event instance to publish.
        """
        event_type = type(event)
        if event_type in self.listeners:
            for handler in list(self.listeners[event_type]):
                handler(event)

    def clear(self) -> None:
        """Remove all subscribed handlers for all event types."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Unregister all handlers bound to a specific subscriber.

        Args:
            subscriber: The instance (e.g., a system) whose bound-method handlers should be removed.
        """
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if not (hasattr(h, "__self__") and h.__self__ == subscriber)
            ]
