"""Module for events."""

from stasis.events.base import (
    Event,
    EventBus,
    GamePausedEvent,
    GameRestoredEvent,
    GameResumedEvent,
    GameSavedEvent,
    NewGameEvent,
    SceneLoadedEvent,
    SceneUnloadedEvent,
)

__all__ = [
    "Event",
    "EventBus",
    "GamePausedEvent",
    "GameRestoredEvent",
    "GameResumedEvent",
    "GameSavedEvent",
    "NewGameEvent",
    "SceneLoadedEvent",
    "SceneUnloadedEvent",
]
