"""Base class for objects living inside a loaded scene."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stasis.systems.game_context import GameContext


class SceneObject:
    """An object created by a scene load and destroyed by the next one.

    The scene manager schedules start() with the frame scheduler when the object is
    spawned, so it runs later in the same frame, after the scene-loaded event was
    published. update() is only called on started, live objects.

    Attributes:
        started: Whether start() has run.
        destroyed: Whether the owning scene has been unloaded.
    """

    def __init__(self) -> None:
        """Initialize an unstarted object."""
        self.started = False
        self.destroyed = False

    def start(self, context: GameContext) -> None:
        """Initialize the object. Subclasses register themselves here."""
        self.started = True

    def update(self, delta_time: float, context: GameContext) -> None:
        """Per-frame logic."""

    def destroy(self) -> None:
        """Mark the object as disposed."""
        self.destroyed = True
