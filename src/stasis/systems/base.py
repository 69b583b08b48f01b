"""Base class for pluggable systems.

Systems are the building blocks of the engine, each handling one concern (scene
loading, state persistence, pause gating, ...).

Example:
    Creating a custom system::

        from stasis.systems.base import BaseSystem
        from stasis.systems.registry import SystemRegistry

        @SystemRegistry.register
        class CheckpointManager(BaseSystem):
            name = "checkpoint"
            dependencies = ["state"]

            def setup(self, context):
                self.context = context

            def reach_checkpoint(self, label):
                self.context.state_manager.set_extra("LastCheckpoint", label)
                self.context.state_manager.save()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from stasis.systems.game_context import GameContext


class BaseSystem(ABC):
    """Base class for all pluggable systems.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        role: Attribute name under which the GameContext exposes the system, or None.
        dependencies: List of system names this system depends on. Systems are
            set up in dependency order, so dependencies are available in setup().
    """

    name: ClassVar[str]

    role: ClassVar[str | None] = None

    dependencies: ClassVar[list[str]] = []

    @abstractmethod
    def setup(self, context: GameContext) -> None:
        """Initialize the system once all systems have been instantiated.

        Use it to keep the context, subscribe to events and read settings.

        Args:
            context: Game context providing access to other systems and shared services.
        """

    def update(self, delta_time: float, context: GameContext) -> None:  # noqa: B027
        """Called every frame between the pending drain and the end of the frame.

        Args:
            delta_time: Time elapsed since the last frame, in seconds.
            context: Game context providing access to other systems.
        """

    def cleanup(self) -> None:  # noqa: B027
        """Called when the engine shuts down.

        Override to unsubscribe from events and cancel scheduled callbacks.
        """

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle key press events.

        Args:
            symbol: Arcade key constant for the pressed key.
            modifiers: Bitfield of modifier keys held.
            context: Game context providing access to other systems.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False
