"""Transition system sequencing a resume across a scene load.

Restoring a saved game takes three steps that must happen in order, exactly once:

1. A resume is requested (TransitionState.RESUME_PENDING)
2. The saved scene finishes loading (TransitionState.SETTLING)
3. At the end of that frame, after every new object has started and registered,
   the snapshot is applied and the game is unpaused (back to TransitionState.IDLE)

Scene loads that happen while IDLE are ordinary scene changes and are ignored.
Starting a new game cancels whatever step is in flight.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, cast

from stasis.events import GameRestoredEvent, SceneLoadedEvent
from stasis.systems.base import BaseSystem
from stasis.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from stasis.events import Event
    from stasis.scheduler import ScheduledCallback
    from stasis.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class TransitionState(Enum):
    """Enum for resume transition states."""

    IDLE = auto()  # No resume in progress
    RESUME_PENDING = auto()  # Waiting for the saved scene to load
    SETTLING = auto()  # Scene loaded, waiting for the end of the frame


@SystemRegistry.register
class TransitionManager(BaseSystem):
    """Coordinates restoring the snapshot after a scene load.

    Attributes:
        state: Current transition state.
    """

    name: ClassVar[str] = "transition"
    role: ClassVar[str | None] = "transition_manager"
    dependencies: ClassVar[list[str]] = ["state", "pause", "scene"]

    def __init__(self) -> None:
        """Initialize the transition manager in the idle state."""
        self.state: TransitionState = TransitionState.IDLE
        self._settle_handle: ScheduledCallback | None = None

    def setup(self, context: GameContext) -> None:
        """Listen for scene loads."""
        self.context = context
        context.event_bus.subscribe(SceneLoadedEvent, self._on_scene_loaded)

    def cleanup(self) -> None:
        """Drop any pending restore and unsubscribe."""
        self.cancel()
        self.context.event_bus.unregister_all(self)

    @property
    def is_busy(self) -> bool:
        """True while a resume is pending or settling."""
        return self.state != TransitionState.IDLE

    def begin_resume(self) -> bool:
        """Mark a resume as pending.

        Returns:
            True if a resume is now pending, False if a restore is already settling.
        """
        if self.state == TransitionState.SETTLING:
            logger.warning("Resume requested while a restore is settling, ignoring")
            return False

        if self.state == TransitionState.IDLE:
            self.state = TransitionState.RESUME_PENDING
            logger.info("Resume pending")
        return True

    def cancel(self) -> None:
        """Abandon any pending resume and return to idle."""
        if self._settle_handle:
            self._settle_handle.cancel()
            self._settle_handle = None
        if self.state != TransitionState.IDLE:
            logger.info("Resume cancelled (was %s)", self.state.name)
        self.state = TransitionState.IDLE

    def _on_scene_loaded(self, event: Event) -> None:
        loaded = cast("SceneLoadedEvent", event)
        if self.state != TransitionState.RESUME_PENDING:
            logger.debug("Scene %s loaded with no resume pending", loaded.scene_name)
            return

        state_manager = self.context.state_manager
        if not state_manager.has_save():
            logger.warning("Resume pending but the save disappeared, cancelling")
            self.state = TransitionState.IDLE
            return

        saved_scene = state_manager.saved_scene_name()
        if loaded.scene_name != saved_scene:
            logger.warning("Resuming a save from %s into scene %s", saved_scene, loaded.scene_name)

        self.state = TransitionState.SETTLING
        self._settle_handle = self.context.scheduler.call_at_end_of_frame(self._finish_restore)
        logger.debug("Scene %s loaded, restore deferred to end of frame", loaded.scene_name)

    def _finish_restore(self) -> None:
        self._settle_handle = None
        if self.state != TransitionState.SETTLING:
            return

        state_manager = self.context.state_manager
        state_manager.restore()
        self.context.pause_manager.reset_to_normal_state()
        self.state = TransitionState.IDLE

        logger.info("Resume complete")
        self.context.event_bus.publish(GameRestoredEvent(state_manager.saved_scene_name()))
