"""State system for capturing, persisting and restoring the session snapshot.

This module provides the StateManager, which holds the single current Snapshot
and weak back-references to the live objects that can supply or accept state.

Live objects push themselves in while they start (register_player(),
register_score_time_owner()). Registrations are last-write-wins and are dropped
when their scene unloads, so a restore never reaches a disposed object.

Key features:
- Snapshot loaded from the store when the system is set up
- Partial capture: unregistered roles are skipped, not errors
- Fail-closed loading: a corrupt or unreadable save is treated as "no save"
- Store failures on save are logged and reported through the return value
- Open-ended string extras kept alongside the fixed fields

What gets saved:
- Active scene name
- Player position and rotation
- Score and elapsed play time
- Extras set through set_extra()

Example usage:
    state_manager = context.state_manager

    state_manager.set_extra("LastCheckpoint", "bridge")
    if state_manager.save():
        logger.info("Saved")

    if state_manager.request_resume():
        context.scene_manager.load_scene(state_manager.saved_scene_name())
"""

from __future__ import annotations

import logging
import weakref
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, TypeVar, cast

from stasis.conf import settings
from stasis.events import GameSavedEvent, NewGameEvent, SceneUnloadedEvent
from stasis.exceptions import SnapshotDecodeError, StoreUnavailableError
from stasis.saves import codec
from stasis.saves.snapshot import Snapshot
from stasis.systems.base import BaseSystem
from stasis.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stasis.events import Event
    from stasis.systems.game_context import GameContext
    from stasis.systems.pause.manager import PauseManager
    from stasis.systems.state.base import PlayerHandle, ScoreTimeOwner
    from stasis.systems.transition.manager import TransitionManager

logger = logging.getLogger(__name__)

T = TypeVar("T")


@SystemRegistry.register
class StateManager(BaseSystem):
    """Holds the current snapshot and the registration table.

    Attributes:
        snapshot: The current snapshot, or None if no save exists.
    """

    name: ClassVar[str] = "state"
    role: ClassVar[str | None] = "state_manager"
    dependencies: ClassVar[list[str]] = ["scene"]

    def __init__(self) -> None:
        """Initialize the state manager with an empty registration table."""
        self.snapshot: Snapshot | None = None

        self._player_ref: weakref.ref[PlayerHandle] | None = None
        self._score_time_owner_ref: weakref.ref[ScoreTimeOwner] | None = None

    def setup(self, context: GameContext) -> None:
        """Load any existing save and start tracking scene unloads."""
        self.context = context
        context.event_bus.subscribe(SceneUnloadedEvent, self._on_scene_unloaded)
        self.load()

    def cleanup(self) -> None:
        """Unsubscribe from events."""
        self.context.event_bus.unregister_all(self)

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle the quick save hotkey outside the menu scene.

        Args:
            symbol: Keyboard symbol.
            modifiers: Key modifiers.
            context: Game context.

        Returns:
            True if the hotkey was handled.
        """
        if symbol != settings.QUICK_SAVE_KEY or context.current_scene == settings.MENU_SCENE:
            return False
        if self.save():
            logger.info("Quick save completed")
        else:
            logger.warning("Quick save failed")
        return True

    # Registration

    def register_player(self, player: PlayerHandle) -> None:
        """Register the live object owning the player transform."""
        self._player_ref = weakref.ref(player)
        logger.debug("Registered player: %r", player)

    def register_score_time_owner(self, owner: ScoreTimeOwner) -> None:
        """Register the live object owning score and elapsed time."""
        self._score_time_owner_ref = weakref.ref(owner)
        logger.debug("Registered score/time owner: %r", owner)

    @property
    def player(self) -> PlayerHandle | None:
        """The registered player, or None if unset or collected."""
        return self._player_ref() if self._player_ref else None

    @property
    def score_time_owner(self) -> ScoreTimeOwner | None:
        """The registered score/time owner, or None if unset or collected."""
        return self._score_time_owner_ref() if self._score_time_owner_ref else None

    def invalidate_references(self) -> None:
        """Forget every registered reference."""
        self._player_ref = None
        self._score_time_owner_ref = None

    # Queries

    def has_save(self) -> bool:
        """Check if a snapshot with a scene name exists."""
        return self.snapshot is not None and not self.snapshot.is_empty

    def saved_scene_name(self) -> str:
        """Scene recorded in the snapshot, or settings.DEFAULT_SCENE if there is none."""
        if self.snapshot is not None and self.snapshot.scene_name:
            return self.snapshot.scene_name
        return settings.DEFAULT_SCENE

    @property
    def is_resuming(self) -> bool:
        """True from a successful request_resume() until the saved state was applied."""
        transition_manager = cast("TransitionManager | None", self.context.get_system("transition"))
        return transition_manager is not None and transition_manager.is_busy

    # Extras

    @property
    def extras(self) -> Mapping[str, str]:
        """Read-only view of the snapshot's extras."""
        return MappingProxyType(self.snapshot.extras if self.snapshot else {})

    def set_extra(self, key: str, value: str) -> None:
        """Store an auxiliary value, written with the next save."""
        self._ensure_snapshot().extras[key] = value

    def get_extra(self, key: str, default: str | None = None) -> str | None:
        """Read an auxiliary value."""
        if self.snapshot is None:
            return default
        return self.snapshot.extras.get(key, default)

    # Save / load

    def save(self) -> bool:
        """Capture the current state and write it to the store.

        Roles without a live registration are skipped, leaving the previous (or
        default) values in the snapshot.

        Returns:
            True if the snapshot was written. False outside a gameplay scene (no scene
            loaded, or the menu) or if the store failed.
        """
        current_scene = self.context.scene_manager.current_scene
        if not current_scene or current_scene == settings.MENU_SCENE:
            logger.debug("Not in a gameplay scene (%r), skipping save", current_scene)
            return False

        snapshot = self._capture()
        try:
            self.context.store.set(settings.SAVE_KEY, codec.encode(snapshot, indent=settings.SAVE_INDENT))
            self.context.store.flush()
        except StoreUnavailableError:
            logger.exception("Failed to save game state")
            return False
        else:
            logger.info("Game state saved (scene %s)", snapshot.scene_name)
            self.context.event_bus.publish(GameSavedEvent(snapshot.scene_name))
            return True

    def load(self) -> bool:
        """Read the snapshot from the store.

        Returns:
            True if a snapshot was loaded. False if none exists or it could not be
            read or decoded, in which case no save is held in memory.
        """
        try:
            blob = self.context.store.get(settings.SAVE_KEY)
        except StoreUnavailableError:
            logger.exception("Failed to read saved game state")
            self.snapshot = None
            return False

        if blob is None:
            logger.debug("No saved game state found")
            self.snapshot = None
            return False

        try:
            self.snapshot = codec.decode(blob)
        except SnapshotDecodeError as e:
            logger.warning("Ignoring unreadable saved game state: %s", e)
            self.snapshot = None
            return False
        else:
            logger.info("Game state loaded (scene %s)", self.snapshot.scene_name)
            return True

    def restore(self) -> bool:
        """Apply the snapshot to the currently registered objects.

        Returns:
            True if a snapshot was applied to at least one object.
        """
        snapshot = self.snapshot
        if snapshot is None:
            return False

        applied = False
        player = self._live(self.player, "player")
        if player is not None:
            player.position = snapshot.player_position
            player.rotation = snapshot.player_rotation
            applied = True

        owner = self._live(self.score_time_owner, "score/time owner")
        if owner is not None:
            owner.set_score(snapshot.score)
            owner.set_elapsed_time(snapshot.elapsed_time)
            applied = True

        logger.info("Restored game state for scene %s", snapshot.scene_name)
        return applied

    def start_new_game(self) -> None:
        """Discard the snapshot in memory and in the store."""
        self.snapshot = None

        transition_manager = cast("TransitionManager | None", self.context.get_system("transition"))
        if transition_manager is not None:
            transition_manager.cancel()

        pause_manager = cast("PauseManager | None", self.context.get_system("pause"))
        if pause_manager is not None:
            pause_manager.reset_to_normal_state()

        try:
            self.context.store.delete(settings.SAVE_KEY)
            self.context.store.flush()
        except StoreUnavailableError:
            logger.exception("Failed to clear saved game state")
        else:
            logger.info("Save data cleared")

        self.context.event_bus.publish(NewGameEvent())

    def request_resume(self) -> bool:
        """Arrange for the snapshot to be applied after the next scene load.

        Returns:
            True if a resume is pending, False if there is no save to resume.
        """
        if not self.has_save():
            logger.debug("Resume requested without a save, ignoring")
            return False

        transition_manager = cast("TransitionManager | None", self.context.get_system("transition"))
        if transition_manager is None:
            logger.warning("Resume requested but no transition system is installed")
            return False
        return transition_manager.begin_resume()

    def _capture(self) -> Snapshot:
        snapshot = self._ensure_snapshot()
        snapshot.scene_name = self.context.scene_manager.current_scene

        player = self._live(self.player, "player")
        if player is not None:
            snapshot.player_position = player.position
            snapshot.player_rotation = player.rotation

        owner = self._live(self.score_time_owner, "score/time owner")
        if owner is not None:
            snapshot.score = owner.score
            snapshot.elapsed_time = owner.elapsed_time

        return snapshot

    def _ensure_snapshot(self) -> Snapshot:
        if self.snapshot is None:
            self.snapshot = Snapshot()
        return self.snapshot

    @staticmethod
    def _live(ref: T | None, role: str) -> T | None:
        if ref is None:
            logger.debug("No %s registered, skipping", role)
            return None
        if getattr(ref, "destroyed", False):
            logger.warning("Registered %s was destroyed, skipping", role)
            return None
        return ref

    def _on_scene_unloaded(self, event: Event) -> None:
        logger.debug("Scene %s unloading, dropping registrations", getattr(event, "scene_name", "?"))
        self.invalidate_references()
