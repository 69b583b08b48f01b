"""Pause system gating time progression.

The PauseManager owns the process-wide pause flag. Anything that advances
time-dependent state reads ``is_paused`` (or ``time_scale``) from here instead of
keeping its own copy.

Pausing autosaves through the state system. Pressing the pause key again while
paused leaves for the main menu, and loading the menu scene always unpauses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, cast

from stasis.conf import settings
from stasis.events import GamePausedEvent, GameResumedEvent, SceneLoadedEvent
from stasis.systems.base import BaseSystem
from stasis.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from stasis.events import Event
    from stasis.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class PauseManager(BaseSystem):
    """Manages the Running/Paused state."""

    name: ClassVar[str] = "pause"
    role: ClassVar[str | None] = "pause_manager"
    dependencies: ClassVar[list[str]] = ["state", "scene"]

    def __init__(self) -> None:
        """Initialize the pause manager in the running state."""
        self._paused = False

    def setup(self, context: GameContext) -> None:
        """Start running and watch for menu loads."""
        self.context = context
        self._paused = False
        context.event_bus.subscribe(SceneLoadedEvent, self._on_scene_loaded)

    def cleanup(self) -> None:
        """Unsubscribe from events."""
        self.context.event_bus.unregister_all(self)

    @property
    def is_paused(self) -> bool:
        """True while the game is paused."""
        return self._paused

    @property
    def time_scale(self) -> float:
        """Multiplier for time-dependent state: 0.0 when paused, 1.0 otherwise."""
        return 0.0 if self._paused else 1.0

    @property
    def prompt_text(self) -> str:
        """Hint text for the pause key in the current state."""
        return settings.PAUSED_PROMPT_TEXT if self._paused else settings.PAUSE_PROMPT_TEXT

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle the pause key outside the menu scene."""
        if symbol != settings.PAUSE_KEY or context.current_scene == settings.MENU_SCENE:
            return False
        self.on_pause_pressed()
        return True

    def on_pause_pressed(self) -> None:
        """Pause when running, leave for the main menu when already paused."""
        if self._paused:
            self.go_to_main_menu()
        else:
            self.pause()

    def pause(self) -> None:
        """Stop time and autosave."""
        if self._paused:
            return

        self._paused = True
        logger.info("Game paused")
        self.context.event_bus.publish(GamePausedEvent())
        self.context.state_manager.save()

    def resume(self) -> None:
        """Restart time after a pause."""
        if not self._paused:
            return

        self._paused = False
        logger.info("Game resumed")
        self.context.event_bus.publish(GameResumedEvent())

    def reset_to_normal_state(self) -> None:
        """Force the running state."""
        if self._paused:
            self.resume()

    def go_to_main_menu(self) -> None:
        """Unpause and load the menu scene."""
        self.reset_to_normal_state()
        self.context.scene_manager.load_scene(settings.MENU_SCENE)

    def _on_scene_loaded(self, event: Event) -> None:
        if cast("SceneLoadedEvent", event).scene_name == settings.MENU_SCENE:
            self.reset_to_normal_state()
