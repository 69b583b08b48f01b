"""Menu system deciding between resuming a save and starting a new game."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import arcade

from stasis.conf import settings
from stasis.systems.base import BaseSystem
from stasis.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from stasis.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class MenuManager(BaseSystem):
    """Main menu actions.

    Keys are only handled while the menu scene is loaded.
    """

    name: ClassVar[str] = "menu"
    role: ClassVar[str | None] = "menu_manager"
    dependencies: ClassVar[list[str]] = ["state", "scene", "pause"]

    def setup(self, context: GameContext) -> None:
        """Keep the context."""
        self.context = context

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle menu keys."""
        if context.current_scene != settings.MENU_SCENE:
            return False

        if symbol == settings.MENU_PLAY_KEY:
            self.play()
            return True
        if symbol == settings.MENU_START_KEY:
            self.start_prologue()
            return True
        if symbol == settings.MENU_QUIT_KEY:
            self.quit()
            return True
        return False

    def play_button_label(self) -> str:
        """Label for the play button: resume when a save exists."""
        if self.context.state_manager.has_save():
            return settings.MENU_TEXT_RESUME
        return settings.MENU_TEXT_PLAY

    def play(self) -> str:
        """Resume the saved game, or start a new one if there is no save.

        A save whose scene cannot be loaded is abandoned for a new game, so no
        resume is left pending for an unrelated scene change.

        Returns:
            Name of the scene being loaded.
        """
        state_manager = self.context.state_manager
        scene_manager = self.context.scene_manager
        if state_manager.has_save():
            scene_name = state_manager.saved_scene_name()
            state_manager.request_resume()
            if scene_manager.load_scene(scene_name):
                logger.info("Resuming saved game in %s", scene_name)
                return scene_name
            self.context.transition_manager.cancel()
            logger.warning("Saved scene %s cannot be loaded, starting a new game", scene_name)

        state_manager.start_new_game()
        scene_name = settings.DEFAULT_SCENE
        logger.info("Starting new game in %s", scene_name)
        scene_manager.load_scene(scene_name)
        return scene_name

    def start_prologue(self) -> None:
        """Load the prologue scene."""
        self.context.scene_manager.load_scene(settings.PROLOGUE_SCENE)

    def quit(self) -> None:
        """Close the window and stop the event loop."""
        logger.info("Quitting")
        arcade.exit()
