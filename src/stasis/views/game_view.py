"""Main view driving the engine from arcade's window callbacks.

GameView forwards arcade's lifecycle callbacks to the headless Engine:
- on_show_view(): starts the engine on first show
- on_update(): advances one frame
- on_key_press(): offers keys to the systems
- on_draw(): shows the current scene and the pause hint

Rendering is deliberately plain; visual effects belong to the game built on top.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from stasis.conf import settings

if TYPE_CHECKING:
    from stasis.engine import Engine

logger = logging.getLogger(__name__)


class GameView(arcade.View):
    """arcade.View wrapper around an Engine.

    Attributes:
        engine: The engine being driven.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the view."""
        super().__init__()
        self.engine = engine

    def on_show_view(self) -> None:
        """Start the engine the first time the view is shown."""
        arcade.set_background_color(arcade.color.BLACK)
        self.engine.start()

    def on_update(self, delta_time: float) -> None:
        """Advance the engine one frame."""
        self.engine.tick(delta_time)

    def on_key_press(self, symbol: int, modifiers: int) -> bool | None:
        """Forward key presses to the systems."""
        if self.engine.on_key_press(symbol, modifiers):
            return True
        return None

    def on_draw(self) -> None:
        """Draw the scene name and the pause or menu hint."""
        self.clear()
        context = self.engine.context

        arcade.draw_text(context.current_scene, 20, self.window.height - 40, arcade.color.WHITE, 18)

        if context.current_scene == settings.MENU_SCENE:
            hint = f"[Enter] {context.menu_manager.play_button_label()}   [Esc] Quit"
        else:
            hint = context.pause_manager.prompt_text
        arcade.draw_text(hint, 20, 20, arcade.color.LIGHT_GRAY, 14)
