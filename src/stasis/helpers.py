"""Helper functions for creating and running Stasis games.

Users can choose between the simple run_game() function, create_game() for
access to the window, or create_engine() for headless use.
"""

import logging

import arcade
from rich.logging import RichHandler

from stasis.conf import settings
from stasis.engine import Engine
from stasis.saves.store import BaseStore
from stasis.views import GameView


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_engine(store: BaseStore | None = None) -> Engine:
    """Create a headless engine using the configured settings.

    Args:
        store: Persistence store override. Defaults to the file at settings.SAVE_FILE.

    Returns:
        Engine with every installed system set up and any existing save loaded.
    """
    return Engine(store=store)


def create_game() -> arcade.Window:
    """Create and configure a Stasis game window.

    Creates an arcade.Window using the settings from your project's settings.py
    (or the module specified by STASIS_SETTINGS_MODULE), sets up logging and
    shows a GameView driving a new engine.

    Returns:
        Configured arcade.Window showing the game view.

    Example:
        >>> from stasis import create_game
        >>> window = create_game()
        >>> arcade.run()
    """
    setup_logging(settings.LOG_LEVEL)

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
    )
    window.show_view(GameView(create_engine()))
    return window


def run_game() -> None:
    """Create and run a Stasis game.

    Side effects:
        - Configures logging via setup_logging()
        - Creates arcade.Window and the engine
        - Starts arcade.run() game loop (blocks until window closes)

    Example:
        >>> from stasis import run_game
        >>> if __name__ == "__main__":
        ...     run_game()
    """
    create_game()
    arcade.run()
