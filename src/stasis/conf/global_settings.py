"""Default settings for Stasis.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from stasis.conf import global_settings

    SCENES = [*global_settings.SCENES, "Level2"]
    GAMEPLAY_SCENES = ["GameScene", "Level2"]
"""

import arcade

# Window settings
SCREEN_WIDTH = 1280
"""Width of the game window in pixels."""

SCREEN_HEIGHT = 720
"""Height of the game window in pixels."""

WINDOW_TITLE = "Stasis Game"
"""Title displayed in the window title bar."""

# Logging
LOG_LEVEL = "INFO"
"""Root log level used by setup_logging()."""

# Persistence settings
SAVE_FILE = "saves/prefs.json"
"""Path of the key-value store file, relative to the current working directory."""

SAVE_KEY = "SavedGameData"
"""Store key holding the serialized snapshot."""

SAVE_INDENT = 2
"""JSON indentation used when encoding snapshots (None for compact output)."""

# Scene settings
SCENES = ["menu", "PROLOGUE SCENE", "GameScene"]
"""Scene names in build order. Indices used by load_next_scene() follow this list."""

GAMEPLAY_SCENES = ["GameScene"]
"""Scenes that spawn a player and a score keeper when loaded."""

INITIAL_SCENE = "menu"
"""Scene loaded when the engine starts."""

MENU_SCENE = "menu"
"""Main menu scene. Loading it always clears the pause flag."""

DEFAULT_SCENE = "GameScene"
"""Scene used for a new game, and reported as the saved scene when no save exists."""

PROLOGUE_SCENE = "PROLOGUE SCENE"
"""Scene loaded by the menu's start action."""

NEXT_SCENE_DELAY = 2.0
"""Delay in seconds before load_next_scene() completes when no delay is given."""

# Input settings
PAUSE_KEY = arcade.key.P
"""Key toggling pause. Pressing it while paused returns to the main menu."""

QUICK_SAVE_KEY = arcade.key.F5
"""Key triggering an immediate save."""

MENU_PLAY_KEY = arcade.key.ENTER
"""Key activating the play/resume action in the menu scene."""

MENU_START_KEY = arcade.key.S
"""Key starting the prologue from the menu scene."""

MENU_QUIT_KEY = arcade.key.ESCAPE
"""Key quitting the application from the menu scene."""

# Text settings
PAUSE_PROMPT_TEXT = "P to Pause"
"""Prompt shown while the game is running."""

PAUSED_PROMPT_TEXT = "Paused - Press P to go to Menu"
"""Prompt shown while the game is paused."""

MENU_TEXT_PLAY = "Play"
"""Play button label when no save exists."""

MENU_TEXT_RESUME = "Resume"
"""Play button label when a save exists."""

# Installed systems
INSTALLED_SYSTEMS = [
    "stasis.systems.scene",
    "stasis.systems.state",
    "stasis.systems.pause",
    "stasis.systems.transition",
    "stasis.systems.menu",
]
"""List of module paths to import for system registration.

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.systems.checkpoints",
    ]
"""
