"""Stasis - session state persistence and scene-transition synchronization for arcade games.

This package keeps one snapshot of a play session and brings it back after the
scene graph has been torn down and rebuilt:
- Snapshot capture from live objects that register themselves
- JSON key-value persistence that survives restarts
- Resume sequencing across asynchronous scene loads
- Pause gating with autosave

Quick start:
    # Create a settings.py file in your project root:
    # SCENES = ["menu", "GameScene"]
    # GAMEPLAY_SCENES = ["GameScene"]

    from stasis import run_game

    if __name__ == "__main__":
        run_game()

Headless usage:
    from stasis import create_engine

    engine = create_engine()
    engine.start()
    engine.tick(1 / 60)
"""

__version__ = "0.1.0"

from stasis.conf import settings
from stasis.engine import Engine
from stasis.entities import Player, SceneObject, ScoreKeeper
from stasis.events import EventBus
from stasis.helpers import create_engine, create_game, run_game
from stasis.saves import JsonFileStore, MemoryStore, Snapshot
from stasis.scheduler import FrameScheduler
from stasis.systems import (
    GameContext,
    MenuManager,
    PauseManager,
    SceneManager,
    StateManager,
    TransitionManager,
    TransitionState,
)
from stasis.types import Quaternion, Vector3
from stasis.views import GameView

__all__ = [
    "Engine",
    "EventBus",
    "FrameScheduler",
    "GameContext",
    "GameView",
    "JsonFileStore",
    "MemoryStore",
    "MenuManager",
    "PauseManager",
    "Player",
    "Quaternion",
    "SceneManager",
    "SceneObject",
    "ScoreKeeper",
    "Snapshot",
    "StateManager",
    "TransitionManager",
    "TransitionState",
    "Vector3",
    "__version__",
    "create_engine",
    "create_game",
    "run_game",
    "settings",
]
