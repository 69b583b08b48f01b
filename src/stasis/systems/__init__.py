"""Game systems for persisting and restoring session state."""

from stasis.systems.base import BaseSystem
from stasis.systems.game_context import GameContext
from stasis.systems.loader import SystemLoader
from stasis.systems.menu import MenuManager
from stasis.systems.pause import PauseManager
from stasis.systems.registry import SystemRegistry
from stasis.systems.scene import SceneManager
from stasis.systems.state import StateManager
from stasis.systems.transition import TransitionManager, TransitionState

__all__ = [
    "BaseSystem",
    "GameContext",
    "MenuManager",
    "PauseManager",
    "SceneManager",
    "StateManager",
    "SystemLoader",
    "SystemRegistry",
    "TransitionManager",
    "TransitionState",
]
