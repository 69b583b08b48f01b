"""State system for snapshot capture, persistence and restore."""

from stasis.systems.state.base import PlayerHandle, ScoreTimeOwner
from stasis.systems.state.manager import StateManager

__all__ = ["PlayerHandle", "ScoreTimeOwner", "StateManager"]
