"""Score and play-time tracking entity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stasis.entities.base import SceneObject

if TYPE_CHECKING:
    from stasis.systems.game_context import GameContext


class ScoreKeeper(SceneObject):
    """Owns the score and the elapsed play time of the running scene.

    Elapsed time only advances while the pause manager reports the game as running.
    """

    def __init__(self, score: int = 0, elapsed_time: float = 0.0) -> None:
        """Initialize the counters."""
        super().__init__()
        self._score = score
        self._elapsed_time = elapsed_time

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def elapsed_time(self) -> float:
        """Seconds of unpaused play."""
        return self._elapsed_time

    def start(self, context: GameContext) -> None:
        """Register with the state system."""
        super().start(context)
        context.state_manager.register_score_time_owner(self)

    def update(self, delta_time: float, context: GameContext) -> None:
        """Accrue play time unless paused."""
        if not context.pause_manager.is_paused:
            self._elapsed_time += delta_time

    def set_score(self, score: int) -> None:
        """Overwrite the score."""
        self._score = score

    def set_elapsed_time(self, elapsed_time: float) -> None:
        """Overwrite the elapsed play time."""
        self._elapsed_time = elapsed_time
