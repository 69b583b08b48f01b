"""Objects spawned into loaded scenes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stasis.entities.base import SceneObject
from stasis.entities.player import Player
from stasis.entities.score_keeper import ScoreKeeper

if TYPE_CHECKING:
    from stasis.systems.game_context import GameContext


def spawn_gameplay_objects(context: GameContext) -> list[SceneObject]:
    """Scene factory for gameplay scenes: one player and one score keeper."""
    return [Player(), ScoreKeeper()]


__all__ = ["Player", "SceneObject", "ScoreKeeper", "spawn_gameplay_objects"]
