"""Player entity holding the transform the state system saves."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stasis.entities.base import SceneObject
from stasis.types import Quaternion, Vector3

if TYPE_CHECKING:
    from stasis.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class Player(SceneObject):
    """The player's transform.

    Attributes:
        position: World position.
        rotation: Orientation.
    """

    def __init__(self, position: Vector3 | None = None, rotation: Quaternion | None = None) -> None:
        """Initialize the player at a spawn transform."""
        super().__init__()
        self.position = position or Vector3()
        self.rotation = rotation or Quaternion()

    def start(self, context: GameContext) -> None:
        """Register with the state system."""
        super().start(context)
        context.state_manager.register_player(self)
        logger.debug("Player registered at %s", self.position)
