"""Scene management system.

This module provides the SceneManager class, which loads scenes by name or build
index and owns the objects living in the current scene.
"""

from stasis.systems.scene.manager import SceneManager

__all__ = ["SceneManager"]
