"""Scene management system for loading scenes and their live objects.

This module provides the SceneManager class, which plays the role of the host
scene loader:
- Scenes are identified by name or by index in the build list (settings.SCENES)
- load_scene() only requests a load; the load completes on a later frame
- Completing a load destroys the old scene's objects, spawns the new scene's
  objects and schedules their start() callbacks before SceneLoadedEvent fires

The scheduling order is what the transition coordinator relies on: when
SceneLoadedEvent is published, every new object's start() is queued but has not
run yet, so registrations are only complete at the end of the frame.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, ClassVar

from stasis.conf import settings
from stasis.events import SceneLoadedEvent, SceneUnloadedEvent
from stasis.systems.base import BaseSystem
from stasis.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from stasis.entities import SceneObject
    from stasis.scheduler import ScheduledCallback
    from stasis.systems.game_context import GameContext

    SceneFactory = Callable[[GameContext], list[SceneObject]]

logger = logging.getLogger(__name__)


@SystemRegistry.register
class SceneManager(BaseSystem):
    """Manages scene loading and the objects living in the current scene.

    Attributes:
        scenes: Scene names in build order.
        current_scene: Name of the loaded scene, empty before the first load.
        current_index: Build index of the loaded scene, -1 if unknown.
        pending_scene: Scene waiting to be loaded, or None.
        objects: Objects spawned by the current scene.
    """

    name: ClassVar[str] = "scene"
    role: ClassVar[str | None] = "scene_manager"

    def __init__(self) -> None:
        """Initialize the scene manager."""
        self.scenes: list[str] = []
        self.current_scene: str = ""
        self.current_index: int = -1
        self.pending_scene: str | None = None
        self.objects: list[SceneObject] = []

        self._factories: dict[str, SceneFactory] = {}
        self._load_handle: ScheduledCallback | None = None

    def setup(self, context: GameContext) -> None:
        """Read the build list from settings."""
        self.context = context
        self.scenes = list(settings.SCENES)

    @property
    def scene_count(self) -> int:
        """Number of scenes in the build list."""
        return len(self.scenes)

    @property
    def is_loading(self) -> bool:
        """True while a requested load has not completed."""
        return self.pending_scene is not None

    def register_scene(self, scene_name: str, factory: SceneFactory) -> None:
        """Register the function that spawns a scene's objects.

        Args:
            scene_name: Scene the factory belongs to.
            factory: Callable receiving the context and returning the new objects.
        """
        self._factories[scene_name] = factory
        logger.debug("Registered factory for scene '%s'", scene_name)

    def get_scene_index(self, scene_name: str) -> int:
        """Return the build index of a scene, or -1 if it is not in the build list."""
        try:
            return self.scenes.index(scene_name)
        except ValueError:
            return -1

    def load_scene(self, scene: str | int, delay: float = 0.0) -> bool:
        """Request a scene load.

        The load completes during a later frame's pending drain, after ``delay``
        seconds of frame time.

        Args:
            scene: Scene name, or index in the build list.
            delay: Seconds to wait before loading.

        Returns:
            True if the load was scheduled, False if the scene is unknown or another
            load is already pending.
        """
        scene_name = self._resolve(scene)
        if scene_name is None:
            return False

        if self.pending_scene is not None:
            logger.warning("Scene load already in progress, ignoring request to %s", scene_name)
            return False

        logger.info("Loading scene %s (delay: %.2fs)", scene_name, delay)
        self.pending_scene = scene_name
        self._load_handle = self.context.scheduler.call_later(delay, self._perform_load)
        return True

    def load_next_scene(self, delay: float | None = None) -> bool:
        """Request the scene after the current one in build order.

        Args:
            delay: Seconds to wait before loading. Defaults to settings.NEXT_SCENE_DELAY.

        Returns:
            True if the load was scheduled, False if there is no next scene.
        """
        next_index = self.current_index + 1
        if next_index >= self.scene_count:
            logger.warning("No next scene available in the build list (current index %d)", self.current_index)
            return False
        return self.load_scene(next_index, settings.NEXT_SCENE_DELAY if delay is None else delay)

    def cancel_pending_load(self) -> None:
        """Drop a requested load that has not completed."""
        if self._load_handle:
            self._load_handle.cancel()
            self._load_handle = None
        self.pending_scene = None

    def update(self, delta_time: float, context: GameContext) -> None:
        """Update the current scene's started objects."""
        for obj in list(self.objects):
            if obj.started and not obj.destroyed:
                obj.update(delta_time, context)

    def cleanup(self) -> None:
        """Cancel pending loads and destroy the current scene's objects."""
        self.cancel_pending_load()
        self._unload_current()

    def _resolve(self, scene: str | int) -> str | None:
        if isinstance(scene, int):
            if 0 <= scene < self.scene_count:
                return self.scenes[scene]
            logger.error("Scene index %d is outside the build list (%d scenes)", scene, self.scene_count)
            return None

        if scene in self.scenes or scene in self._factories:
            return scene
        logger.error("Unknown scene '%s'", scene)
        return None

    def _perform_load(self) -> None:
        """Swap the current scene for the pending one."""
        scene_name = self.pending_scene
        self.pending_scene = None
        self._load_handle = None
        if scene_name is None:
            return

        self._unload_current()

        self.current_scene = scene_name
        self.current_index = self.get_scene_index(scene_name)
        self.context.update_scene(scene_name)

        factory = self._factories.get(scene_name)
        self.objects = factory(self.context) if factory else []
        for obj in self.objects:
            self.context.scheduler.call_soon(partial(obj.start, self.context))

        logger.info("Scene %s loaded with %d objects", scene_name, len(self.objects))
        self.context.event_bus.publish(SceneLoadedEvent(scene_name, self.current_index))

    def _unload_current(self) -> None:
        if not self.current_scene:
            return

        self.context.event_bus.publish(SceneUnloadedEvent(self.current_scene))
        for obj in self.objects:
            obj.destroy()
        logger.debug("Scene %s unloaded (%d objects destroyed)", self.current_scene, len(self.objects))
        self.objects = []
