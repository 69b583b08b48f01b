"""Headless runtime wiring systems, services and the frame loop together.

The Engine owns everything with application lifetime: the event bus, the frame
scheduler, the persistence store, the system instances and the GameContext
handed to all of them. It has no window; GameView drives it from arcade's
callbacks, and tests drive it directly.

Frame order (tick):
1. Scheduler pending drain: completes scene loads and runs object start() callbacks
2. System updates: scene objects, time accrual
3. Scheduler end of frame: deferred restores

Example usage:
    engine = Engine(store=MemoryStore())
    engine.start()
    for _ in range(3):
        engine.tick(1 / 60)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, cast

from stasis.conf import settings
from stasis.entities import spawn_gameplay_objects
from stasis.events import EventBus
from stasis.saves.store import JsonFileStore
from stasis.scheduler import FrameScheduler
from stasis.systems import GameContext, SystemLoader

if TYPE_CHECKING:
    from stasis.saves.store import BaseStore
    from stasis.systems import SceneManager

logger = logging.getLogger(__name__)


class Engine:
    """Owns the systems and advances them frame by frame.

    Attributes:
        event_bus: Shared event bus.
        scheduler: Shared frame scheduler.
        store: Persistence store for the snapshot.
        system_loader: Loader holding the system instances.
        context: GameContext passed to every system.
        started: Whether start() has been called.
    """

    def __init__(self, store: BaseStore | None = None, installed_systems: list[str] | None = None) -> None:
        """Build services and set up every installed system.

        Args:
            store: Persistence store. Defaults to a JsonFileStore at settings.SAVE_FILE.
            installed_systems: System modules to load. Defaults to settings.INSTALLED_SYSTEMS.
        """
        self.event_bus = EventBus()
        self.scheduler = FrameScheduler()
        self.store = store if store is not None else JsonFileStore(Path(settings.SAVE_FILE))
        self.started = False

        self.system_loader = SystemLoader(installed_systems)
        system_instances = self.system_loader.instantiate_all()

        self.context = GameContext(
            event_bus=self.event_bus,
            scheduler=self.scheduler,
            store=self.store,
        )
        for name, system in system_instances.items():
            self.context.register_system(name, system)

        self.system_loader.setup_all(self.context)

        scene_manager = cast("SceneManager | None", self.context.get_system("scene"))
        if scene_manager is not None:
            for scene_name in settings.GAMEPLAY_SCENES:
                scene_manager.register_scene(scene_name, spawn_gameplay_objects)

    def start(self) -> None:
        """Request the initial scene. It loads during the first tick."""
        if self.started:
            return
        self.started = True
        logger.info("Starting engine with scene %s", settings.INITIAL_SCENE)
        self.context.scene_manager.load_scene(settings.INITIAL_SCENE)

    def tick(self, delta_time: float) -> None:
        """Advance one frame.

        Args:
            delta_time: Seconds since the previous frame.
        """
        self.scheduler.run_pending(delta_time)
        self.system_loader.update_all(delta_time, self.context)
        self.scheduler.run_end_of_frame()

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        """Offer a key press to the systems.

        Returns:
            True if a system handled the key.
        """
        return self.system_loader.on_key_press_all(symbol, modifiers, self.context)

    def shutdown(self) -> None:
        """Clean up every system and drop pending callbacks."""
        self.system_loader.cleanup_all()
        self.scheduler.clear()
        self.event_bus.clear()
        logger.info("Engine shut down")
