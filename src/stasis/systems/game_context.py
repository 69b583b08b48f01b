"""Game context for passing shared services to systems and scene objects.

The GameContext replaces process-wide singletons: the engine builds one context
at startup and hands it to every system and every spawned scene object. Its
lifetime is the application lifetime.

Key components stored in the context:
- Systems registry: all pluggable systems accessed via get_system() or role attributes
- Shared services: event bus, frame scheduler, persistence store
- Scene state: name of the currently loaded scene

Example usage:
    context = GameContext(event_bus=EventBus(), scheduler=FrameScheduler(), store=MemoryStore())
    context.register_system("state", state_manager)

    context.state_manager.save()
    pause = context.get_system("pause")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stasis.events import EventBus
    from stasis.saves.store import BaseStore
    from stasis.scheduler import FrameScheduler
    from stasis.systems.base import BaseSystem
    from stasis.systems.menu.manager import MenuManager
    from stasis.systems.pause.manager import PauseManager
    from stasis.systems.scene.manager import SceneManager
    from stasis.systems.state.manager import StateManager
    from stasis.systems.transition.manager import TransitionManager


class GameContext:
    """Central context object providing access to all systems and shared services.

    Systems with a ``role`` are also exposed as attributes (``context.state_manager``,
    ``context.scene_manager``, ...) once registered.

    Attributes:
        event_bus: Publish/subscribe event system for decoupled communication.
        scheduler: Frame scheduler for deferred callbacks.
        store: Persistence store holding the saved snapshot.
        current_scene: Name of the currently loaded scene, empty before the first load.
    """

    state_manager: StateManager
    scene_manager: SceneManager
    pause_manager: PauseManager
    transition_manager: TransitionManager
    menu_manager: MenuManager

    def __init__(
        self,
        event_bus: EventBus,
        scheduler: FrameScheduler,
        store: BaseStore,
        current_scene: str = "",
    ) -> None:
        """Initialize game context with shared services.

        Args:
            event_bus: Central event system shared by all systems.
            scheduler: Frame scheduler driving deferred callbacks.
            store: Persistence store used by the state system.
            current_scene: Name of the currently loaded scene.
        """
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.store = store
        self.current_scene = current_scene

        self._systems: dict[str, BaseSystem] = {}

    def update_scene(self, scene_name: str) -> None:
        """Update the current scene name in the context.

        Args:
            scene_name: The name of the scene being entered.
        """
        self.current_scene = scene_name

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a system with the context.

        Args:
            name: Unique identifier for the system (e.g., "state", "pause").
            system: The system instance to register.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name.

        Args:
            name: The system's unique identifier.

        Returns:
            The system instance if found, None otherwise.
        """
        return self._systems.get(name)

    def get_systems(self) -> dict[str, BaseSystem]:
        """Get all registered systems."""
        return self._systems
