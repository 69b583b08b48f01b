"""Loader for pluggable systems."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from stasis.conf import settings
from stasis.exceptions import CircularDependencyError, MissingDependencyError
from stasis.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from stasis.systems.base import BaseSystem
    from stasis.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class SystemLoader:
    """Loads and drives system instances.

    The SystemLoader handles:
    1. Importing system modules to trigger registration
    2. Instantiating systems in dependency order
    3. Forwarding setup, per-frame updates, key presses and cleanup to every system
    """

    def __init__(self, installed_systems: list[str] | None = None) -> None:
        """Initialize the system loader.

        Args:
            installed_systems: Module paths to import. Defaults to settings.INSTALLED_SYSTEMS.
        """
        self.installed_systems = installed_systems
        self._instances: dict[str, BaseSystem] = {}
        self._load_order: list[str] = []

    def load_modules(self) -> None:
        """Import all configured system modules to trigger registration."""
        installed = self.installed_systems if self.installed_systems is not None else settings.INSTALLED_SYSTEMS
        for module_path in installed:
            try:
                importlib.import_module(module_path)
                logger.debug("Loaded system module: %s", module_path)
            except ImportError:
                logger.exception("Could not load system module '%s'", module_path)
                raise

    def instantiate_all(self) -> dict[str, BaseSystem]:
        """Create instances of all registered systems.

        Returns:
            Dictionary mapping system names to their instances, in dependency order.

        Raises:
            MissingDependencyError: If a system depends on an unregistered system.
            CircularDependencyError: If system dependencies form a cycle.
        """
        self.load_modules()

        all_systems = SystemRegistry.get_all()
        if not all_systems:
            logger.warning("No systems registered")
            return {}

        self._load_order = self._resolve_order(all_systems)
        for name in self._load_order:
            self._instances[name] = all_systems[name]()
            logger.debug("Instantiated system: %s", name)

        logger.info("Instantiated %d systems", len(self._instances))
        return dict(self._instances)

    def setup_all(self, context: GameContext) -> None:
        """Call setup() on every system in dependency order."""
        for name in self._load_order:
            self._instances[name].setup(context)
            logger.debug("Set up system: %s", name)

    def update_all(self, delta_time: float, context: GameContext) -> None:
        """Call update() on every system in dependency order."""
        for name in self._load_order:
            self._instances[name].update(delta_time, context)

    def on_key_press_all(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Offer a key press to systems until one handles it.

        Returns:
            True if a system handled the key.
        """
        for name in self._load_order:
            if self._instances[name].on_key_press(symbol, modifiers, context):
                logger.debug("Key %s handled by system: %s", symbol, name)
                return True
        return False

    def cleanup_all(self) -> None:
        """Call cleanup() on every system in reverse dependency order."""
        for name in reversed(self._load_order):
            self._instances[name].cleanup()
        logger.debug("Cleaned up all systems")

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a system instance by name."""
        return self._instances.get(name)

    @staticmethod
    def _resolve_order(all_systems: dict[str, type[BaseSystem]]) -> list[str]:
        order: list[str] = []
        visiting: list[str] = []

        def visit(name: str) -> None:
            if name in order:
                return
            if name in visiting:
                cycle = " -> ".join([*visiting[visiting.index(name) :], name])
                msg = f"Circular system dependency: {cycle}"
                raise CircularDependencyError(msg)

            visiting.append(name)
            for dependency in all_systems[name].dependencies:
                if dependency not in all_systems:
                    msg = f"System '{name}' depends on unregistered system '{dependency}'"
                    raise MissingDependencyError(msg)
                visit(dependency)
            visiting.pop()
            order.append(name)

        for name in sorted(all_systems):
            visit(name)
        return order
