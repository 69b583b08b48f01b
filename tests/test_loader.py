"""Unit tests for SystemRegistry, SystemLoader and GameContext."""

from __future__ import annotations

import unittest
from typing import ClassVar
from unittest.mock import MagicMock, patch

import pytest

from stasis.exceptions import CircularDependencyError, MissingDependencyError
from stasis.systems import BaseSystem, GameContext, SystemLoader, SystemRegistry


class _Recorder(BaseSystem):
    name: ClassVar[str] = "recorder"
    log: ClassVar[list[str]] = []

    def setup(self, context: GameContext) -> None:
        self.log.append(f"setup:{self.name}")

    def update(self, delta_time: float, context: GameContext) -> None:
        self.log.append(f"update:{self.name}")

    def cleanup(self) -> None:
        self.log.append(f"cleanup:{self.name}")


class _Alpha(_Recorder):
    name: ClassVar[str] = "alpha"
    role: ClassVar[str | None] = "alpha_manager"
    dependencies: ClassVar[list[str]] = ["beta"]

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        return symbol == 1


class _Beta(_Recorder):
    name: ClassVar[str] = "beta"

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        return symbol in {1, 2}


class TestSystemLoader(unittest.TestCase):
    """Unit test class for dependency-ordered system loading."""

    def setUp(self) -> None:
        """Isolate the registry and reset the call log."""
        patcher = patch.dict(SystemRegistry._systems, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)
        _Recorder.log.clear()
        self.loader = SystemLoader(installed_systems=[])

    def test_dependencies_are_instantiated_first(self) -> None:
        """Test that a system comes after the systems it depends on."""
        SystemRegistry.register(_Alpha)
        SystemRegistry.register(_Beta)

        instances = self.loader.instantiate_all()

        assert list(instances) == ["beta", "alpha"]
        assert isinstance(instances["alpha"], _Alpha)

    def test_missing_dependency_raises(self) -> None:
        """Test that depending on an unregistered system fails loudly."""
        SystemRegistry.register(_Alpha)

        with pytest.raises(MissingDependencyError):
            self.loader.instantiate_all()

    def test_circular_dependency_raises(self) -> None:
        """Test that a dependency cycle is detected."""

        class Loop(_Recorder):
            name: ClassVar[str] = "beta"
            dependencies: ClassVar[list[str]] = ["alpha"]

        SystemRegistry.register(_Alpha)
        SystemRegistry.register(Loop)

        with pytest.raises(CircularDependencyError):
            self.loader.instantiate_all()

    def test_no_systems_registered(self) -> None:
        """Test that an empty registry yields no instances."""
        assert self.loader.instantiate_all() == {}

    def test_lifecycle_calls_follow_load_order(self) -> None:
        """Test that setup and update run in order and cleanup in reverse."""
        SystemRegistry.register(_Alpha)
        SystemRegistry.register(_Beta)
        self.loader.instantiate_all()
        context = MagicMock()

        self.loader.setup_all(context)
        self.loader.update_all(0.1, context)
        self.loader.cleanup_all()

        assert _Recorder.log == [
            "setup:beta",
            "setup:alpha",
            "update:beta",
            "update:alpha",
            "cleanup:alpha",
            "cleanup:beta",
        ]

    def test_key_press_stops_at_first_handler(self) -> None:
        """Test that a handled key is not offered to later systems."""
        SystemRegistry.register(_Alpha)
        SystemRegistry.register(_Beta)
        self.loader.instantiate_all()

        with patch.object(_Alpha, "on_key_press", return_value=True) as alpha_key:
            assert self.loader.on_key_press_all(2, 0, MagicMock())
            alpha_key.assert_not_called()

        assert not self.loader.on_key_press_all(3, 0, MagicMock())

    def test_get_system(self) -> None:
        """Test that instances can be looked up by name."""
        SystemRegistry.register(_Beta)
        self.loader.instantiate_all()

        assert isinstance(self.loader.get_system("beta"), _Beta)
        assert self.loader.get_system("alpha") is None


class TestSystemRegistry(unittest.TestCase):
    """Unit test class for SystemRegistry."""

    def setUp(self) -> None:
        """Isolate the registry."""
        patcher = patch.dict(SystemRegistry._systems, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_register_returns_class(self) -> None:
        """Test that register() works as a decorator."""
        assert SystemRegistry.register(_Beta) is _Beta
        assert SystemRegistry.is_registered("beta")
        assert SystemRegistry.get("beta") is _Beta

    def test_register_requires_name(self) -> None:
        """Test that a system without a name is rejected."""

        class Nameless(BaseSystem):
            def setup(self, context: GameContext) -> None:
                pass

        with pytest.raises(ValueError, match="must have a 'name'"):
            SystemRegistry.register(Nameless)

    def test_get_all_returns_copy(self) -> None:
        """Test that callers cannot mutate the registry through get_all()."""
        SystemRegistry.register(_Beta)

        SystemRegistry.get_all().clear()

        assert SystemRegistry.is_registered("beta")

    def test_unknown_system_module_raises(self) -> None:
        """Test that a misspelled installed module is reported, not skipped."""
        loader = SystemLoader(installed_systems=["stasis.systems.does_not_exist"])

        with pytest.raises(ImportError):
            loader.load_modules()


class TestGameContext(unittest.TestCase):
    """Unit test class for GameContext."""

    def test_register_system_exposes_role(self) -> None:
        """Test that a system with a role becomes a context attribute."""
        context = GameContext(event_bus=MagicMock(), scheduler=MagicMock(), store=MagicMock())
        system = _Alpha()

        context.register_system("alpha", system)

        assert context.get_system("alpha") is system
        assert getattr(context, "alpha_manager") is system  # noqa: B009
        assert context.get_systems() == {"alpha": system}

    def test_update_scene(self) -> None:
        """Test that the current scene name is tracked."""
        context = GameContext(event_bus=MagicMock(), scheduler=MagicMock(), store=MagicMock())

        context.update_scene("Level2")

        assert context.current_scene == "Level2"
