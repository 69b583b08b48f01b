"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stasis.conf import settings
from stasis.events import EventBus
from stasis.saves.store import MemoryStore
from stasis.scheduler import FrameScheduler
from stasis.systems import (
    GameContext,
    MenuManager,
    PauseManager,
    SceneManager,
    StateManager,
    TransitionManager,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from pathlib import Path

    from stasis.saves.store import BaseStore


@pytest.fixture(autouse=True)
def configure_test_settings(tmp_path: Path) -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    The store file lives in the test's temporary directory so no test touches
    a real save.

    Yields:
        None
    """
    settings.configure(
        SAVE_FILE=str(tmp_path / "saves" / "prefs.json"),
        SAVE_KEY="SavedGameData",
        SAVE_INDENT=2,
        SCENES=["menu", "PROLOGUE SCENE", "GameScene", "Level2"],
        GAMEPLAY_SCENES=["GameScene", "Level2"],
        INITIAL_SCENE="menu",
        MENU_SCENE="menu",
        DEFAULT_SCENE="GameScene",
        PROLOGUE_SCENE="PROLOGUE SCENE",
        NEXT_SCENE_DELAY=2.0,
    )
    yield
    settings._wrapped = None


@pytest.fixture
def make_context() -> Callable[..., GameContext]:
    """Build a GameContext with every built-in system set up, without an Engine.

    Returns:
        Factory accepting an optional store.
    """

    def _make(store: BaseStore | None = None) -> GameContext:
        context = GameContext(
            event_bus=EventBus(),
            scheduler=FrameScheduler(),
            store=store if store is not None else MemoryStore(),
        )
        systems = [SceneManager(), StateManager(), PauseManager(), TransitionManager(), MenuManager()]
        for system in systems:
            context.register_system(system.name, system)
        for system in systems:
            system.setup(context)
        return context

    return _make


@pytest.fixture
def context(make_context: Callable[..., GameContext]) -> GameContext:
    """GameContext with an empty in-memory store."""
    return make_context()
