"""Tests for PauseManager."""

from __future__ import annotations

import unittest
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import arcade
import pytest

from stasis.entities import ScoreKeeper
from stasis.events import GamePausedEvent, GameResumedEvent, SceneLoadedEvent
from stasis.saves import codec
from stasis.systems import PauseManager

if TYPE_CHECKING:
    from stasis.systems import GameContext


class TestPauseManagerUnit(unittest.TestCase):
    """Unit test class for PauseManager with a mock context."""

    def setUp(self) -> None:
        """Set up PauseManager with a mock context."""
        self.manager = PauseManager()
        self.mock_context = MagicMock()
        self.mock_context.current_scene = "Level2"
        self.manager.setup(self.mock_context)

    def test_starts_running(self) -> None:
        """Test that time runs after setup."""
        assert not self.manager.is_paused
        assert self.manager.time_scale == 1.0
        assert self.manager.prompt_text == "P to Pause"

    def test_pause_publishes_and_autosaves(self) -> None:
        """Test that pausing announces the pause and saves."""
        self.manager.pause()

        assert self.manager.is_paused
        assert self.manager.time_scale == 0.0
        assert self.manager.prompt_text == "Paused - Press P to go to Menu"
        self.mock_context.event_bus.publish.assert_called_once_with(GamePausedEvent())
        self.mock_context.state_manager.save.assert_called_once()

    def test_pause_twice_saves_once(self) -> None:
        """Test that pausing an already paused game does nothing."""
        self.manager.pause()
        self.manager.pause()

        self.mock_context.state_manager.save.assert_called_once()

    def test_resume_publishes(self) -> None:
        """Test that resuming announces it."""
        self.manager.pause()
        self.mock_context.event_bus.publish.reset_mock()

        self.manager.resume()

        assert not self.manager.is_paused
        self.mock_context.event_bus.publish.assert_called_once_with(GameResumedEvent())

    def test_reset_when_running_is_silent(self) -> None:
        """Test that resetting a running game publishes nothing."""
        self.manager.reset_to_normal_state()

        self.mock_context.event_bus.publish.assert_not_called()

    def test_pause_key_pauses(self) -> None:
        """Test that the pause key pauses a gameplay scene."""
        assert self.manager.on_key_press(arcade.key.P, 0, self.mock_context)

        assert self.manager.is_paused

    def test_pause_key_while_paused_goes_to_menu(self) -> None:
        """Test that the second press unpauses and loads the menu."""
        self.manager.on_key_press(arcade.key.P, 0, self.mock_context)
        self.manager.on_key_press(arcade.key.P, 0, self.mock_context)

        assert not self.manager.is_paused
        self.mock_context.scene_manager.load_scene.assert_called_once_with("menu")

    def test_pause_key_ignored_in_menu(self) -> None:
        """Test that the menu scene cannot be paused."""
        self.mock_context.current_scene = "menu"

        assert not self.manager.on_key_press(arcade.key.P, 0, self.mock_context)
        assert not self.manager.is_paused

    def test_other_keys_ignored(self) -> None:
        """Test that only the pause key is handled."""
        assert not self.manager.on_key_press(arcade.key.SPACE, 0, self.mock_context)

    def test_menu_load_unpauses(self) -> None:
        """Test that reaching the menu always restores running time."""
        self.manager.pause()

        self.manager._on_scene_loaded(SceneLoadedEvent("menu", 0))

        assert not self.manager.is_paused

    def test_gameplay_load_keeps_pause(self) -> None:
        """Test that other scene loads leave the pause flag alone."""
        self.manager.pause()

        self.manager._on_scene_loaded(SceneLoadedEvent("Level2", 3))

        assert self.manager.is_paused


class TestPauseTimeGating(unittest.TestCase):
    """Unit test class for pausing against real systems."""

    @pytest.fixture(autouse=True)
    def _build_context(self, context: GameContext) -> None:
        self.context = context

    def test_pause_autosaves_current_state(self) -> None:
        """Test that pausing Level2 with score 40 after 12.5 seconds saves those values."""
        self.context.scene_manager.current_scene = "Level2"
        keeper = ScoreKeeper(score=40, elapsed_time=12.5)
        keeper.start(self.context)

        self.context.pause_manager.pause()

        blob = self.context.store.get("SavedGameData")
        assert blob is not None
        saved = codec.decode(blob)
        assert saved.scene_name == "Level2"
        assert saved.score == 40
        assert saved.elapsed_time == 12.5

    def test_elapsed_time_stops_while_paused(self) -> None:
        """Test that play time only accrues while running."""
        keeper = ScoreKeeper()
        keeper.update(1.0, self.context)

        self.context.pause_manager.pause()
        keeper.update(1.0, self.context)

        assert keeper.elapsed_time == 1.0

        self.context.pause_manager.resume()
        keeper.update(0.5, self.context)

        assert keeper.elapsed_time == 1.5
