"""Tests for MenuManager."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import arcade

from stasis.entities import ScoreKeeper
from stasis.saves import codec
from stasis.saves.snapshot import Snapshot
from stasis.saves.store import MemoryStore
from stasis.systems import TransitionState

if TYPE_CHECKING:
    from collections.abc import Callable

    from stasis.systems import GameContext


def level2_save() -> MemoryStore:
    """Store holding a save made in Level2."""
    return MemoryStore({"SavedGameData": codec.encode(Snapshot(scene_name="Level2", score=40))})


def test_play_label_without_save(context: GameContext) -> None:
    """Test that the play button says Play when nothing is saved."""
    assert context.menu_manager.play_button_label() == "Play"


def test_play_label_with_save(make_context: Callable[..., GameContext]) -> None:
    """Test that the play button says Resume when a save exists."""
    context = make_context(level2_save())

    assert context.menu_manager.play_button_label() == "Resume"


def test_play_without_save_starts_new_game(context: GameContext) -> None:
    """Test that play starts a fresh game in the default scene."""
    assert context.menu_manager.play() == "GameScene"

    assert context.scene_manager.pending_scene == "GameScene"
    assert context.transition_manager.state == TransitionState.IDLE


def test_play_with_save_resumes(make_context: Callable[..., GameContext]) -> None:
    """Test that play resumes into the saved scene."""
    store = level2_save()
    context = make_context(store)

    assert context.menu_manager.play() == "Level2"

    assert context.scene_manager.pending_scene == "Level2"
    assert context.state_manager.is_resuming
    assert store.has("SavedGameData")


def test_menu_keys_only_in_menu_scene(context: GameContext) -> None:
    """Test that menu keys are ignored outside the menu."""
    context.update_scene("Level2")

    assert not context.menu_manager.on_key_press(arcade.key.ENTER, 0, context)
    assert not context.scene_manager.is_loading


def test_play_key(context: GameContext) -> None:
    """Test that the play key starts the game from the menu."""
    context.update_scene("menu")

    assert context.menu_manager.on_key_press(arcade.key.ENTER, 0, context)
    assert context.scene_manager.pending_scene == "GameScene"


def test_start_key_loads_prologue(context: GameContext) -> None:
    """Test that the start key loads the prologue scene."""
    context.update_scene("menu")

    assert context.menu_manager.on_key_press(arcade.key.S, 0, context)
    assert context.scene_manager.pending_scene == "PROLOGUE SCENE"


def test_quit_key_exits(context: GameContext) -> None:
    """Test that the quit key closes the application."""
    context.update_scene("menu")

    with patch("stasis.systems.menu.manager.arcade.exit") as mock_exit:
        assert context.menu_manager.on_key_press(arcade.key.ESCAPE, 0, context)

    mock_exit.assert_called_once()


def test_unhandled_menu_key(context: GameContext) -> None:
    """Test that other keys fall through."""
    context.update_scene("menu")

    assert not context.menu_manager.on_key_press(arcade.key.Q, 0, context)


def test_play_with_unloadable_save_starts_new_game(make_context: Callable[..., GameContext]) -> None:
    """Test that a save naming an unknown scene is abandoned for a new game."""
    store = MemoryStore({"SavedGameData": codec.encode(Snapshot(scene_name="OldLevel", score=99))})
    context = make_context(store)
    keeper = ScoreKeeper()
    context.scene_manager.register_scene("GameScene", lambda ctx: [keeper])

    assert context.menu_manager.play() == "GameScene"

    assert context.transition_manager.state == TransitionState.IDLE
    assert not store.has("SavedGameData")

    context.scheduler.run_pending()
    context.scheduler.run_end_of_frame()

    assert context.scene_manager.current_scene == "GameScene"
    assert keeper.score == 0


def test_failed_resume_leaves_later_loads_alone(make_context: Callable[..., GameContext]) -> None:
    """Test that an ordinary scene change after a refused resume restores nothing."""
    context = make_context(level2_save())
    keeper = ScoreKeeper()
    context.scene_manager.register_scene("GameScene", lambda ctx: [keeper])
    context.scene_manager.load_scene("menu", delay=5.0)

    context.menu_manager.play()
    assert not context.state_manager.is_resuming

    context.scene_manager.cancel_pending_load()
    context.scene_manager.load_scene("GameScene")
    context.scheduler.run_pending()
    context.scheduler.run_end_of_frame()

    assert keeper.score == 0
