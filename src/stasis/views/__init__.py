"""Views for windowed play."""

from stasis.views.game_view import GameView

__all__ = ["GameView"]
