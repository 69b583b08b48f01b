"""Interfaces for live objects the state system captures from and restores to."""

from typing import Protocol

from stasis.types import Quaternion, Vector3


class PlayerHandle(Protocol):
    """Anything owning the player's transform."""

    position: Vector3
    rotation: Quaternion


class ScoreTimeOwner(Protocol):
    """Anything owning the score and the elapsed play time."""

    @property
    def score(self) -> int: ...

    @property
    def elapsed_time(self) -> float: ...

    def set_score(self, score: int) -> None: ...

    def set_elapsed_time(self, elapsed_time: float) -> None: ...
