"""Custom types and enumerations."""

from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """A rotation stored as a unit quaternion. Defaults to the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


class Vector3Dict(TypedDict):
    """TypedDict for serialized vectors."""

    x: float
    y: float
    z: float


class QuaternionDict(TypedDict):
    """TypedDict for serialized quaternions."""

    x: float
    y: float
    z: float
    w: float


class SnapshotDict(TypedDict):
    """TypedDict for the serialized snapshot blob."""

    sceneName: str
    playerPosition: Vector3Dict
    playerRotation: QuaternionDict
    playerScore: int
    gameTime: float
    customDataKeys: list[str]
    customDataValues: list[str]
