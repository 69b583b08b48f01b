"""Snapshot data class for the saved session state."""

from dataclasses import dataclass, field

from stasis.types import Quaternion, Vector3


@dataclass
class Snapshot:
    """The single persisted record of a session.

    A snapshot is created lazily on the first save, mutated in place on every
    later save and discarded when a new game starts.

    Attributes:
        scene_name: Scene the snapshot applies to. Empty means no save exists.
        player_position: Player position in world space.
        player_rotation: Player orientation.
        score: Player score.
        elapsed_time: Seconds of unpaused play time.
        extras: Open-ended auxiliary state, in insertion order.
    """

    scene_name: str = ""
    player_position: Vector3 = field(default_factory=Vector3)
    player_rotation: Quaternion = field(default_factory=Quaternion)
    score: int = 0
    elapsed_time: float = 0.0
    extras: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when the snapshot does not identify a scene."""
        return not self.scene_name
