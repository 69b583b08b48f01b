"""Snapshot codec.

Converts a Snapshot to and from the JSON blob kept in the persistence store. The
blob layout is a flat object whose field names match the save files written by
earlier builds of the game::

    {
      "sceneName": "GameScene",
      "playerPosition": {"x": 1.0, "y": 0.0, "z": 4.5},
      "playerRotation": {"x": 0.0, "y": 0.7071, "z": 0.0, "w": 0.7071},
      "playerScore": 40,
      "gameTime": 12.5,
      "customDataKeys": ["LastCheckpoint"],
      "customDataValues": ["bridge"]
    }

The blob format has no map type, so ``extras`` travels as two parallel lists and
is rebuilt into a dict on decode. Missing fields take their defaults. Anything
else that does not fit the layout raises SnapshotDecodeError.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from stasis.exceptions import SnapshotDecodeError
from stasis.saves.snapshot import Snapshot
from stasis.types import Quaternion, Vector3

if TYPE_CHECKING:
    from stasis.types import SnapshotDict

SCENE_NAME = "sceneName"
PLAYER_POSITION = "playerPosition"
PLAYER_ROTATION = "playerRotation"
PLAYER_SCORE = "playerScore"
GAME_TIME = "gameTime"
EXTRA_KEYS = "customDataKeys"
EXTRA_VALUES = "customDataValues"


def to_dict(snapshot: Snapshot) -> SnapshotDict:
    """Convert a snapshot to its serializable dictionary form.

    Args:
        snapshot: Snapshot to convert.

    Returns:
        Dictionary with the blob layout, extras split into parallel lists.
    """
    position = snapshot.player_position
    rotation = snapshot.player_rotation
    return {
        SCENE_NAME: snapshot.scene_name,
        PLAYER_POSITION: {"x": position.x, "y": position.y, "z": position.z},
        PLAYER_ROTATION: {"x": rotation.x, "y": rotation.y, "z": rotation.z, "w": rotation.w},
        PLAYER_SCORE: snapshot.score,
        GAME_TIME: snapshot.elapsed_time,
        EXTRA_KEYS: list(snapshot.extras.keys()),
        EXTRA_VALUES: list(snapshot.extras.values()),
    }


def from_dict(data: Any) -> Snapshot:  # noqa: ANN401
    """Build a snapshot from a decoded blob.

    Args:
        data: Value produced by json.loads().

    Returns:
        The decoded snapshot.

    Raises:
        SnapshotDecodeError: If the value does not match the blob layout.
    """
    if not isinstance(data, dict):
        msg = f"Snapshot blob must be an object, got {type(data).__name__}"
        raise SnapshotDecodeError(msg)

    scene_name = data.get(SCENE_NAME, "")
    if not isinstance(scene_name, str):
        msg = f"'{SCENE_NAME}' must be a string"
        raise SnapshotDecodeError(msg)

    position = _read_floats(data, PLAYER_POSITION, ("x", "y", "z"))
    rotation = _read_floats(data, PLAYER_ROTATION, ("x", "y", "z", "w"))

    score = data.get(PLAYER_SCORE, 0)
    if isinstance(score, bool) or not isinstance(score, int):
        msg = f"'{PLAYER_SCORE}' must be an integer"
        raise SnapshotDecodeError(msg)

    elapsed_time = data.get(GAME_TIME, 0.0)
    if isinstance(elapsed_time, bool) or not isinstance(elapsed_time, (int, float)):
        msg = f"'{GAME_TIME}' must be a number"
        raise SnapshotDecodeError(msg)

    return Snapshot(
        scene_name=scene_name,
        player_position=Vector3(**position) if position else Vector3(),
        player_rotation=Quaternion(**rotation) if rotation else Quaternion(),
        score=score,
        elapsed_time=float(elapsed_time),
        extras=_read_extras(data),
    )


def encode(snapshot: Snapshot, indent: int | None = 2) -> str:
    """Serialize a snapshot to the text stored under the save key.

    Args:
        snapshot: Snapshot to serialize.
        indent: JSON indentation, or None for compact output.

    Returns:
        JSON text.
    """
    return json.dumps(to_dict(snapshot), indent=indent)


def decode(text: str) -> Snapshot:
    """Deserialize the text stored under the save key.

    Args:
        text: JSON text produced by encode() (or an older build of the game).

    Returns:
        The decoded snapshot.

    Raises:
        SnapshotDecodeError: If the text is not valid JSON or does not match the blob layout.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        msg = f"Snapshot blob is not valid JSON: {e}"
        raise SnapshotDecodeError(msg) from e
    return from_dict(data)


def _read_floats(data: dict[str, Any], field_name: str, components: tuple[str, ...]) -> dict[str, float] | None:
    if field_name not in data:
        return None
    value = data[field_name]
    if not isinstance(value, dict):
        msg = f"'{field_name}' must be an object"
        raise SnapshotDecodeError(msg)

    result: dict[str, float] = {}
    for component in components:
        number = value.get(component, 0.0)
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            msg = f"'{field_name}.{component}' must be a number"
            raise SnapshotDecodeError(msg)
        result[component] = float(number)
    return result


def _read_extras(data: dict[str, Any]) -> dict[str, str]:
    keys = data.get(EXTRA_KEYS, [])
    values = data.get(EXTRA_VALUES, [])
    if not isinstance(keys, list) or not isinstance(values, list):
        msg = f"'{EXTRA_KEYS}' and '{EXTRA_VALUES}' must be lists"
        raise SnapshotDecodeError(msg)
    if len(keys) != len(values):
        msg = f"Extras key/value length mismatch: {len(keys)} keys, {len(values)} values"
        raise SnapshotDecodeError(msg)
    if not all(isinstance(item, str) for item in (*keys, *values)):
        msg = "Extras keys and values must be strings"
        raise SnapshotDecodeError(msg)

    extras = dict(zip(keys, values, strict=True))
    if len(extras) != len(keys):
        msg = "Extras keys must be unique"
        raise SnapshotDecodeError(msg)
    return extras
