from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Event vocabulary for the game engine.
    Keep this small; add types only when tests require them.
    """

    GAME_START = "GAME_START"
    TURN_START = "TURN_START"
    BOX_SELECTED = "BOX_SELECTED"
    BOX_ABSORBED = "BOX_ABSORBED"
    TURN_END = "TURN_END"
    GAME_END = "GAME_END"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by the engine (optionally).

    turn and seq are owned by the sink (so the engine remains stateless).
    GAME_START is stamped on turn 0; GAME_END on the last turn played.
    """

    turn: int
    seq: int
    type: EventType
    player: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
