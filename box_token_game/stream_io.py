from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from box_token_game.engine import PLAYER_NAMES
from box_token_game.events import Event, EventType
from box_token_game.models import MAX_TOKEN_WEIGHT


class InputFormatError(ValueError):
    """Raised when an input file fails validation."""


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise InputFormatError(f"file not found: {path}")
    if not path.is_file():
        raise InputFormatError(f"not a file: {path}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InputFormatError(
            f"invalid JSON: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e


def load_token_sequence(path: Path) -> list[int]:
    """Load and validate an ordered token weight sequence.

    Supported formats:

    Bare array:
      [1, 1, 2, 3]

    Object:
      {"tokens": [1, 1, 2, 3]}

    Every entry must be an int in [0, MAX_TOKEN_WEIGHT]. An empty list is a valid game.
    """
    raw = _read_json(path)

    if isinstance(raw, dict):
        if "tokens" not in raw:
            raise InputFormatError("object input must include 'tokens'")
        raw = raw["tokens"]
        if not isinstance(raw, list):
            raise InputFormatError("tokens must be an array")
    elif not isinstance(raw, list):
        raise InputFormatError("root must be a JSON array or an object with 'tokens'")

    tokens: list[int] = []
    for i, item in enumerate(raw):
        # bool is an int subclass; reject it explicitly.
        if isinstance(item, bool) or not isinstance(item, int):
            raise InputFormatError(f"tokens[{i}] must be a non-negative int")
        if item < 0:
            raise InputFormatError(f"tokens[{i}] must be a non-negative int (got {item})")
        if item > MAX_TOKEN_WEIGHT:
            raise InputFormatError(f"tokens[{i}] must be <= {MAX_TOKEN_WEIGHT} (got {item})")
        tokens.append(int(item))
    return tokens


# The 48th Fibonacci number no longer fits in MAX_TOKEN_WEIGHT.
MAX_FIBONACCI_TOKENS = 47


def fibonacci_tokens(n: int) -> list[int]:
    """First n Fibonacci numbers, starting 1, 1."""
    out: list[int] = []
    a, b = 1, 1
    for _ in range(n):
        out.append(a)
        a, b = b, a + b
    return out


def load_event_stream(path: Path) -> list[Event]:
    """Load and validate an ordered structured event stream from JSON.

    The stream must open with GAME_START on turn 0, and every player field
    must name one of the game's players (or be null).
    """

    raw = _read_json(path)

    if not isinstance(raw, list):
        raise InputFormatError("root must be a JSON array of events")
    if not raw:
        raise InputFormatError("event stream is empty (expected GAME_START first)")

    events: list[Event] = []
    last_key: tuple[int, int] | None = None

    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise InputFormatError(f"event[{i}] must be an object")

        turn = item.get("turn")
        seq = item.get("seq")
        etype = item.get("type")
        player = item.get("player", None)
        data = item.get("data", {})

        if not isinstance(turn, int) or turn < 0:
            raise InputFormatError(f"event[{i}].turn must be an int >= 0")
        if not isinstance(seq, int) or seq < 1:
            raise InputFormatError(f"event[{i}].seq must be an int >= 1")
        if not isinstance(etype, str):
            raise InputFormatError(f"event[{i}].type must be a string")
        if player is not None and player not in PLAYER_NAMES:
            raise InputFormatError(
                f"event[{i}].player must be one of {list(PLAYER_NAMES)} or null (got {player!r})"
            )
        if not isinstance(data, dict):
            raise InputFormatError(f"event[{i}].data must be an object")

        try:
            event_type = EventType(etype)
        except ValueError as e:
            raise InputFormatError(
                f"event[{i}].type is not a valid EventType: {etype!r}"
            ) from e

        if i == 0 and (event_type != EventType.GAME_START or turn != 0):
            raise InputFormatError("event stream must start with GAME_START on turn 0")

        key = (turn, seq)
        if last_key is not None and key <= last_key:
            raise InputFormatError(
                "events must be strictly increasing by (turn, seq); "
                f"event[{i}] has (turn, seq)={key} after {last_key}"
            )
        last_key = key

        events.append(Event(turn=turn, seq=seq, type=event_type, player=player, data=data))

    return events


def dump_event_stream(events: list[Event]) -> list[dict[str, Any]]:
    """Return a JSON-serializable event stream (inverse of load_event_stream)."""
    out: list[dict[str, Any]] = []
    for e in events:
        d = asdict(e)
        d["type"] = str(e.type.value)
        out.append(d)
    return out


def write_event_stream(path: Path, events: list[Event]) -> None:
    path.write_text(json.dumps(dump_event_stream(events), indent=2) + "\n", encoding="utf-8")
