from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from box_token_game.events import Event, EventType


class EventSink(ABC):
    """
    Consumer of structured events.
    The engine must be able to run with event_sink=None (no events).
    """

    @abstractmethod
    def start_game(self) -> None: ...

    @abstractmethod
    def start_turn(self) -> int: ...

    @abstractmethod
    def emit(self, event_type: EventType, player: str | None = None, **data: Any) -> None: ...


@dataclass
class InMemoryEventSink(EventSink):
    """
    Simple sink for tests/demos.
    Owns turn/seq numbering so the engine stays free of global state.
    """

    events: list[Event] = field(default_factory=list)
    _turn: int = field(default=-1, init=False)
    _seq: int = field(default=0, init=False)

    @property
    def current_turn(self) -> int:
        return self._turn

    def start_game(self) -> None:
        # GAME_START is stamped on turn 0.
        self._turn = 0
        self._seq = 0

    def start_turn(self) -> int:
        if self._turn < 0:
            raise RuntimeError("EventSink.start_game() must be called before start_turn().")
        self._turn += 1
        self._seq = 0
        return self._turn

    def emit(self, event_type: EventType, player: str | None = None, **data: object) -> None:
        if self._turn < 0:
            raise RuntimeError("EventSink.start_game() must be called before emitting events.")
        self._seq += 1
        self.events.append(
            Event(
                turn=self._turn,
                seq=self._seq,
                type=event_type,
                player=player,
                data=dict(data),
            )
        )
