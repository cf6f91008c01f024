from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from box_token_game.engine import new_boxes, new_players, step_turn
from box_token_game.models import Box, Player


@dataclass(frozen=True)
class BoxTrace:
    kind: str
    # BEFORE the turn (used for box selection)
    weight_before: float
    # AFTER the turn (post-absorption state)
    weight_after: float


@dataclass(frozen=True)
class TurnTrace:
    turn: int
    player: str
    token: int
    boxes: list[BoxTrace]
    chosen_index: int
    chosen_kind: str
    score: float
    score_a: float
    score_b: float


@dataclass(frozen=True)
class GameTrace:
    turns: list[TurnTrace]
    score_a: float
    score_b: float

    @property
    def scores(self) -> tuple[float, float]:
        return self.score_a, self.score_b


def snapshot_turn(
    turn: int,
    token: int,
    boxes: list[Box],
    before: list[float],
    player: Player,
    players: tuple[Player, Player],
    chosen_index: int,
    score: float,
) -> TurnTrace:
    """
    Create a trace snapshot for one turn.

    Captures both:
      - before: box weights BEFORE absorption (the selection snapshot)
      - box.weight: AFTER absorption (post-turn state)

    This function does not modify game behavior.
    """
    traces = [
        BoxTrace(kind=b.kind, weight_before=float(before[i]), weight_after=float(b.weight))
        for i, b in enumerate(boxes)
    ]
    a, b = players
    return TurnTrace(
        turn=turn,
        player=player.name,
        token=int(token),
        boxes=traces,
        chosen_index=chosen_index,
        chosen_kind=boxes[chosen_index].kind,
        score=float(score),
        score_a=a.get_score(),
        score_b=b.get_score(),
    )


def play_with_trace(token_weights: Iterable[int]) -> GameTrace:
    """
    Play a full game, returning a per-turn trace log.

    Notes:
    - Uses engine.step_turn() for behavior (same rules as play()).
    - Adds observability only (no rule changes).
    """
    boxes = new_boxes()
    players = new_players()

    log: list[TurnTrace] = []
    for i, token in enumerate(token_weights):
        before = [float(b.weight) for b in boxes]
        player, chosen, score = step_turn(i, token, boxes, players)
        log.append(snapshot_turn(i + 1, token, boxes, before, player, players, chosen, score))

    a, b = players
    return GameTrace(turns=log, score_a=a.get_score(), score_b=b.get_score())
