from __future__ import annotations

from typing import Iterable

from box_token_game.event_sink import EventSink
from box_token_game.events import EventType
from box_token_game.models import Box, Player, make_blue_box, make_green_box, select_min_box

# Fixed session layout, in stored (tie-break) order: greens first, then blues.
GREEN_INITIAL_WEIGHTS = (0.0, 0.1)
BLUE_INITIAL_WEIGHTS = (0.2, 0.3)

PLAYER_NAMES = ("A", "B")


def new_boxes() -> list[Box]:
    """Build the four boxes of a fresh game session."""
    boxes: list[Box] = [make_green_box(w) for w in GREEN_INITIAL_WEIGHTS]
    boxes.extend(make_blue_box(w) for w in BLUE_INITIAL_WEIGHTS)
    return boxes


def new_players() -> tuple[Player, Player]:
    a, b = PLAYER_NAMES
    return Player(a), Player(b)


def player_for_turn(index: int, players: tuple[Player, Player]) -> Player:
    """Player A acts on even (0-based) token positions, B on odd ones."""
    return players[index % 2]


def step_turn(
    index: int,
    token_weight: int,
    boxes: list[Box],
    players: tuple[Player, Player],
    event_sink: EventSink | None = None,
) -> tuple[Player, int, float | int]:
    """
    Play one turn: the positional player lets the lightest box absorb one token.

    Rules:
    - The box is chosen on weights as they stand before this turn.
    - Ties go to the first lightest box in stored order.
    - The absorption result is added to the acting player's score.

    Returns (player, chosen box index, absorption score).
    """
    player = player_for_turn(index, players)

    pre_absorb_weight = None
    if event_sink is not None:
        event_sink.start_turn()
        event_sink.emit(EventType.TURN_START, player=player.name, token=int(token_weight))
        pre_absorb_weight = float(select_min_box(boxes)[1].weight)

    box_index, result = player.take_turn(token_weight, boxes)
    box = boxes[box_index]

    if event_sink is not None:
        event_sink.emit(
            EventType.BOX_SELECTED,
            player=player.name,
            box_index=box_index,
            box_kind=box.kind,
            pre_absorb_weight=pre_absorb_weight,
        )
        event_sink.emit(
            EventType.BOX_ABSORBED,
            player=player.name,
            box_index=box_index,
            score=result,
            post_absorb_weight=float(box.weight),
        )
        event_sink.emit(EventType.TURN_END, player=player.name, player_score=player.get_score())

    return player, box_index, result


def play(token_weights: Iterable[int], event_sink: EventSink | None = None) -> tuple[float, float]:
    """
    Play a full game over token_weights and return (score_A, score_B).

    Every call builds its own boxes and players; nothing is carried between
    games. An empty sequence yields (0.0, 0.0).
    """
    boxes = new_boxes()
    players = new_players()

    if event_sink is not None:
        event_sink.start_game()
        event_sink.emit(EventType.GAME_START, boxes=[b.kind for b in boxes])

    for i, token in enumerate(token_weights):
        step_turn(i, token, boxes, players, event_sink=event_sink)

    a, b = players
    if event_sink is not None:
        event_sink.emit(EventType.GAME_END, score_a=a.get_score(), score_b=b.get_score())

    return a.get_score(), b.get_score()
