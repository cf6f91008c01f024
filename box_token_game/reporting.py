from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from box_token_game.events import Event, EventType


@dataclass(frozen=True, slots=True)
class TurnRow:
    """
    A single player turn, represented as a TURN_START → TURN_END span.
    """
    turn: int
    player: str
    token: int | None
    box_index: int | None
    box_kind: str | None
    score: float | None
    player_score: float | None
    events: tuple[Event, ...]


def _fmt_number(value: float | int | None) -> str:
    if value is None:
        return "--"
    return f"{float(value):g}"


def format_scores(score_a: float, score_b: float) -> str:
    """One-line score report, e.g. 'Scores: player A 13, player B 25'."""
    return f"Scores: player A {_fmt_number(score_a)}, player B {_fmt_number(score_b)}"


def decide_winner(score_a: float, score_b: float) -> str | None:
    """The player with the highest score wins; None on a draw."""
    if score_a > score_b:
        return "A"
    if score_b > score_a:
        return "B"
    return None


def format_winner(score_a: float, score_b: float) -> str:
    winner = decide_winner(score_a, score_b)
    return "Winner: draw" if winner is None else f"Winner: player {winner}"


def derive_turn_rows(events: Iterable[Event]) -> list[TurnRow]:
    """
    Derive TURN_START → TURN_END rows from an ordered event stream.

    Rule:
      - A row begins at TURN_START(player=X)
      - It ends at TURN_END(player=X)
      - token comes from TURN_START, box fields from BOX_SELECTED,
        score from BOX_ABSORBED, player_score from TURN_END (if present)
      - All events between START and END (inclusive) are attached to the row
    """
    rows: list[TurnRow] = []

    buffer: list[Event] = []
    player: str | None = None

    for e in events:
        if e.type == EventType.TURN_START:
            # An unterminated row is dropped.
            buffer = [e]
            player = e.player
            continue

        if player is None:
            continue

        buffer.append(e)

        if e.type == EventType.TURN_END and e.player == player:
            rows.append(_row_from_span(player, buffer))
            buffer = []
            player = None

    return rows


def _row_from_span(player: str, span: list[Event]) -> TurnRow:
    fields: dict[str, object] = {}
    for e in span:
        if e.type == EventType.TURN_START:
            fields["token"] = e.data.get("token")
        elif e.type == EventType.BOX_SELECTED:
            fields["box_index"] = e.data.get("box_index")
            fields["box_kind"] = e.data.get("box_kind")
        elif e.type == EventType.BOX_ABSORBED:
            fields["score"] = e.data.get("score")
        elif e.type == EventType.TURN_END:
            fields["player_score"] = e.data.get("player_score")

    return TurnRow(
        turn=span[0].turn,
        player=player,
        token=fields.get("token"),
        box_index=fields.get("box_index"),
        box_kind=fields.get("box_kind"),
        score=fields.get("score"),
        player_score=fields.get("player_score"),
        events=tuple(span),
    )


def render_turn_table(rows: Iterable[TurnRow]) -> str:
    """Render one line per turn: turn, player, token, chosen box, score, running total."""
    out: list[str] = []
    for row in rows:
        if row.box_index is None:
            box = "--"
        else:
            box = f"#{row.box_index} {row.box_kind or '?'}"
        token = "--" if row.token is None else str(row.token)
        out.append(
            f"  {row.turn:>3}: player {row.player}  token={token:<10s} box={box:<8s} "
            f"+{_fmt_number(row.score)}  total={_fmt_number(row.player_score)}"
        )
    if not out:
        return "(No turns were played.)\n"
    return "\n".join(out) + "\n"
