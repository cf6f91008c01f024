from __future__ import annotations

from box_token_game.reporting import format_scores, format_winner
from box_token_game.stream_io import fibonacci_tokens
from box_token_game.trace import play_with_trace


def main() -> None:
    game = play_with_trace(fibonacci_tokens(8))

    for entry in game.turns:
        # Show the pre-absorption weight that decided the box
        chosen = entry.boxes[entry.chosen_index]
        print(
            f"\nTurn {entry.turn:2d} | player {entry.player} token={entry.token} "
            f"-> box #{entry.chosen_index} {entry.chosen_kind} "
            f"(weight {chosen.weight_before:.1f}) scores {entry.score:g}"
        )

        for i, b in enumerate(entry.boxes):
            mark = "*" if i == entry.chosen_index else " "
            print(
                f"  #{i} {b.kind:<5s} {mark} "
                f"weight(pre)={b.weight_before:7.1f}  weight(post)={b.weight_after:7.1f}"
            )

    print()
    print(format_scores(*game.scores))
    print(format_winner(*game.scores))


if __name__ == "__main__":
    main()
