from __future__ import annotations

import argparse
import sys
from pathlib import Path

from box_token_game.engine import play
from box_token_game.event_sink import InMemoryEventSink
from box_token_game.models import MAX_TOKEN_WEIGHT
from box_token_game.reporting import (
    derive_turn_rows,
    format_scores,
    format_winner,
    render_turn_table,
)
from box_token_game.stream_io import (
    MAX_FIBONACCI_TOKENS,
    InputFormatError,
    fibonacci_tokens,
    load_token_sequence,
    write_event_stream,
)


def _bounded_int(text: str, upper: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an int: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0 (got {value})")
    if value > upper:
        raise argparse.ArgumentTypeError(f"must be <= {upper} (got {value})")
    return value


def _token_weight(text: str) -> int:
    return _bounded_int(text, MAX_TOKEN_WEIGHT)


def _fibonacci_count(text: str) -> int:
    return _bounded_int(text, MAX_FIBONACCI_TOKENS)


def _tokens_from_args(args: argparse.Namespace) -> list[int]:
    if args.tokens is not None:
        return list(args.tokens)
    if args.fibonacci is not None:
        return fibonacci_tokens(int(args.fibonacci))
    return load_token_sequence(Path(str(args.input)))


def _cmd_play(args: argparse.Namespace) -> int:
    chosen = sum(
        1 for v in [args.tokens is not None, bool(args.input), args.fibonacci is not None] if v
    )
    if chosen != 1:
        print("ERROR: choose exactly one of --tokens, --input, or --fibonacci.", file=sys.stderr)
        return 2

    try:
        tokens = _tokens_from_args(args)
    except InputFormatError as e:
        print(f"ERROR: invalid token input: {e}", file=sys.stderr)
        return 2

    sink = InMemoryEventSink()
    score_a, score_b = play(tokens, event_sink=sink)

    if args.trace:
        sys.stdout.write(render_turn_table(derive_turn_rows(sink.events)))

    print(format_scores(score_a, score_b))
    print(format_winner(score_a, score_b))

    if args.events_out:
        write_event_stream(Path(str(args.events_out)), sink.events)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="box_token_game",
        description=(
            "Box Token Game: user harness.\n"
            "\n"
            "Two players alternately feed token weights into the lightest of\n"
            "two green and two blue boxes, banking each box's score."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("play", help="Play a game and print both final scores.")
    run.add_argument(
        "--tokens",
        type=_token_weight,
        nargs="*",
        default=None,
        help=f"Token weights in play order, each in [0, {MAX_TOKEN_WEIGHT}] (no values means an empty game).",
    )
    run.add_argument("--input", type=str, help="Read token weights from a JSON file.")
    run.add_argument(
        "--fibonacci",
        type=_fibonacci_count,
        default=None,
        help=f"Play the first N Fibonacci numbers (1, 1, 2, 3, ...), N <= {MAX_FIBONACCI_TOKENS}.",
    )
    run.add_argument("--trace", action="store_true", help="Print one line per turn before the scores.")
    run.add_argument("--events-out", type=str, default=None, help="Write the event stream as JSON.")
    run.set_defaults(func=_cmd_play)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
