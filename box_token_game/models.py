from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from box_token_game.pairing import cantor_pairing

# Green boxes score on the mean of this many most recent tokens.
GREEN_WINDOW = 3

# Token weights are unsigned 32-bit values. Within this range every box score
# and running total stays a finite float.
MAX_TOKEN_WEIGHT = 2**32 - 1


@dataclass(eq=False)
class Box(ABC):
    """
    A stateful scoring container.

    weight always equals the initial weight plus every absorbed token weight.
    Boxes order by current weight only.
    """

    weight: float

    kind = "box"

    def __lt__(self, other: Box) -> bool:
        return self.weight < other.weight

    @abstractmethod
    def absorb(self, token_weight: int) -> float | int: ...


@dataclass(eq=False)
class GreenBox(Box):
    # Every absorbed token, in insertion order (append-only).
    history: list[int] = field(default_factory=list)

    kind = "green"

    def absorb(self, token_weight: int) -> float:
        """Square of the mean of the last GREEN_WINDOW absorbed weights."""
        self.history.append(token_weight)
        self.weight += token_weight
        recent = self.history[-GREEN_WINDOW:]
        mean = sum(recent) / len(recent)
        return mean * mean


@dataclass(eq=False)
class BlueBox(Box):
    # None until the first absorption.
    min_seen: int | None = None
    max_seen: int | None = None

    kind = "blue"

    def absorb(self, token_weight: int) -> int:
        """Cantor pairing of the smallest and largest weight absorbed so far."""
        self.weight += token_weight
        if self.min_seen is None or token_weight < self.min_seen:
            self.min_seen = token_weight
        if self.max_seen is None or token_weight > self.max_seen:
            self.max_seen = token_weight
        return cantor_pairing(self.min_seen, self.max_seen)


def make_green_box(initial_weight: float) -> GreenBox:
    return GreenBox(weight=float(initial_weight))


def make_blue_box(initial_weight: float) -> BlueBox:
    return BlueBox(weight=float(initial_weight))


def select_min_box(boxes: Sequence[Box]) -> tuple[int, Box]:
    """
    Return (index, box) of the lightest box.

    Tie-break (deterministic): the first minimum in stored order wins.
    """
    if not boxes:
        raise ValueError("cannot select a box from an empty collection")
    return min(enumerate(boxes), key=lambda t: (t[1].weight, t[0]))


@dataclass
class Player:
    name: str
    score: float = 0.0

    def take_turn(self, token_weight: int, boxes: Sequence[Box]) -> tuple[int, float | int]:
        """
        Let the lightest box absorb token_weight and bank the result.

        Selection uses the weights as they are before this turn's absorption.
        Returns (chosen box index, absorption score).
        """
        index, box = select_min_box(boxes)
        result = box.absorb(token_weight)
        self.score += result
        return index, result

    def get_score(self) -> float:
        return self.score
