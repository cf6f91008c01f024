import pytest

from box_token_game.engine import new_boxes
from box_token_game.models import Player, make_blue_box, make_green_box, select_min_box


def test_player_starts_at_zero():
    assert Player("A").get_score() == 0.0


def test_take_turn_picks_lightest_box_and_banks_score():
    boxes = [make_green_box(5.0), make_blue_box(1.0), make_green_box(3.0)]
    player = Player("A")

    index, result = player.take_turn(4, boxes)

    assert index == 1
    assert result == 40  # pairing(4, 4)
    assert player.get_score() == 40.0
    assert boxes[1].weight == pytest.approx(5.0)


def test_selection_uses_weights_before_absorption():
    boxes = [make_green_box(0.0), make_green_box(0.1)]
    player = Player("A")

    # Box 0 becomes heavier after the first turn, so the second turn picks box 1.
    first, _ = player.take_turn(1, boxes)
    second, _ = player.take_turn(1, boxes)

    assert (first, second) == (0, 1)


def test_tie_goes_to_first_box_in_stored_order():
    boxes = [make_blue_box(1.0), make_green_box(1.0), make_green_box(1.0)]

    index, box = select_min_box(boxes)

    assert index == 0
    assert box is boxes[0]


def test_zero_tokens_keep_feeding_the_first_green_box():
    boxes = new_boxes()
    player = Player("A")

    chosen = [player.take_turn(0, boxes)[0] for _ in range(3)]

    assert chosen == [0, 0, 0]
    assert player.get_score() == 0.0


def test_box_ordering_compares_weight_only():
    assert make_green_box(0.1) < make_blue_box(0.2)
    assert not (make_blue_box(0.2) < make_green_box(0.1))


def test_empty_box_collection_is_an_error():
    with pytest.raises(ValueError):
        Player("A").take_turn(1, [])
