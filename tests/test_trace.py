from box_token_game.trace import play_with_trace


def test_trace_for_first_8_fibonacci_numbers():
    game = play_with_trace([1, 1, 2, 3, 5, 8, 13, 21])

    assert [t.player for t in game.turns] == ["A", "B"] * 4
    assert [t.chosen_index for t in game.turns] == [0, 1, 2, 3, 0, 1, 2, 3]
    assert [t.chosen_kind for t in game.turns] == ["green", "green", "blue", "blue"] * 2
    assert [t.score for t in game.turns] == [1.0, 1.0, 12.0, 24.0, 9.0, 20.25, 133.0, 321.0]
    assert game.scores == (155.0, 366.25)


def test_trace_captures_weights_before_and_after():
    game = play_with_trace([1, 1])

    first = game.turns[0]
    assert first.turn == 1
    assert first.token == 1
    assert [b.weight_before for b in first.boxes] == [0.0, 0.1, 0.2, 0.3]
    assert [b.weight_after for b in first.boxes] == [1.0, 0.1, 0.2, 0.3]

    # The chosen box is the lightest in the BEFORE snapshot.
    second = game.turns[1]
    before = [b.weight_before for b in second.boxes]
    assert second.chosen_index == before.index(min(before))


def test_trace_running_scores():
    game = play_with_trace([1, 1, 2, 3])
    assert [(t.score_a, t.score_b) for t in game.turns] == [
        (1.0, 0.0),
        (1.0, 1.0),
        (13.0, 1.0),
        (13.0, 25.0),
    ]


def test_trace_empty_game():
    game = play_with_trace([])
    assert game.turns == []
    assert game.scores == (0.0, 0.0)
