from box_token_game.pairing import cantor_pairing


def test_pairing_zero_one_is_two():
    assert cantor_pairing(0, 1) == 2


def test_pairing_small_values():
    assert cantor_pairing(0, 0) == 0
    assert cantor_pairing(1, 0) == 1
    assert cantor_pairing(2, 2) == 12
    assert cantor_pairing(5, 20) == 345


def test_pairing_is_not_symmetric():
    # The second key is added once more, so order matters.
    assert cantor_pairing(1, 2) != cantor_pairing(2, 1)


def test_pairing_does_not_wrap_at_32_bit_max():
    m = 4294967295
    result = cantor_pairing(m, m)
    assert result == 2 * m * m + 2 * m
    assert result > 2**64
