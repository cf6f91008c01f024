from __future__ import annotations


def cantor_pairing(k1: int, k2: int) -> int:
    """
    Cantor's pairing function: (k1 + k2) * (k1 + k2 + 1) / 2 + k2.

    Python ints are unbounded, so the result never wraps around even for
    token weights at the top of the 32-bit range.
    """
    s = int(k1) + int(k2)
    return s * (s + 1) // 2 + int(k2)
