"""
Identity-key generation.

Keys only need to be unique within one render; the random source is
injectable so tests (and the determinism proof) can pin it.
"""

from __future__ import annotations

import random
from typing import Optional

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_KEY_BITS = 56


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def random_hash(rng: Optional[random.Random] = None) -> str:
    source = rng if rng is not None else random
    return _to_base36(source.getrandbits(_KEY_BITS))


class KeyGenerator:
    """Hands out identity keys for one render, or None when disabled."""

    def __init__(self, rng: Optional[random.Random] = None, disabled: bool = False):
        self.rng = rng
        self.disabled = disabled

    def next(self) -> Optional[str]:
        if self.disabled:
            return None
        return random_hash(self.rng)
