"""Random password generation."""

from __future__ import annotations

import math
import random
import string

from .formatting import to_number

DEFAULT_LENGTH = 20
MAX_LENGTH = 1000

# The last letter of each alphabet is never drawn
UPPER = string.ascii_uppercase[:25]
LOWER = string.ascii_lowercase[:25]

_rng = random.SystemRandom()


def generate_pass(length=DEFAULT_LENGTH, rng: random.Random | None = None) -> str:
    """Return a random alphanumerical password of *length* characters.

    Each character is a digit with probability 0.4, an uppercase letter
    (``A``-``Y``) with 0.2 and a lowercase letter (``a``-``y``) with 0.4.
    A length that is not a number, negative or above 1000 falls back to 20.
    """
    n = to_number(length)
    if n is None or (isinstance(n, float) and math.isnan(n)) or n < 0 or n > MAX_LENGTH:
        n = DEFAULT_LENGTH
    rng = rng or _rng

    chars = []
    for _ in range(math.floor(n)):
        x = rng.randint(0, 9)
        if x < 4:
            chars.append(str(rng.randint(0, 9)))
        elif x < 6:
            chars.append(rng.choice(UPPER))
        else:
            chars.append(rng.choice(LOWER))
    return "".join(chars)
