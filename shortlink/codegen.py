"""Random short code generation."""

from __future__ import annotations

import random

CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
CODE_LENGTH = 8

_default_rng = random.Random()


def generate_short_code(rng: random.Random | None = None) -> str:
    """Return a random alphanumeric code of CODE_LENGTH characters."""
    source = rng if rng is not None else _default_rng
    return "".join(source.choice(CHARSET) for _ in range(CODE_LENGTH))