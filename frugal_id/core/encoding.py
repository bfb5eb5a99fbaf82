"""Counter encoding and random sampling over an alphabet."""

from __future__ import annotations

from typing import Sequence

from frugal_id.core.random_source import RandomSource


def encode_counter(value: int, alphabet: Sequence[str]) -> str:
    """Encode ``value`` in base ``len(alphabet)``, least significant digit first.

    The loop runs at least once, so 0 encodes as ``alphabet[0]``. There is
    no reversal step: the first character is always ``value % base``.
    """
    if value < 0:
        raise ValueError(f"Counter value must be non-negative, got {value}")
    base = len(alphabet)
    parts: list[str] = []
    while True:
        value, remainder = divmod(value, base)
        parts.append(alphabet[remainder])
        if value == 0:
            break
    return "".join(parts)


def sample_random(length: int, alphabet: Sequence[str], rng: RandomSource) -> str:
    base = len(alphabet)
    return "".join(alphabet[rng.randrange(base)] for _ in range(length))
