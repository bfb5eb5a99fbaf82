"""Alphabet ("dictionary") construction.

The shared alphabet is built once, when this module is first imported, and
is held as an immutable tuple. Generators read it but never copy it into
per-instance state.
"""

from __future__ import annotations

import random
from typing import Mapping

from frugal_id.core.random_source import RandomSource

# Half-open code point ranges, expanded in this order before shuffling.
DICT_RANGES: dict[str, tuple[int, int]] = {
    "digits": (48, 58),
    "lower_case": (97, 123),
    "upper_case": (65, 91),
}

DictRanges = Mapping[str, tuple[int, int]]


def build_dictionary(
    ranges: DictRanges = DICT_RANGES, rng: RandomSource | None = None
) -> tuple[str, ...]:
    chars = [
        chr(code_point)
        for lower, upper in ranges.values()
        for code_point in range(lower, upper)
    ]
    # Shuffle to remove positional bias.
    (rng or random).shuffle(chars)
    return tuple(chars)


DICTIONARY: tuple[str, ...] = build_dictionary()
DICT_LENGTH: int = len(DICTIONARY)
