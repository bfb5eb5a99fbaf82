"""Random source abstraction for injectable, non-cryptographic sampling."""

from __future__ import annotations

import random
from typing import Any, MutableSequence, Protocol


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def default_random_source() -> RandomSource:
    """Default implementation: a fresh Mersenne Twister instance."""
    return random.Random()
