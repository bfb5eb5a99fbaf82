"""ID generation adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from frugal_id.config import UNSET

if TYPE_CHECKING:
    from frugal_id.generator import ShortUid


class IdGenerator(Protocol):
    def generate(self) -> str: ...


class CounterIdGenerator:
    """Collision-free IDs from a generator's counter."""

    def __init__(self, source: ShortUid) -> None:
        self._source = source

    def generate(self) -> str:
        return self._source.counter_uuid()


class RandomIdGenerator:
    """Fixed-length random IDs; ``length=UNSET`` uses the default length."""

    def __init__(self, source: ShortUid, length: int = UNSET) -> None:
        self._source = source
        self._length = length

    def generate(self) -> str:
        return self._source.random_uuid(self._length)
