"""Generator configuration models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Length 6 over 62 symbols gives a collision space of ~5.68e10.
DEFAULT_RANDOM_ID_LEN = 6


class _Unset:
    """Marker for an argument that was not supplied."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class GeneratorOptions:
    debug: bool = False
