"""Short unique ID generator.

``ShortUid`` produces IDs much shorter than a 36-character UUID string,
using either of two strategies over the shared 62-symbol alphabet:

- ``counter_uuid``: encodes a per-instance counter, so IDs never collide
  within the lifetime of one instance.
- ``random_uuid``: samples a fixed number of alphabet symbols uniformly.
"""

from __future__ import annotations

import operator
import threading
from typing import Any

from frugal_id.config import DEFAULT_RANDOM_ID_LEN, UNSET, GeneratorOptions
from frugal_id.core.debug_log import LOG_PREFIX, DebugLogger, LoggingDebugLogger
from frugal_id.core.dictionary import DICT_LENGTH, DICTIONARY
from frugal_id.core.encoding import encode_counter, sample_random
from frugal_id.core.errors import InvalidLengthError
from frugal_id.core.random_source import RandomSource, default_random_source


class ShortUid:
    """Counter-based and random short ID generator.

    Args:
        options: Generator options. ``None`` means defaults.
        logger: Receives debug events when ``options.debug`` is set.
            Defaults to a ``logging``-backed logger; ``None`` disables output.
        rng: Uniform random source for ``random_uuid``. Defaults to a
            private ``random.Random`` instance.
    """

    def __init__(
        self,
        options: GeneratorOptions | None = None,
        *,
        logger: DebugLogger | None = UNSET,
        rng: RandomSource | None = None,
    ) -> None:
        options = options or GeneratorOptions()
        self._debug = options.debug
        self._logger = LoggingDebugLogger() if logger is UNSET else logger
        self._rng = rng or default_random_source()
        self._counter = 0
        self._lock = threading.Lock()
        self._log("Generator created with Dictionary Size %d", DICT_LENGTH)

    @property
    def debug(self) -> bool:
        return self._debug

    def _log(self, message: str, *args: Any) -> None:
        if not self._debug:
            return
        log = getattr(self._logger, "log", None)
        if callable(log):
            log(f"{LOG_PREFIX} {message}", *args)

    # --- Dictionary ---

    def get_dict(self) -> list[str]:
        """Return a copy of the shared alphabet."""
        return list(DICTIONARY)

    def get_dict_length(self) -> int:
        return DICT_LENGTH

    # --- Generation ---

    def counter_uuid(self) -> str:
        """Encode the current counter value, then increment the counter."""
        with self._lock:
            uid = encode_counter(self._counter, DICTIONARY)
            self._counter += 1
        return uid

    def random_uuid(self, length: int = UNSET) -> str:
        """Return ``length`` uniformly sampled alphabet symbols.

        Omitting ``length`` or passing ``UNSET`` uses the default of 6.
        ``None``, bools, non-integers and values below 1 raise
        ``InvalidLengthError``.
        """
        if length is UNSET:
            length = DEFAULT_RANDOM_ID_LEN
        if isinstance(length, bool):
            raise InvalidLengthError()
        try:
            length = operator.index(length)
        except TypeError:
            raise InvalidLengthError() from None
        if length < 1:
            raise InvalidLengthError()
        return sample_random(length, DICTIONARY, self._rng)

    # --- Counter ---

    def get_counter(self) -> int:
        return self._counter

    def reset_counter(self) -> None:
        with self._lock:
            self._counter = 0
        self._log("Counter reset to 0")


def create_generator(
    debug: bool = False,
    logger: DebugLogger | None = UNSET,
    rng: RandomSource | None = None,
) -> ShortUid:
    """Build a ``ShortUid`` from keyword settings."""
    return ShortUid(GeneratorOptions(debug=debug), logger=logger, rng=rng)
