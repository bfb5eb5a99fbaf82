"""frugal-id: short unique ID generator."""

from frugal_id.config import DEFAULT_RANDOM_ID_LEN, UNSET, GeneratorOptions
from frugal_id.core.debug_log import DebugLogger, LoggingDebugLogger
from frugal_id.core.dictionary import DICT_RANGES, DictRanges
from frugal_id.core.errors import FrugalIdError, InvalidLengthError
from frugal_id.core.id_generator import (
    CounterIdGenerator,
    IdGenerator,
    RandomIdGenerator,
)
from frugal_id.core.random_source import RandomSource
from frugal_id.generator import ShortUid, create_generator

__all__ = [
    "DEFAULT_RANDOM_ID_LEN",
    "UNSET",
    "GeneratorOptions",
    "DebugLogger",
    "LoggingDebugLogger",
    "DICT_RANGES",
    "DictRanges",
    "FrugalIdError",
    "InvalidLengthError",
    "CounterIdGenerator",
    "IdGenerator",
    "RandomIdGenerator",
    "RandomSource",
    "ShortUid",
    "create_generator",
]
