"""Core building blocks: alphabet, encoding, errors and pluggable sources."""

from frugal_id.core.dictionary import DICT_LENGTH, DICT_RANGES, DICTIONARY, DictRanges
from frugal_id.core.errors import FrugalIdError, InvalidLengthError

__all__ = [
    "DICT_LENGTH",
    "DICT_RANGES",
    "DICTIONARY",
    "DictRanges",
    "FrugalIdError",
    "InvalidLengthError",
]
