"""Shared test fixtures."""

from __future__ import annotations

import random

import pytest

from frugal_id.config import GeneratorOptions
from frugal_id.generator import ShortUid


class RecordingLogger:
    """Debug logger that keeps every call for inspection."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def log(self, message: str, *args) -> None:
        self.calls.append((message, args))

    @property
    def messages(self) -> list[str]:
        return [message % args if args else message for message, args in self.calls]


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def gen():
    return ShortUid(GeneratorOptions(debug=False))
