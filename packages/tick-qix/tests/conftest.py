"""Shared fixtures for tick-qix tests."""
from __future__ import annotations

import random

import pytest


class FirstChoice(random.Random):
    """RNG whose ``choice`` always returns the first candidate."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice(0)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)
