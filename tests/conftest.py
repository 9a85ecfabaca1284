import random

import pytest


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value.

    0.5 makes every noise term exactly zero; 0.0 and 1.0 give the extreme
    negative and positive noise.
    """

    def __init__(self, value=0.5):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def quiet_rng():
    """A random source that adds no noise."""
    return FixedRandom(0.5)


@pytest.fixture
def fixed_random():
    """Factory for random sources with a chosen fixed output."""
    return FixedRandom


@pytest.fixture
def headless_env(monkeypatch):
    """Keep the SDL driver set by headless runs from leaking past the test."""
    monkeypatch.delenv("SDL_VIDEODRIVER", raising=False)
    return monkeypatch
