import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from shufflepop_game import GameState


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(rng):
    return GameState(rng)


@pytest.fixture
def playing(state):
    """A state that has tapped through the title and first tutorial screen."""
    state.advance(True)
    state.advance(True)
    assert state.play
    return state
