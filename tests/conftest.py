import random

import pytest

from main import build_scenes
from storage import MemoryStore


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def scenes(store, rng):
    scenes = build_scenes(store, rng=rng)
    scenes.start("play")
    return scenes


@pytest.fixture
def play(scenes):
    return scenes.get("play")
