import os

# pygame 창 없이 렌더러/입력 테스트를 돌리기 위한 더미 드라이버
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from grid import GridModel


@pytest.fixture
def grid() -> GridModel:
    return GridModel(700, 400, 50)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
