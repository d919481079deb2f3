import os

# no window needed for surfaces, fonts or synthetic events
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from gridsnake.config import Config  # noqa: E402
from gridsnake.game import new_game_state  # noqa: E402


@pytest.fixture
def state():
    return new_game_state(0, Config(seed=0))
