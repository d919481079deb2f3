from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

# ----- Window & grid -----
SCREEN_WIDTH, SCREEN_HEIGHT = 625, 625
CELL_SIZE = 25
GRID_W, GRID_H = SCREEN_WIDTH // CELL_SIZE, SCREEN_HEIGHT // CELL_SIZE

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
RED   = (255, 0, 0)
TEXT  = (255, 255, 255)
FONT_SIZE = 30

REPLAY_PROMPT = "Press any key to replay"


# ----- Headings (numeric order matters: 0..3) -----
class Heading(IntEnum):
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


# (dx, dy) in pixels per tick
DELTAS = {
    Heading.RIGHT: (CELL_SIZE, 0),
    Heading.DOWN:  (0, CELL_SIZE),
    Heading.LEFT:  (-CELL_SIZE, 0),
    Heading.UP:    (0, -CELL_SIZE),
}

# ----- Initial layout -----
INITIAL_SNAKE = ((125, 300), (100, 300), (75, 300))
INITIAL_HEADING = Heading.RIGHT
INITIAL_FOOD = (325, 300)

# random picks before falling back to free-cell enumeration
MAX_FOOD_ATTEMPTS = 64


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 100
    fps: int = 60
    debug: bool = False

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")


CFG = Config()
