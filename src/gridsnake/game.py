# game.py
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence, Tuple
import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, GRID_W, GRID_H,
    BG, GREEN, RED, TEXT, REPLAY_PROMPT,
    Heading, DELTAS,
    INITIAL_SNAKE, INITIAL_HEADING, INITIAL_FOOD, MAX_FOOD_ATTEMPTS,
    CFG, Config,
)

# key -> heading while playing
KEY_HEADINGS = {
    pygame.K_w: Heading.UP,
    pygame.K_a: Heading.LEFT,
    pygame.K_s: Heading.DOWN,
    pygame.K_d: Heading.RIGHT,
}


class Point(NamedTuple):
    x: int
    y: int


class BoardFullError(RuntimeError):
    """No free cell is left for the food."""


# ---------- Helpers ----------
def in_bounds(p: Point) -> bool:
    return 0 <= p.x < SCREEN_WIDTH and 0 <= p.y < SCREEN_HEIGHT

def initial_snake() -> List[Point]:
    return [Point(x, y) for x, y in INITIAL_SNAKE]

def free_cells(snake: Sequence[Point]) -> np.ndarray:
    """Grid coordinates (gy, gx) of every cell not covered by the snake."""
    occupied = np.zeros((GRID_H, GRID_W), dtype=bool)
    for p in snake:
        if in_bounds(p):
            occupied[p.y // CELL_SIZE, p.x // CELL_SIZE] = True
    return np.argwhere(~occupied)

def spawn_food(snake: Sequence[Point], rng: np.random.Generator) -> Point:
    """
    Pick a random grid-aligned cell that is not part of the snake.

    A handful of uniform random picks is tried first; once those keep landing
    on the snake, the free cells are enumerated and one is chosen directly.
    Raises BoardFullError when the snake covers the whole playfield.
    """
    taken = set(snake)
    for _ in range(MAX_FOOD_ATTEMPTS):
        cand = Point(int(rng.integers(GRID_W)) * CELL_SIZE,
                     int(rng.integers(GRID_H)) * CELL_SIZE)
        if cand not in taken:
            return cand

    free = free_cells(snake)
    if len(free) == 0:
        raise BoardFullError(f"snake of length {len(snake)} fills the board")
    gy, gx = free[rng.integers(len(free))]
    return Point(int(gx) * CELL_SIZE, int(gy) * CELL_SIZE)

def draw_cell(screen: pygame.Surface, p: Point, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(p.x, p.y, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Point]             # head at index 0
    heading: Heading
    food: Point
    rng: np.random.Generator
    tick_ms: int                   # fixed step interval
    last_time: int                 # ms timestamp of the previous frame
    timer: int = 0                 # ms accumulated since the last tick
    game_over: bool = False
    debug: bool = field(default=False, repr=False)

def new_game_state(now_ms: int, cfg: Optional[Config] = None) -> GameState:
    cfg = cfg or CFG
    return GameState(
        snake=initial_snake(),
        heading=INITIAL_HEADING,
        food=Point(*INITIAL_FOOD),
        rng=np.random.default_rng(cfg.seed),
        tick_ms=cfg.tick_ms,
        last_time=now_ms,
        debug=cfg.debug,
    )

def reset_game(state: GameState) -> None:
    """Back to the starting layout. Timing and the RNG carry over."""
    state.snake = initial_snake()
    state.heading = INITIAL_HEADING
    state.food = Point(*INITIAL_FOOD)
    state.game_over = False

# ---------- Input / Update / Draw ----------
def handle_event(state: GameState, event: pygame.event.Event) -> bool:
    """Apply one event to the state. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True

    if state.game_over:
        reset_game(state)
        if state.debug:
            print("[SNAKE] restart")
    elif event.key in KEY_HEADINGS:
        state.heading = KEY_HEADINGS[event.key]
    return True

def handle_input(state: GameState) -> bool:
    """Drain the pygame queue through handle_event. Return False to quit."""
    for event in pygame.event.get():
        if not handle_event(state, event):
            return False
    return True

def tick(state: GameState) -> None:
    """Advance the snake by exactly one cell and resolve collisions and food."""
    snake = state.snake

    # body follows, tail first so no source is overwritten before it's read
    for i in range(len(snake) - 1, 0, -1):
        snake[i] = snake[i - 1]

    dx, dy = DELTAS[state.heading]
    head = Point(snake[0].x + dx, snake[0].y + dy)
    snake[0] = head

    if not in_bounds(head):
        state.game_over = True

    if head in snake[1:]:
        state.game_over = True

    if head == state.food:
        # new segment sits on the tail until the next shift drags it along
        snake.append(snake[-1])
        try:
            state.food = spawn_food(snake, state.rng)
        except BoardFullError:
            state.game_over = True

    if state.game_over and state.debug:
        print(f"[SNAKE] game over: length={len(snake)} head={tuple(head)}")

def update(state: GameState, now_ms: int) -> bool:
    """
    Accumulate frame time and fire at most one tick once the interval elapses.
    Returns True if a tick ran this frame.
    """
    delta = now_ms - state.last_time
    state.last_time = now_ms
    if state.game_over:
        return False

    state.timer += delta
    if state.timer >= state.tick_ms:
        tick(state)
        state.timer = 0
        return True
    return False

def draw_game(screen: pygame.Surface, state: GameState) -> None:
    screen.fill(BG)
    for p in state.snake:
        draw_cell(screen, p, GREEN)
    draw_cell(screen, state.food, RED)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    screen.fill(BG)
    prompt = font.render(REPLAY_PROMPT, True, TEXT)
    screen.blit(prompt, prompt.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))

def render(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    if state.game_over:
        draw_game_over(screen, font)
    else:
        draw_game(screen, state)
