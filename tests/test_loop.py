from gridsnake.config import Config
from gridsnake.game import Point, new_game_state, update


def test_tick_fires_once_interval_has_accumulated(state):
    assert not update(state, 40)
    assert state.timer == 40
    assert not update(state, 99)
    assert state.snake[0] == (125, 300)

    assert update(state, 100)
    assert state.timer == 0
    assert state.snake[0] == (150, 300)


def test_long_frame_runs_a_single_step(state):
    assert update(state, 1000)
    assert state.snake[0] == (150, 300)
    assert state.timer == 0


def test_tick_interval_comes_from_config():
    state = new_game_state(0, Config(seed=0, tick_ms=250))
    assert not update(state, 200)
    assert update(state, 250)


def test_no_ticks_while_game_over(state):
    state.game_over = True
    before = list(state.snake)
    assert not update(state, 5000)
    assert state.snake == before
    assert state.last_time == 5000


def test_restart_does_not_fire_catch_up_tick(state):
    state.snake = [Point(600, 300), Point(575, 300), Point(550, 300)]
    update(state, 100)
    assert state.game_over

    update(state, 10_000)
    state.game_over = False
    assert not update(state, 10_016)
    assert state.timer == 16
