import pytest

from gridsnake.config import CELL_SIZE, GRID_W, GRID_H, SCREEN_WIDTH, SCREEN_HEIGHT, Config
from gridsnake.main import parse_args


def test_grid_dimensions():
    assert (SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE) == (625, 625, 25)
    assert (GRID_W, GRID_H) == (25, 25)


@pytest.mark.parametrize("kwargs", [{"tick_ms": 0}, {"tick_ms": -5}, {"fps": 0}])
def test_config_rejects_non_positive_rates(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_cli_defaults():
    cfg = parse_args([])
    assert cfg == Config()
    assert cfg.tick_ms == 100


def test_cli_options():
    cfg = parse_args(["--seed", "3", "--tick-ms", "80", "--fps", "30", "--debug"])
    assert cfg == Config(seed=3, tick_ms=80, fps=30, debug=True)


def test_cli_rejects_bad_tick():
    with pytest.raises(SystemExit):
        parse_args(["--tick-ms", "0"])
