import pygame  # type: ignore
import pytest

from gridsnake.config import UP, DOWN, LEFT, RIGHT
from gridsnake.main import (
    apply_action, build_store, config_from_args, map_key, parse_args,
)
from gridsnake.storage import JsonFileStore, MemoryStore

from conftest import make_game, put_snake


class TestKeyMap:
    """Raw keys to game actions, no window needed."""

    @pytest.mark.parametrize("key, expected", [
        (pygame.K_UP, UP), (pygame.K_DOWN, DOWN),
        (pygame.K_LEFT, LEFT), (pygame.K_RIGHT, RIGHT),
        (pygame.K_w, UP), (pygame.K_s, DOWN),
        (pygame.K_a, LEFT), (pygame.K_d, RIGHT),
        (pygame.K_r, "restart"), (pygame.K_SPACE, "start"),
        (pygame.K_ESCAPE, "quit"),
    ])
    def test_keys(self, key, expected):
        assert map_key(key) == expected

    @pytest.mark.parametrize("char, expected", [
        ("ц", UP), ("ы", DOWN), ("ф", LEFT), ("в", RIGHT),
        ("к", "restart"), ("Ц", UP),
    ])
    def test_russian_layout(self, char, expected):
        assert map_key(-1, char) == expected

    def test_unknown_key(self):
        assert map_key(-1, "z") is None


class TestApplyAction:

    def test_turn_restart_start_quit(self):
        game = make_game()
        put_snake(game, [(2, 2), (1, 2)], RIGHT, food=(0, 0))
        assert apply_action(game, UP, 0.0)
        assert game.snake.pending == UP
        assert apply_action(game, "start", 0.0)
        assert game.running
        assert apply_action(game, "restart", 0.0)
        assert list(game.snake) == [(2, 2)]
        assert apply_action(game, "quit", 0.0) is False


class TestCli:

    def test_defaults(self):
        cfg = config_from_args(parse_args([]))
        assert cfg.grid_size == 20
        assert cfg.wrap is True

    def test_overrides(self):
        args = parse_args(["--grid", "12", "--speed", "6", "--walls",
                           "--seed", "3", "--food-strategy", "enumerate"])
        cfg = config_from_args(args)
        assert (cfg.grid_size, cfg.ticks_per_second, cfg.wrap) == (12, 6, False)
        assert cfg.seed == 3
        assert cfg.food_strategy == "enumerate"

    def test_store_choice(self, tmp_path):
        args = parse_args(["--scores", str(tmp_path / "s.json")])
        cfg = config_from_args(args)
        assert isinstance(build_store(cfg, no_save=False), JsonFileStore)
        assert isinstance(build_store(cfg, no_save=True), MemoryStore)
