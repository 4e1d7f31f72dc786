# main.py
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence, Tuple, Union

import pygame  # type: ignore

from .config import CFG, Config, FOOD_STRATEGIES, UP, DOWN, LEFT, RIGHT
from .game import Game
from .render import draw_frame
from .storage import JsonFileStore, KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)

Action = Union[str, Tuple[int, int]]   # a direction, or "start" / "restart" / "quit"

# ----- Key tables -----
KEY_ACTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
    pygame.K_r: "restart",
    pygame.K_SPACE: "start",
    pygame.K_RETURN: "start",
    pygame.K_ESCAPE: "quit",
}

# Same physical keys on a Russian layout arrive as these characters
CHAR_ACTIONS = {
    "ц": UP,
    "ы": DOWN,
    "ф": LEFT,
    "в": RIGHT,
    "к": "restart",
}


def map_key(key: int, char: str = "") -> Optional[Action]:
    if key in KEY_ACTIONS:
        return KEY_ACTIONS[key]
    return CHAR_ACTIONS.get(char.lower())


def apply_action(game: Game, action: Action, now_ms: int) -> bool:
    """Route one mapped key to the game. Returns False to quit."""
    if action == "quit":
        return False
    if action == "restart":
        game.restart(now_ms)
    elif action == "start":
        game.toggle_pause(now_ms)
    else:
        game.turn(*action)
    return True


def handle_input(game: Game, now_ms: int) -> bool:
    """Process pending events. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            action = map_key(event.key, getattr(event, "unicode", ""))
            if action is not None and not apply_action(game, action, now_ms):
                return False
    return True


# ---------- CLI ----------
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game")
    parser.add_argument("--grid", type=int, default=CFG.grid_size,
                        help="cells per side")
    parser.add_argument("--speed", type=int, default=CFG.ticks_per_second,
                        help="simulation ticks per second")
    parser.add_argument("--walls", action="store_true",
                        help="edges are fatal instead of wrapping")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--food-strategy", choices=FOOD_STRATEGIES,
                        default=CFG.food_strategy)
    parser.add_argument("--cell", type=int, default=CFG.cell_px,
                        help="pixels per cell")
    parser.add_argument("--scores", default=CFG.high_score_path,
                        help="JSON file holding the high score")
    parser.add_argument("--no-save", action="store_true",
                        help="keep the high score in memory only")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        grid_size=args.grid,
        ticks_per_second=args.speed,
        wrap=not args.walls,
        food_strategy=args.food_strategy,
        seed=args.seed,
        high_score_path=args.scores,
        cell_px=args.cell,
    )


def build_store(cfg: Config, no_save: bool) -> KeyValueStore:
    if no_save:
        return MemoryStore()
    return JsonFileStore(cfg.high_score_path)


def run(cfg: Config, store: KeyValueStore) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = Game(cfg, store)
    running = True

    while running:
        now = pygame.time.get_ticks()

        # 1) input
        running = handle_input(game, now)
        if not running:
            break

        # 2) update (fixed timestep, independent of fps)
        game.frame(now)

        # 3) render
        draw_frame(screen, font, game.snapshot(), cfg.cell_px)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = config_from_args(args)
    run(cfg, build_store(cfg, args.no_save))


if __name__ == "__main__":
    main()
