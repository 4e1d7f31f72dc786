# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    BG, BOARD, SNAKE, SNAKE_HEAD, FOOD, EYE, TEXT, OVERLAY, HUD_PX,
)
from .game import Snapshot


def draw_cell(screen: pygame.Surface, gx: int, gy: int, cell: int,
              color: Tuple[int, int, int], inset: int = 2) -> None:
    rect = pygame.Rect(gx * cell + inset, HUD_PX + gy * cell + inset,
                       cell - 2 * inset, cell - 2 * inset)
    pygame.draw.rect(screen, color, rect, border_radius=max(1, cell // 12))


def draw_face(screen: pygame.Surface, snap: Snapshot, cell: int) -> None:
    """Two eyes on the head, offset towards the heading."""
    hx, hy = snap.snake[0]
    dx, dy = snap.direction
    cx = hx * cell + cell / 2 + dx * cell * 0.10
    cy = HUD_PX + hy * cell + cell / 2 + dy * cell * 0.10
    # perpendicular to the heading
    px, py = -dy * cell * 0.18, dx * cell * 0.18
    r = max(2, int(cell * 0.12))
    pygame.draw.circle(screen, EYE, (round(cx + px), round(cy + py)), r)
    pygame.draw.circle(screen, EYE, (round(cx - px), round(cy - py)), r)


def draw_game(screen: pygame.Surface, font: pygame.font.Font,
              snap: Snapshot, cell: int) -> None:
    screen.fill(BG)
    side = snap.grid_size * cell
    pygame.draw.rect(screen, BOARD, pygame.Rect(0, HUD_PX, side, side))

    # food
    fx, fy = snap.food
    pygame.draw.circle(
        screen, FOOD,
        (fx * cell + cell // 2, HUD_PX + fy * cell + cell // 2),
        max(2, int(cell * 0.32)),
    )
    # body tail-first so the head lands on top
    for x, y in reversed(snap.snake[1:]):
        draw_cell(screen, x, y, cell, SNAKE)
    hx, hy = snap.snake[0]
    draw_cell(screen, hx, hy, cell, SNAKE_HEAD, inset=1)
    draw_face(screen, snap, cell)

    # score
    txt = font.render(f"Score: {snap.score}   Best: {snap.high_score}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_message(screen: pygame.Surface, font: pygame.font.Font,
                 title: str, sub: str) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))

    t = font.render(title, True, TEXT)
    s = font.render(sub, True, TEXT)
    screen.blit(t, t.get_rect(center=(width // 2, height // 2 - 12)))
    screen.blit(s, s.get_rect(center=(width // 2, height // 2 + 16)))


def draw_frame(screen: pygame.Surface, font: pygame.font.Font,
               snap: Snapshot, cell: int) -> None:
    draw_game(screen, font, snap, cell)
    if snap.dead:
        draw_message(screen, font, "GAME OVER", f"Score {snap.score} - press R to restart")
    elif not snap.running:
        draw_message(screen, font, "SNAKE", "Press Space to start")
