"""The window, input handling and drawing for both arenas."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from pathlib import Path

import pygame

from .game import SPRITE_SIZE, BallGame, Controls, DuelGame, Pose
from .physics import SCREEN_HEIGHT, SCREEN_WIDTH, Rect

TITLE = "Two Balls with Collision Bounce"
FPS = 60
FRAME_SIZE = 16

RAYWHITE = (245, 245, 245)
DARKGRAY = (80, 80, 80)
SKYBLUE = (102, 191, 255)
RED = (230, 41, 55)
BLUE = (0, 121, 241)
GREEN = (0, 228, 48)

SPRITE_FILES = {
    Pose.IDLE: Path("heros/herochar_idle_anim.gif"),
    Pose.RUN: Path("heros/herochar_run_anim.gif"),
    Pose.ATTACK: Path("heros/herochar_sword_attack_anim.gif"),
}


@dataclass(frozen=True)
class _Bindings:
    left: int
    right: int
    jump: int
    attack: int | None = None


FIRST_KEYS = _Bindings(pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_f)
SECOND_KEYS = _Bindings(pygame.K_a, pygame.K_d, pygame.K_w)


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {text}")
    return value


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected zero or more, got {text}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(
        prog="borof", description="Two-player platform arena."
    )
    parser.add_argument(
        "--mode",
        choices=("duel", "balls"),
        default="duel",
        help="sprite duel or bouncing balls",
    )
    parser.add_argument("--seed", type=int, default=None, help="platform layout seed")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory of sprites"
    )
    parser.add_argument("--fps", type=_positive, default=FPS, help="frame rate")
    parser.add_argument(
        "--frames",
        type=_non_negative,
        default=0,
        help="stop after this many frames; 0 runs until the window closes",
    )
    return parser.parse_args(argv)


def _read_controls(keys: _Bindings, held, pressed: set[int]) -> Controls:
    return Controls(
        left=bool(held[keys.left]),
        right=bool(held[keys.right]),
        jump=keys.jump in pressed,
        attack=keys.attack is not None and keys.attack in pressed,
    )


def _load_frame(path: Path) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None
    width = min(FRAME_SIZE, image.get_width())
    height = min(FRAME_SIZE, image.get_height())
    return image.subsurface((0, 0, width, height)).copy()


def _load_sprites(assets: Path) -> dict[Pose, pygame.Surface | None]:
    return {pose: _load_frame(assets / name) for pose, name in SPRITE_FILES.items()}


def _rounded(screen: pygame.Surface, rect: Rect, color) -> None:
    area = pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))
    pygame.draw.rect(screen, color, area, border_radius=min(area.w, area.h) // 2)


def _draw_sprite(screen, frame, body, tint) -> None:
    dest = pygame.Rect(round(body.x), round(body.y), int(SPRITE_SIZE), int(SPRITE_SIZE))
    if frame is None:
        pygame.draw.rect(screen, tint, dest)
        return
    image = pygame.transform.scale(frame, dest.size)
    if body.facing < 0:
        image = pygame.transform.flip(image, True, False)
    image.fill((*tint, 255), special_flags=pygame.BLEND_RGBA_MULT)
    screen.blit(image, dest)


def _draw(screen, game, sprites, font) -> None:
    screen.fill(RAYWHITE)
    _rounded(screen, game.ground, DARKGRAY)
    for platform in game.platforms:
        _rounded(screen, platform.rect, SKYBLUE)

    if isinstance(game, DuelGame):
        for body, pose, tint in zip(game.bodies, game.poses, (RAYWHITE, GREEN)):
            _draw_sprite(screen, sprites[pose], body, tint)
        if game.banner:
            screen.blit(font.render(game.banner, True, RED), (300, SCREEN_HEIGHT // 2))
    else:
        for body, color in zip(game.bodies, (RED, BLUE)):
            pygame.draw.circle(
                screen, color, (round(body.x), round(body.y)), round(body.half_width)
            )


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the chosen arena until it is closed."""
    args = parse_args(argv)
    rng = random.Random(args.seed)
    game = DuelGame(rng) if args.mode == "duel" else BallGame(rng)

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        sprites = _load_sprites(args.assets)
        font = pygame.font.Font(None, 100)
        clock = pygame.time.Clock()

        frame = 0
        while not args.frames or frame < args.frames:
            pressed: set[int] = set()
            closing = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    closing = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        closing = True
                    pressed.add(event.key)
            if closing:
                break

            held = pygame.key.get_pressed()
            game.step(
                _read_controls(FIRST_KEYS, held, pressed),
                _read_controls(SECOND_KEYS, held, pressed),
            )
            _draw(screen, game, sprites, font)
            pygame.display.flip()
            clock.tick(args.fps)
            frame += 1
    finally:
        pygame.quit()
    return 0