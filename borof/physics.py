"""Bodies, platforms and the collision rules of the arena."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 800

GRAVITY = 0.5
MOVE_ACCEL = 0.5
MAX_SPEED = 3.0
JUMP_STRENGTH = -10.0
TRAMPOLINE_BOOST_X = 6.0
FRICTION = 0.8
STOP_SPEED = 0.1
MAX_JUMPS = 2
BOUNCE = 1.5

PLATFORM_HEIGHT = 20.0
PLATFORM_SPEED = 1.5


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: Rect) -> bool:
        """Whether the two rectangles share some interior area."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )


@dataclass
class Platform:
    """A platform sliding left and right across the screen."""

    rect: Rect
    speed: float = PLATFORM_SPEED
    direction: int = 1

    def advance(self, screen_width: float) -> None:
        """Move one frame and turn around when leaving the screen."""
        self.rect.x += self.speed * self.direction
        if self.rect.x < 0 or self.rect.right > screen_width:
            self.direction *= -1


@dataclass
class Body:
    """A moving player body centred on (x, y) with half extents."""

    x: float
    y: float
    half_width: float
    half_height: float
    vx: float = 0.0
    vy: float = 0.0
    on_ground: bool = False
    jumps_left: int = MAX_JUMPS
    facing: int = 1

    def bounds(self) -> Rect:
        """The box the collision rules use for this body."""
        return Rect(
            self.x - self.half_width,
            self.y - self.half_height,
            2 * self.half_width,
            2 * self.half_height,
        )

    def steer(self, left: bool, right: bool) -> None:
        """Accelerate towards the held direction, or slow down by friction."""
        if left:
            self.vx = max(self.vx - MOVE_ACCEL, -MAX_SPEED)
            self.facing = -1
        elif right:
            self.vx = min(self.vx + MOVE_ACCEL, MAX_SPEED)
            self.facing = 1
        else:
            self.vx *= FRICTION
            if abs(self.vx) < STOP_SPEED:
                self.vx = 0.0

    def jump(self) -> bool:
        """Jump if a jump is left; report whether it happened."""
        if self.jumps_left <= 0:
            return False
        self.vy = JUMP_STRENGTH
        self.jumps_left -= 1
        return True

    def apply_gravity(self) -> None:
        self.vy += GRAVITY
        self.on_ground = False

    def _land(self, y: float) -> None:
        self.y = y
        self.vy = 0.0
        self.on_ground = True
        self.jumps_left = MAX_JUMPS

    def move_vertical(self, platforms: Iterable[Platform], ground_y: float) -> None:
        """Move by the vertical speed, landing on or bumping into platforms."""
        self.y += self.vy
        for platform in platforms:
            r = platform.rect
            box = self.bounds()
            if box.right > r.x and box.x < r.right:
                if box.bottom >= r.y and box.y < r.y and self.vy >= 0:
                    self._land(r.y - self.half_height)
                elif box.y <= r.bottom and box.bottom > r.bottom and self.vy < 0:
                    self.y = r.bottom + self.half_height
                    self.vy = 0.0
        if self.y + self.half_height >= ground_y:
            self._land(ground_y - self.half_height)

    def move_horizontal(
        self, platforms: Iterable[Platform], screen_width: float
    ) -> None:
        """Move by the horizontal speed, bouncing off platform sides and walls."""
        self.x += self.vx
        for platform in platforms:
            r = platform.rect
            box = self.bounds()
            if box.bottom > r.y and box.y < r.bottom:
                if box.right >= r.x and box.x < r.x and self.vx > 0:
                    self.x = r.x - self.half_width
                    self.vx = -TRAMPOLINE_BOOST_X
                elif box.x <= r.right and box.right > r.right and self.vx < 0:
                    self.x = r.right + self.half_width
                    self.vx = TRAMPOLINE_BOOST_X
        if self.x - self.half_width <= 0:
            self.x = self.half_width
            self.vx = TRAMPOLINE_BOOST_X
        if self.x + self.half_width >= screen_width:
            self.x = screen_width - self.half_width
            self.vx = -TRAMPOLINE_BOOST_X


def make_platforms(
    count: int,
    rng: random.Random,
    screen_width: float = SCREEN_WIDTH,
    screen_height: float = SCREEN_HEIGHT,
) -> list[Platform]:
    """Stack platforms of random position and width up from the ground."""
    platforms = []
    for level in range(count):
        x = float(rng.randint(50, int(screen_width) - 150))
        width = float(rng.randint(150, 300))
        y = float(screen_height - 100 - level * 50)
        platforms.append(
            Platform(
                rect=Rect(x, y, width, PLATFORM_HEIGHT),
                speed=PLATFORM_SPEED,
                direction=1 if level % 2 == 0 else -1,
            )
        )
    return platforms


def resolve_ball_collision(first: Body, second: Body) -> bool:
    """Push two round bodies apart and bounce them; report whether they touched.

    The radius of each body is its half width; both have equal mass.
    """
    dx = second.x - first.x
    dy = second.y - first.y
    dist = math.hypot(dx, dy)
    min_dist = first.half_width + second.half_width
    if dist == 0.0 or dist >= min_dist:
        return False

    nx, ny = dx / dist, dy / dist
    push = (min_dist - dist) / 2
    first.x -= nx * push
    first.y -= ny * push
    second.x += nx * push
    second.y += ny * push

    vel_along_normal = (second.vx - first.vx) * nx + (second.vy - first.vy) * ny
    if vel_along_normal > 0:
        return True

    impulse = -(1 + BOUNCE) * vel_along_normal / 2
    first.vx -= impulse * nx
    first.vy -= impulse * ny
    second.vx += impulse * nx
    second.vy += impulse * ny
    return True