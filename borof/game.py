"""The two arenas: bouncing balls and the two-player sprite duel."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .physics import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Body,
    Platform,
    Rect,
    make_platforms,
    resolve_ball_collision,
)

GROUND_HEIGHT = 40.0
BALL_PLATFORM_COUNT = 15
DUEL_PLATFORM_COUNT = 10
BALL_RADIUS = 15.0
SPRITE_SIZE = 50.0
ROUND_BANNER = "Player 1 wins the round"
RESPAWN_FIRST_X = 0.0
RESPAWN_SECOND_X = 1000.0


@dataclass(frozen=True)
class Controls:
    """What one player does during a frame."""

    left: bool = False
    right: bool = False
    jump: bool = False
    attack: bool = False


class Pose(Enum):
    """Which animation a duel sprite shows."""

    IDLE = "idle"
    RUN = "run"
    ATTACK = "attack"


def pose_for(body: Body, attacking: bool) -> Pose:
    """The pose for a body: attacking wins, then moving, else idle."""
    if attacking:
        return Pose.ATTACK
    if body.vx != 0 or body.vy != 0:
        return Pose.RUN
    return Pose.IDLE


class _Arena:
    """Ground, sliding platforms and two bodies sharing one frame update."""

    def __init__(self, rng: random.Random, platform_count: int) -> None:
        self.ground = Rect(
            0.0, SCREEN_HEIGHT - GROUND_HEIGHT, float(SCREEN_WIDTH), GROUND_HEIGHT
        )
        self.platforms: list[Platform] = make_platforms(
            platform_count, rng, SCREEN_WIDTH, SCREEN_HEIGHT
        )
        self.first: Body
        self.second: Body

    @property
    def bodies(self) -> tuple[Body, Body]:
        return self.first, self.second

    def _steer(self, first: Controls | None, second: Controls | None) -> None:
        for body, controls in zip(self.bodies, (first, second)):
            controls = controls or Controls()
            body.steer(controls.left, controls.right)
            if controls.jump:
                body.jump()

    def _fall(self) -> None:
        for body in self.bodies:
            body.apply_gravity()
        for platform in self.platforms:
            platform.advance(SCREEN_WIDTH)
        for body in self.bodies:
            body.move_vertical(self.platforms, self.ground.y)

    def _slide(self) -> None:
        for body in self.bodies:
            body.move_horizontal(self.platforms, SCREEN_WIDTH)


class BallGame(_Arena):
    """Two balls that jump between platforms and bounce off each other."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng or random.Random(), BALL_PLATFORM_COUNT)
        start_y = SCREEN_HEIGHT - 60.0
        self.first = Body(100.0, start_y, BALL_RADIUS, BALL_RADIUS)
        self.second = Body(200.0, start_y, BALL_RADIUS, BALL_RADIUS)

    def step(
        self, first: Controls | None = None, second: Controls | None = None
    ) -> bool:
        """Advance one frame; report whether the balls collided."""
        self._steer(first, second)
        self._fall()
        self._slide()
        return resolve_ball_collision(self.first, self.second)


class DuelGame(_Arena):
    """Two sprites chasing each other; touching ends the round."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng or random.Random(), DUEL_PLATFORM_COUNT)
        # The collision box reaches one sprite size to each side of the anchor.
        self.first = Body(
            10.0, 100.0, SPRITE_SIZE, SPRITE_SIZE, jumps_left=0, facing=1
        )
        self.second = Body(
            200.0, 100.0, SPRITE_SIZE, SPRITE_SIZE, jumps_left=0, facing=-1
        )
        self.banner: str | None = None
        self.poses: tuple[Pose, Pose] = (Pose.IDLE, Pose.IDLE)

    def sprite_rect(self, body: Body) -> Rect:
        """The drawn rectangle of a sprite, anchored at its top-left corner."""
        return Rect(body.x, body.y, SPRITE_SIZE, SPRITE_SIZE)

    def step(
        self, first: Controls | None = None, second: Controls | None = None
    ) -> bool:
        """Advance one frame; report whether player 1 won the round."""
        first = first or Controls()
        self._steer(first, second)
        self._fall()

        won = self.sprite_rect(self.first).overlaps(self.sprite_rect(self.second))
        if won:
            self.banner = ROUND_BANNER
            self.first.x = RESPAWN_FIRST_X
            self.second.x = RESPAWN_SECOND_X
        else:
            self.banner = None

        self._slide()
        self.poses = (pose_for(self.first, first.attack), pose_for(self.second, False))
        return won