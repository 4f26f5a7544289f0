import math
import random

import pytest

from borof.game import (
    BALL_PLATFORM_COUNT,
    BALL_RADIUS,
    DUEL_PLATFORM_COUNT,
    ROUND_BANNER,
    BallGame,
    Controls,
    DuelGame,
    Pose,
    pose_for,
)
from borof.physics import GRAVITY, MAX_JUMPS, MAX_SPEED, PLATFORM_SPEED, Body


@pytest.fixture
def balls():
    return BallGame(random.Random(7))


@pytest.fixture
def duel():
    game = DuelGame(random.Random(7))
    game.platforms.clear()
    return game


def test_platform_counts():
    assert len(BallGame(random.Random(1)).platforms) == BALL_PLATFORM_COUNT
    assert len(DuelGame(random.Random(1)).platforms) == DUEL_PLATFORM_COUNT


def test_same_seed_same_layout():
    a = BallGame(random.Random(3))
    b = BallGame(random.Random(3))
    assert [p.rect for p in a.platforms] == [p.rect for p in b.platforms]


def test_step_moves_platforms(balls):
    before = [p.rect.x for p in balls.platforms]
    balls.step()
    after = [p.rect.x for p in balls.platforms]
    assert all(
        math.isclose(abs(new - old), PLATFORM_SPEED) for old, new in zip(before, after)
    )


def test_idle_balls_settle_on_ground(balls):
    for _ in range(40):
        balls.step()
    for body in balls.bodies:
        assert body.y == balls.ground.y - BALL_RADIUS
        assert body.vy == 0.0
        assert body.on_ground
        assert body.jumps_left == MAX_JUMPS
    assert balls.first.x == 100.0
    assert balls.second.x == 200.0


def test_double_jump_then_no_more(balls):
    for _ in range(40):
        balls.step()
    balls.step(Controls(jump=True))
    assert balls.first.jumps_left == MAX_JUMPS - 1
    assert balls.first.vy < 0
    balls.step(Controls(jump=True))
    assert balls.first.jumps_left == 0
    height = balls.first.y
    vy = balls.first.vy
    balls.step(Controls(jump=True))
    assert balls.first.jumps_left == 0
    assert balls.first.vy == vy + GRAVITY
    assert balls.first.y < height


def test_second_player_controls_only_second_ball(balls):
    for _ in range(40):
        balls.step()
    balls.step(None, Controls(right=True))
    assert balls.second.vx > 0
    assert balls.first.vx == 0.0


def test_holding_right_caps_speed(balls):
    for _ in range(20):
        balls.step(Controls(right=True))
        assert abs(balls.first.vx) <= 2 * MAX_SPEED
    assert balls.first.facing == 1


def test_overlapping_balls_are_separated(balls):
    balls.platforms.clear()
    balls.second.x = balls.first.x + 10
    balls.second.y = balls.first.y
    touched = balls.step()
    assert touched
    dist = math.hypot(
        balls.second.x - balls.first.x, balls.second.y - balls.first.y
    )
    assert math.isclose(dist, 2 * BALL_RADIUS)


def test_duel_starting_state():
    game = DuelGame(random.Random(0))
    assert game.first.facing == 1
    assert game.second.facing == -1
    assert game.first.jumps_left == 0
    assert game.banner is None
    assert game.poses == (Pose.IDLE, Pose.IDLE)


def test_duel_cannot_jump_before_landing(duel):
    duel.first.vx = duel.second.vx = 0.0
    duel.step(Controls(jump=True))
    assert duel.first.vy == GRAVITY
    assert duel.first.jumps_left == 0


def test_duel_round_won_on_touch(duel):
    duel.first.x = 500.0
    duel.second.x = 510.0
    duel.second.y = duel.first.y
    won = duel.step()
    assert won
    assert duel.banner == ROUND_BANNER
    assert duel.second.x == 1000.0
    assert duel.first.x == duel.first.half_width


def test_duel_no_touch_no_banner(duel):
    duel.first.x = 100.0
    duel.second.x = 900.0
    assert duel.step() is False
    assert duel.banner is None


def test_duel_poses(duel):
    duel.first.x = 100.0
    duel.second.x = 900.0
    duel.step(Controls(attack=True), Controls(attack=True))
    assert duel.poses[0] is Pose.ATTACK
    assert duel.poses[1] is Pose.RUN


@pytest.mark.parametrize(
    "vx, vy, attacking, expected",
    [
        (0.0, 0.0, False, Pose.IDLE),
        (1.0, 0.0, False, Pose.RUN),
        (0.0, -2.0, False, Pose.RUN),
        (1.0, 1.0, True, Pose.ATTACK),
        (0.0, 0.0, True, Pose.ATTACK),
    ],
)
def test_pose_for(vx, vy, attacking, expected):
    body = Body(0.0, 0.0, 1.0, 1.0, vx=vx, vy=vy)
    assert pose_for(body, attacking) is expected