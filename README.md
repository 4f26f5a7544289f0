# borof

A small two-player arcade game played in one window.

In the default **duel** mode, two heroes run across an arena. Ten
platforms are stacked above a solid ground. They slide left and right and
turn around at the screen edges. Players run, double-jump and bounce off
platform sides and screen walls as if those were trampolines. When the two
heroes touch, the banner "Player 1 wins the round" appears. Player 1 is
then put back at the left edge and player 2 at x = 1000.

In the **balls** mode, the heroes are replaced by two balls and there are
fifteen platforms. The balls bounce off each other on contact.

## Installing

```
pip install .
```

This installs pygame, which opens the window, reads the keyboard and
draws the game.

## Playing

```
borof
```

Options:

| Option | Meaning | Default |
|--------|---------|---------|
| `--mode {duel,balls}` | which arena to play | `duel` |
| `--seed N` | seed for the random platform layout | random |
| `--assets DIR` | directory holding the hero sprites | `assets` |
| `--fps N` | frame rate, a positive number | `60` |
| `--frames N` | stop after N frames; `0` runs until the window closes | `0` |

The duel mode looks for these sprite sheets under the assets directory:

- `heros/herochar_idle_anim.gif`
- `heros/herochar_run_anim.gif`
- `heros/herochar_sword_attack_anim.gif`

Only the first 16×16 frame of each sheet is drawn. If a sheet cannot be
loaded, the hero is drawn as a plain coloured square.

### Controls

| Player | Left | Right | Jump |
|--------|------|-------|------|
| 1      | ←    | →     | ↑    |
| 2      | A    | D     | W    |

Each player can jump twice before touching a platform top or the ground
again. Landing restores both jumps. In the duel mode the heroes start in
the air with no jumps, so they must land first. Pressing **F** shows
player 1's attack pose. Closing the window or pressing **Esc** quits.

## Using the simulation

The modules `borof.physics` and `borof.game` do not import pygame, so you
can drive the simulation from your own code:

```python
import random

from borof.game import Controls, DuelGame

game = DuelGame(random.Random(1))
won = game.step(Controls(right=True), Controls(jump=True))
print(won, game.banner, game.poses)
```

- `borof.physics` has `Rect`, `Platform`, `Body`, `make_platforms` and
  `resolve_ball_collision`.
- `borof.game` has `Controls`, `Pose`, `pose_for`, `BallGame` and
  `DuelGame`.

`step` advances one frame. `BallGame.step` returns whether the balls
collided. `DuelGame.step` returns whether player 1 won the round.

`borof.app` holds the window code: `parse_args` and `main`.

## What it does not do

- It keeps no score between rounds.
- The attack changes only player 1's pose. It has no effect on the game.
- Player 2 has no attack.
- There are no menus, sound or saved settings.

## Running the tests

```
pip install .[test]
pytest
```