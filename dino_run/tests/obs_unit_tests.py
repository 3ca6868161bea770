# dino_run/tests/obs_unit_tests.py
"""
Observation vector sanity.

Usage (from repo root):
  pytest dino_run/tests/obs_unit_tests.py
  python -m dino_run.tests.obs_unit_tests
"""
import numpy as np

from dino_run.env.observations import OBS_SIZE, build_observation, obstacles_ahead
from dino_run.game.config import BASE_SPEED, SPEED_NORM_MAX, WIDTH
from dino_run.game.obstacles import Obstacle, ObstacleKind, spawn_y
from dino_run.game.player import Player


def make_obstacle(x: float, kind: ObstacleKind) -> Obstacle:
    return Obstacle(x=x, y=spawn_y(kind), kind=kind)


def test_empty_playfield():
    obs = build_observation(Player(), [], BASE_SPEED)
    assert isinstance(obs, np.ndarray) and obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    expected = [0.0, 0.0, 1.0, BASE_SPEED / SPEED_NORM_MAX, 1.0, 0.0, 0.0, 1.0]
    assert np.allclose(obs, expected)


def test_nearest_obstacles_first():
    p = Player()
    far = make_obstacle(860.0, ObstacleKind.AIR)
    near = make_obstacle(560.0, ObstacleKind.GROUND)
    obs = build_observation(p, [far, near], BASE_SPEED)
    assert np.isclose(obs[4], (560.0 - 160.0) / WIDTH)
    assert obs[5] == 1.0 and obs[6] == 0.0
    assert np.isclose(obs[7], (860.0 - 160.0) / WIDTH)


def test_passed_obstacles_are_ignored():
    p = Player()
    behind = make_obstacle(20.0, ObstacleKind.GROUND)      # right edge 70 < player x 80
    overlapping = make_obstacle(100.0, ObstacleKind.AIR)
    assert obstacles_ahead(p, [behind, overlapping]) == [overlapping]
    obs = build_observation(p, [behind, overlapping], BASE_SPEED)
    assert obs[4] == 0.0, "obstacle level with the player clamps to 0"
    assert obs[6] == 1.0 and obs[7] == 1.0


def test_mid_jump_features_in_range():
    p = Player()
    p.jump(now_ms=0.0)
    for _ in range(5):
        p.step()
    obs = build_observation(p, [], 50.0)
    assert 0.0 < obs[0] <= 1.0
    assert -1.0 <= obs[1] < 0.0, "still rising"
    assert obs[2] == 0.0
    assert obs[3] == 1.0, "speed clamps to 1"


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"✓ {name}")
    print("✓ obs unit sanity passed")


if __name__ == "__main__":
    main()
