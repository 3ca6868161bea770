# dino_run/tests/obstacles_tests.py
"""
Obstacle spawning / scrolling / pruning and the padded collision test.

Usage (from repo root):
  pytest dino_run/tests/obstacles_tests.py
  python -m dino_run.tests.obstacles_tests
"""
from __future__ import annotations
from types import SimpleNamespace
from typing import List

from dino_run.game.collision import first_collision, padded_overlap
from dino_run.game.config import (
    WIDTH, FLOOR_Y, GROUND_Y, AIR_CLEARANCE, MIN_SPAWN_DISTANCE, MAX_OBSTACLES, BASE_SPEED
)
from dino_run.game.obstacles import Obstacle, ObstacleKind, ObstacleManager, spawn_y
from dino_run.game.player import Player


class FixedDraw:
    """Stand-in RNG: random() always returns the same value."""
    def __init__(self, value: float):
        self.value = value
    def random(self) -> float:
        return self.value


def box(x, y, w, h):
    return SimpleNamespace(x=x, y=y, width=w, height=h)


# -------------------- Spawning --------------------

def test_spawn_places_kinds_on_their_lines():
    ground = ObstacleManager(rng=FixedDraw(0.0), p_ground=0.4)
    air = ObstacleManager(rng=FixedDraw(0.99), p_ground=0.4)
    obs: List[Obstacle] = []

    g = ground.try_spawn(obs)
    assert g is not None and g.kind is ObstacleKind.GROUND
    assert g.x == WIDTH and g.y + g.height == FLOOR_Y, "ground obstacle sits on the floor"

    obs.clear()
    a = air.try_spawn(obs)
    assert a is not None and a.kind is ObstacleKind.AIR
    assert a.y == GROUND_Y - AIR_CLEARANCE
    assert spawn_y(ObstacleKind.AIR) < spawn_y(ObstacleKind.GROUND)


def test_kind_threshold_follows_p_ground():
    assert ObstacleManager(rng=FixedDraw(0.39), p_ground=0.4).choose_kind() is ObstacleKind.GROUND
    assert ObstacleManager(rng=FixedDraw(0.40), p_ground=0.4).choose_kind() is ObstacleKind.AIR
    assert ObstacleManager(rng=FixedDraw(0.0), p_ground=0.0).choose_kind() is ObstacleKind.AIR


def test_spawn_blocked_until_newest_obstacle_scrolls_past_threshold():
    mgr = ObstacleManager(rng=FixedDraw(0.0))
    obs: List[Obstacle] = []
    assert mgr.try_spawn(obs) is not None
    assert mgr.try_spawn(obs) is None, "right on the edge -> blocked"

    threshold = WIDTH - MIN_SPAWN_DISTANCE
    frames = 0
    while obs[0].x > threshold:
        assert mgr.try_spawn(obs) is None
        mgr.advance(obs, BASE_SPEED)
        frames += 1
    assert frames == 34          # 1000 - 6*34 = 796
    assert mgr.try_spawn(obs) is not None
    assert len(obs) == 2


def test_spawn_refused_above_cap():
    mgr = ObstacleManager(rng=FixedDraw(0.0))
    obs = [Obstacle(x=100.0 * i, y=0.0, kind=ObstacleKind.AIR) for i in range(MAX_OBSTACLES)]
    assert mgr.try_spawn(obs) is not None          # exactly at the cap is still allowed
    for o in obs:
        o.x -= 300.0
    assert len(obs) == MAX_OBSTACLES + 1
    assert mgr.try_spawn(obs) is None


# -------------------- Scroll / prune --------------------

def test_prune_removes_each_obstacle_exactly_once():
    mgr = ObstacleManager()
    obs = [Obstacle(x=-45.0, y=0.0, kind=ObstacleKind.GROUND),   # right edge at 5
           Obstacle(x=400.0, y=0.0, kind=ObstacleKind.AIR)]
    assert mgr.prune(obs) == 0
    mgr.advance(obs, 6.0)
    assert obs[0].right == -1.0
    assert mgr.prune(obs) == 1
    assert [o.kind for o in obs] == [ObstacleKind.AIR]
    assert mgr.prune(obs) == 0


def test_right_edge_exactly_zero_is_kept():
    obs = [Obstacle(x=-50.0, y=0.0, kind=ObstacleKind.GROUND)]
    assert ObstacleManager.prune(obs) == 0


def test_visibility_flags():
    mgr = ObstacleManager()
    obs = [Obstacle(x=500.0, y=0.0, kind=ObstacleKind.GROUND),
           Obstacle(x=float(WIDTH), y=0.0, kind=ObstacleKind.AIR)]   # not yet on screen
    flags = mgr.visibility_flags(obs)
    assert flags == {ObstacleKind.GROUND: True, ObstacleKind.AIR: False}
    obs[1].x -= 1.0
    assert mgr.visibility_flags(obs)[ObstacleKind.AIR]
    assert mgr.visibility_flags([]) == {ObstacleKind.GROUND: False, ObstacleKind.AIR: False}


# -------------------- Collision --------------------

def test_padding_forgives_raw_overlap():
    player = box(80, 300, 80, 80)
    # raw boxes overlap by 15 units horizontally, padded ones don't
    assert not padded_overlap(player, box(145, 330, 50, 50))
    assert padded_overlap(player, box(139, 330, 50, 50))
    assert padded_overlap(player, box(145, 330, 50, 50), padding=0)


def test_padded_edges_touching_do_not_collide():
    player = box(80, 300, 80, 80)
    # padded player right = 150, padded obstacle left = 140 + 10 = 150
    assert not padded_overlap(player, box(140, 330, 50, 50))


def test_standing_player_passes_under_air_obstacle():
    p = Player()
    air = Obstacle(x=p.x, y=spawn_y(ObstacleKind.AIR), kind=ObstacleKind.AIR)
    ground = Obstacle(x=p.x, y=spawn_y(ObstacleKind.GROUND), kind=ObstacleKind.GROUND)
    assert first_collision(p, [air]) is None
    assert first_collision(p, [air, ground]) is ground


def test_jumping_player_hits_air_obstacle():
    p = Player()
    air = Obstacle(x=p.x, y=spawn_y(ObstacleKind.AIR), kind=ObstacleKind.AIR)
    assert p.jump(now_ms=0.0)
    hits = []
    for frame in range(1, 40):
        p.step()
        if first_collision(p, [air]) is air:
            hits.append(frame)
    assert hits, "air obstacles must be reachable by jumping"
    assert hits[0] == 5 and len(hits) == 27
    assert p.grounded and first_collision(p, [air]) is None


def test_first_collision_wins():
    p = Player()
    a = Obstacle(x=p.x, y=spawn_y(ObstacleKind.GROUND), kind=ObstacleKind.GROUND)
    b = Obstacle(x=p.x + 5, y=spawn_y(ObstacleKind.GROUND), kind=ObstacleKind.GROUND)
    assert first_collision(p, [a, b]) is a
    assert first_collision(p, [b, a]) is b


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"✓ {name}")
    print("🎉 obstacle tests passed")


if __name__ == "__main__":
    main()
