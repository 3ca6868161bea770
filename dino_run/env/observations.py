# dino_run/env/observations.py
from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np

from dino_run.game.config import WIDTH, GROUND_Y, GRAVITY, JUMP_FORCE, SPEED_NORM_MAX
from dino_run.game.obstacles import ObstacleKind

OBS_SIZE = 8

def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)

def _norm_dx(dx: Optional[float]) -> float:
    """Distance ahead normalised by the playfield width; 1.0 = nothing ahead."""
    if dx is None:
        return 1.0
    return _clamp01(dx / float(WIDTH))

def obstacles_ahead(player, obstacles: Sequence) -> List:
    """Obstacles whose right edge is still in front of the player's left edge, nearest first."""
    ahead = [o for o in obstacles if o.x + o.width > player.x]
    return sorted(ahead, key=lambda o: o.x)

def build_observation(player, obstacles: Sequence, speed: float) -> np.ndarray:
    """
    Returns a fixed (8,) float32 vector:
      [ height_norm, vy_norm, grounded, speed_norm,
        next_dx, next_is_ground, next_is_air, second_dx ]
    - height_norm in [0,1]: 0 standing, 1 at the apex of a full jump
    - vy_norm     in [-1,1]: negative = rising
    - dx values   in [0,1]: (obstacle.x - player right edge) / WIDTH, 1.0 sentinel if none
    """
    apex = JUMP_FORCE * JUMP_FORCE / (2.0 * GRAVITY)     # rise of a full jump
    height = max(0.0, GROUND_Y - float(player.y))
    height_norm = _clamp01(height / max(1.0, apex))
    vy_norm = max(-1.0, min(1.0, float(player.vy) / JUMP_FORCE))
    grounded = 1.0 if player.grounded else 0.0
    speed_norm = _clamp01(float(speed) / SPEED_NORM_MAX)

    ahead = obstacles_ahead(player, obstacles)
    front = player.x + player.width
    nxt = ahead[0] if ahead else None
    second = ahead[1] if len(ahead) > 1 else None

    feats = [
        height_norm, vy_norm, grounded, speed_norm,
        _norm_dx(None if nxt is None else nxt.x - front),
        1.0 if (nxt is not None and nxt.kind is ObstacleKind.GROUND) else 0.0,
        1.0 if (nxt is not None and nxt.kind is ObstacleKind.AIR) else 0.0,
        _norm_dx(None if second is None else second.x - front),
    ]
    return np.asarray(feats, dtype=np.float32)
