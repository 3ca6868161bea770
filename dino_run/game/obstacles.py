# dino_run/game/obstacles.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional
import pygame
from .config import (
    WIDTH, GROUND_Y, PLAYER_H, OBSTACLE_W, OBSTACLE_H, AIR_CLEARANCE,
    MAX_OBSTACLES, MIN_SPAWN_DISTANCE, P_GROUND
)

log = logging.getLogger(__name__)


class ObstacleKind(str, Enum):
    GROUND = "ground"
    AIR = "air"


@dataclass
class Obstacle:
    x: float
    y: float
    kind: ObstacleKind
    width: float = float(OBSTACLE_W)
    height: float = float(OBSTACLE_H)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


def spawn_y(kind: ObstacleKind) -> float:
    """Ground obstacles sit on the floor line; air ones hang where only a jump reaches them."""
    if kind is ObstacleKind.GROUND:
        return float(GROUND_Y + (PLAYER_H - OBSTACLE_H))
    return float(GROUND_Y - AIR_CLEARANCE)


class ObstacleManager:
    """
    Spawns, scrolls and prunes obstacles. The obstacle list itself belongs to the
    session and is passed in on every call.
    """
    def __init__(self,
                 rng: Optional[random.Random] = None,
                 p_ground: float = P_GROUND,
                 playfield_width: float = WIDTH):
        assert 0.0 <= p_ground <= 1.0, "p_ground must be a probability"
        self.rng = rng if rng is not None else random.Random()
        self.p_ground = float(p_ground)
        self.playfield_width = float(playfield_width)

    def can_spawn(self, obstacles: List[Obstacle]) -> bool:
        if len(obstacles) > MAX_OBSTACLES:
            return False
        spawn_line = self.playfield_width - MIN_SPAWN_DISTANCE
        return not any(o.x > spawn_line for o in obstacles)

    def choose_kind(self) -> ObstacleKind:
        return ObstacleKind.GROUND if self.rng.random() < self.p_ground else ObstacleKind.AIR

    def try_spawn(self, obstacles: List[Obstacle]) -> Optional[Obstacle]:
        """Append a new obstacle at the right edge unless the spawn policy refuses. Returns it or None."""
        if not self.can_spawn(obstacles):
            log.debug("spawn refused (%d active)", len(obstacles))
            return None
        kind = self.choose_kind()
        obstacle = Obstacle(x=self.playfield_width, y=spawn_y(kind), kind=kind)
        obstacles.append(obstacle)
        log.debug("spawned %s obstacle", kind.value)
        return obstacle

    @staticmethod
    def advance(obstacles: List[Obstacle], speed: float):
        for o in obstacles:
            o.x -= speed

    @staticmethod
    def prune(obstacles: List[Obstacle]) -> int:
        """Drop obstacles fully past the left edge, in place. Returns how many were removed."""
        kept = [o for o in obstacles if o.right >= 0]
        removed = len(obstacles) - len(kept)
        obstacles[:] = kept
        return removed

    def visibility_flags(self, obstacles: List[Obstacle]) -> Dict[ObstacleKind, bool]:
        flags = {kind: False for kind in ObstacleKind}
        for o in obstacles:
            if o.right > 0 and o.x < self.playfield_width:
                flags[o.kind] = True
        return flags
