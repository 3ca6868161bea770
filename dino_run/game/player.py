# dino_run/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from .config import (
    PLAYER_X, PLAYER_W, PLAYER_H, GROUND_Y, GRAVITY, JUMP_FORCE, JUMP_COOLDOWN_MS
)

@dataclass
class Player:
    """
    Runner with a fixed x that only moves vertically:
    - y is the TOP of the box, screen coordinates (y grows downward)
    - y never goes below ground_y; landing zeroes vy and sets grounded
    """
    x: float = float(PLAYER_X)
    y: float = float(GROUND_Y)
    vy: float = 0.0
    grounded: bool = True
    width: float = float(PLAYER_W)
    height: float = float(PLAYER_H)
    ground_y: float = float(GROUND_Y)
    gravity: float = GRAVITY
    jump_force: float = JUMP_FORCE
    _jump_ready_at_ms: float = field(default=0.0, init=False, repr=False)   # debounce: jumps before this clock value are ignored

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def reset(self):
        """Back to the standing pose with the debounce cleared."""
        self.y = self.ground_y
        self.vy = 0.0
        self.grounded = True
        self._jump_ready_at_ms = 0.0

    def can_jump(self, now_ms: float) -> bool:
        return self.grounded and now_ms >= self._jump_ready_at_ms

    def jump(self, now_ms: float) -> bool:
        """Jump only if grounded and the debounce window has elapsed. Returns True if performed."""
        if not self.can_jump(now_ms):
            return False
        self.vy = -self.jump_force
        self.grounded = False
        self._jump_ready_at_ms = now_ms + JUMP_COOLDOWN_MS
        return True

    def step(self):
        """One frame of vertical integration, then the floor clamp."""
        if not self.grounded:
            self.vy += self.gravity
            self.y += self.vy

        if self.y > self.ground_y:
            self.y = self.ground_y
            self.vy = 0.0
            self.grounded = True
