# dino_run/game/scoring.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from .config import BASE_SPEED, SPEED_STEP_SCORE, SPEED_INCREMENT

log = logging.getLogger(__name__)


@dataclass
class ScoreKeeper:
    """Score counter plus the scroll speed it drives."""
    score: int = 0
    speed: float = BASE_SPEED
    last_speed_milestone: int = 0

    def reset(self):
        self.score = 0
        self.speed = BASE_SPEED
        self.last_speed_milestone = 0

    def on_obstacle_passed(self) -> bool:
        """+1 point; bump speed once per milestone (5, 10, 15, ...). Returns True on a bump."""
        self.score += 1
        if self.score % SPEED_STEP_SCORE == 0 and self.score != self.last_speed_milestone:
            self.speed += SPEED_INCREMENT
            self.last_speed_milestone = self.score
            log.info("score %d: speed -> %.1f", self.score, self.speed)
            return True
        return False
