# dino_run/game/session.py
from __future__ import annotations
import logging
import random
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import FLOOR_Y, P_GROUND, SPAWN_INTERVAL_MS
from .collision import first_collision
from .obstacles import Obstacle, ObstacleKind, ObstacleManager
from .player import Player
from .scoring import ScoreKeeper
from .sinks import AudioSink, FrameView, NullAudio, NullRender, NullUi, RenderSink, UiSink
from .timers import Scheduler

log = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Session:
    """
    One run of the game: Idle -> Playing -> GameOver -> (start) Playing.

    The session is the only owner of the frame-loop and spawner handles:
    `start()` and `game_over()` cancel both before touching any state, so a
    stale callback can never act on a freshly reset run.
    """

    def __init__(self,
                 scheduler: Optional[Scheduler] = None,
                 render: Optional[RenderSink] = None,
                 audio: Optional[AudioSink] = None,
                 ui: Optional[UiSink] = None,
                 rng: Optional[random.Random] = None,
                 p_ground: float = P_GROUND):
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.render = render if render is not None else NullRender()
        self.audio = audio if audio is not None else NullAudio()
        self.ui = ui if ui is not None else NullUi()

        self.player = Player()
        self.obstacles: List[Obstacle] = []
        self.spawner = ObstacleManager(rng=rng, p_ground=p_ground)
        self.scorer = ScoreKeeper()

        self.playing: bool = False
        self.over: bool = False
        self.frames: int = 0                 # frames stepped in the current run

        self._loop_handle: Optional[int] = None
        self._spawn_handle: Optional[int] = None

    # -------------------- State --------------------

    @property
    def phase(self) -> Phase:
        if self.playing:
            return Phase.PLAYING
        if self.over:
            return Phase.GAME_OVER
        return Phase.IDLE

    @property
    def score(self) -> int:
        return self.scorer.score

    @property
    def speed(self) -> float:
        return self.scorer.speed

    def snapshot(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "score": self.score,
            "speed": self.speed,
            "frames": self.frames,
            "obstacles": len(self.obstacles),
            "grounded": self.player.grounded,
        }

    def frame_view(self) -> FrameView:
        return FrameView.capture(self.player, self.obstacles, FLOOR_Y,
                                 self.score, self.speed, self.playing)

    # -------------------- Transitions --------------------

    def _cancel_timers(self):
        self.scheduler.cancel(self._loop_handle)
        self.scheduler.cancel(self._spawn_handle)
        self._loop_handle = None
        self._spawn_handle = None

    def _silence(self):
        for kind in ObstacleKind:
            self.audio.set_ambient(kind, False)

    def start(self):
        """(Re)start a run. Valid from any phase."""
        self._cancel_timers()
        self._silence()

        self.scorer.reset()
        self.obstacles.clear()
        self.player.reset()
        self.frames = 0
        self.over = False
        self.playing = True

        self.ui.on_ready()
        self.ui.on_score_changed(self.score)

        self._loop_handle = self.scheduler.start_loop(self.step)
        self._spawn_handle = self.scheduler.set_interval(SPAWN_INTERVAL_MS, self._on_spawn_tick)
        log.info("run started")

    def game_over(self):
        """End the run. A second call while already over does nothing."""
        if self.over:
            return
        self.playing = False
        self.over = True
        self._cancel_timers()
        self._silence()
        self.audio.play_collision()
        self.ui.on_game_over(self.score)
        log.info("game over: score=%d speed=%.1f frames=%d", self.score, self.speed, self.frames)

    # -------------------- Input --------------------

    def request_jump(self) -> bool:
        if not self.playing:
            log.debug("jump ignored (%s)", self.phase.value)
            return False
        return self.player.jump(self.scheduler.now_ms)

    # -------------------- Per-frame / timer callbacks --------------------

    def _on_spawn_tick(self):
        if not self.playing:
            return
        self.spawner.try_spawn(self.obstacles)

    def step(self):
        """One simulation frame: physics, scroll, collision, prune/score, cues, draw."""
        if not self.playing:
            log.debug("step ignored (%s)", self.phase.value)
            return
        self.frames += 1

        self.player.step()
        self.spawner.advance(self.obstacles, self.speed)

        if first_collision(self.player, self.obstacles) is not None:
            self.game_over()
            self.render.draw_frame(self.frame_view())
            return

        for _ in range(self.spawner.prune(self.obstacles)):
            self.scorer.on_obstacle_passed()
            self.ui.on_score_changed(self.score)

        for kind, active in self.spawner.visibility_flags(self.obstacles).items():
            self.audio.set_ambient(kind, active)

        self.render.draw_frame(self.frame_view())
