# dino_run/env/runner_env.py
from __future__ import annotations
import random
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from dino_run.game.config import WIDTH, HEIGHT, FPS, FRAME_MS, P_GROUND
from dino_run.game.render import PygameRenderer
from dino_run.game.session import Session
from dino_run.game.timers import Scheduler
from dino_run.env.observations import OBS_SIZE, build_observation


class _PassCounter:
    """UI sink that only remembers the last score, to reward passed obstacles."""
    def __init__(self):
        self.score = 0
        self.game_overs = 0

    def on_ready(self) -> None:
        self.score = 0

    def on_score_changed(self, score: int) -> None:
        self.score = score

    def on_game_over(self, score: int) -> None:
        self.game_overs += 1


class RunnerEnv(gym.Env):
    """
    Dino Run Gymnasium environment (vector observations).
    - Simulation at 60 Hz, fixed 1000/60 ms per frame (spawner runs on that clock).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: shape (8,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 p_ground: float = P_GROUND):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unknown render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.p_ground = float(p_ground)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        low = np.array([0.0, -1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0], dtype=np.float32)
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.session: Optional[Session] = None
        self.scores: Optional[_PassCounter] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.renderer: Optional[PygameRenderer] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Seeded reset -> exact reproducibility; unseeded -> continue from np_random
        if seed is not None:
            level_seed = int(seed)
        else:
            level_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.scores = _PassCounter()
        self.session = Session(
            scheduler=Scheduler(),
            ui=self.scores,
            rng=random.Random(level_seed),
            p_ground=self.p_ground,
        )
        self.session.start()

        self.timestep = 0
        self.current_seed = level_seed

        obs = self._get_obs()
        info = self._info()
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None and self.scores is not None, "call reset() first"

        if int(action) == 1:
            self.session.request_jump()

        score_before = self.scores.score
        scheduler = self.session.scheduler
        for _ in range(self.frame_skip):
            scheduler.advance(FRAME_MS)
            scheduler.run_frame()
            if not self.session.playing:
                break

        passed = self.scores.score - score_before
        alive = self.session.playing
        reward = (1.0 if alive else -1.0) + float(passed)

        self.timestep += 1
        terminated = not alive
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = self._info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        s = self.session
        return build_observation(s.player, s.obstacles, s.speed)

    def _info(self) -> Dict[str, Any]:
        assert self.session is not None
        info = self.session.snapshot()
        info["timestep"] = self.timestep
        info["seed"] = self.current_seed
        return info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Dino Run - Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.renderer = PygameRenderer(self.screen)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()

        if self.session is not None and self.renderer is not None:
            self.renderer.draw_frame(self.session.frame_view())

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        # (H, W, 3) uint8 array
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.renderer = None
