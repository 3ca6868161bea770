# dino_run/tests/frontend_tests.py
"""
pygame sinks: fallback drawing without sprites, silent audio without sounds,
and the overlay text driven by session transitions.

Usage (from repo root):
  pytest dino_run/tests/frontend_tests.py
  python -m dino_run.tests.frontend_tests
"""
from __future__ import annotations
import logging
import os
import random
import tempfile
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from dino_run.game.audio import PygameAudio
from dino_run.game.config import (
    WIDTH, HEIGHT, COLOR_PLAYER, COLOR_OBS_GROUND, SPAWN_INTERVAL_MS, PLAYER_X, GROUND_Y
)
from dino_run.game.game import OverlayUi
from dino_run.game.log import setup_logging
from dino_run.game.obstacles import ObstacleKind
from dino_run.game.render import PygameRenderer
from dino_run.game.session import Session
from dino_run.game.timers import Scheduler


def test_renderer_falls_back_to_rectangles():
    pygame.init()
    try:
        surf = pygame.Surface((WIDTH, HEIGHT))
        with tempfile.TemporaryDirectory() as tmp:
            renderer = PygameRenderer(surf, Path(tmp))       # folder without any sprite
        assert all(s is None for s in renderer.sprites.values())

        session = Session(render=renderer, rng=random.Random(0), p_ground=1.0)
        session.start()
        session.scheduler.advance(SPAWN_INTERVAL_MS)
        session.scheduler.run_frame()

        assert renderer.last_frame is not None
        assert tuple(surf.get_at((PLAYER_X + 40, GROUND_Y + 40)))[:3] == COLOR_PLAYER
        (x, y, w, h), kind = renderer.last_frame.obstacles[0]
        assert kind is ObstacleKind.GROUND
        assert tuple(surf.get_at((int(x) + 3, int(y) + 25)))[:3] == COLOR_OBS_GROUND
    finally:
        pygame.quit()


def test_audio_without_sounds_is_silent():
    audio = PygameAudio(asset_dir=None)
    for kind in ObstacleKind:
        audio.set_ambient(kind, True)
        audio.set_ambient(kind, False)
    audio.play_collision()
    assert audio.collision is None


def test_overlay_ui_tracks_transitions():
    ui = OverlayUi()
    session = Session(scheduler=Scheduler(), ui=ui, rng=random.Random(0))
    assert ui.show_panel
    session.start()
    assert not ui.show_panel and ui.score == 0
    session.game_over()
    assert ui.show_panel and ui.button == "Try Again"
    assert ui.title.endswith("Score: 0")


def test_audio_toggles_ambient_and_survives_lost_mixer():
    audio = PygameAudio(asset_dir=None)
    if not audio.enabled:
        pytest.skip("no mixer available")
    tone = pygame.mixer.Sound(buffer=bytes(4096))
    audio.ambient[ObstacleKind.AIR] = tone
    audio.collision = tone

    audio.set_ambient(ObstacleKind.AIR, True)
    assert audio._playing[ObstacleKind.AIR]
    audio.set_ambient(ObstacleKind.AIR, False)
    assert not audio._playing[ObstacleKind.AIR]
    audio.set_ambient(ObstacleKind.AIR, True)

    pygame.mixer.quit()
    audio.set_ambient(ObstacleKind.AIR, False)      # stop() on a dead mixer
    assert not audio.enabled
    audio.enabled = True
    audio.play_collision()                         # play() on a dead mixer
    assert not audio.enabled


def test_setup_logging_is_idempotent():
    root = setup_logging("debug")
    again = setup_logging("warning")
    assert root is again and len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert logging.getLogger("dino_run.game.session").getEffectiveLevel() == logging.WARNING


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
            print(f"✓ {name}")
    print("🎉 front-end tests passed")


if __name__ == "__main__":
    main()
