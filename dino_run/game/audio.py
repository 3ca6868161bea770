# dino_run/game/audio.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional
import pygame

from .config import SOUND_GROUND, SOUND_AIR, SOUND_COLLISION
from .obstacles import ObstacleKind

log = logging.getLogger(__name__)


def _load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError) as e:
        log.warning("sound %s unavailable (%s), cue muted", path.name, e)
        return None


class PygameAudio:
    """
    Audio sink: one looping ambient cue per obstacle kind plus a one-shot
    collision cue. Any cue that failed to load, or a mixer that failed to
    start, just stays silent. A playback error mutes the sink for good.
    """

    def __init__(self, asset_dir: Optional[Path]):
        self.enabled = False
        self.ambient: Dict[ObstacleKind, Optional[pygame.mixer.Sound]] = {k: None for k in ObstacleKind}
        self.collision: Optional[pygame.mixer.Sound] = None
        self._playing: Dict[ObstacleKind, bool] = {k: False for k in ObstacleKind}

        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            self.enabled = True
        except pygame.error as e:
            log.warning("mixer unavailable (%s), running without sound", e)
            return

        if asset_dir is not None:
            self.ambient[ObstacleKind.GROUND] = _load_sound(asset_dir / SOUND_GROUND)
            self.ambient[ObstacleKind.AIR] = _load_sound(asset_dir / SOUND_AIR)
            self.collision = _load_sound(asset_dir / SOUND_COLLISION)

    def _disable(self, e: pygame.error):
        log.warning("audio playback failed (%s), muting", e)
        self.enabled = False

    def set_ambient(self, kind: ObstacleKind, active: bool) -> None:
        snd = self.ambient.get(kind)
        if not self.enabled or snd is None or active == self._playing[kind]:
            return
        try:
            if active:
                snd.play(loops=-1)
            else:
                snd.stop()
        except pygame.error as e:
            self._disable(e)
            return
        self._playing[kind] = active

    def play_collision(self) -> None:
        if not self.enabled or self.collision is None:
            return
        try:
            self.collision.play()
        except pygame.error as e:
            self._disable(e)
