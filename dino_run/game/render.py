# dino_run/game/render.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple
import pygame

from .config import (
    WIDTH, HEIGHT, PLAYER_W, PLAYER_H, OBSTACLE_W, OBSTACLE_H,
    COLOR_SKY_TOP, COLOR_SKY_BOTTOM, COLOR_FLOOR, COLOR_GROUND_LINE, COLOR_SHADOW,
    COLOR_PLAYER, COLOR_OBS_GROUND, COLOR_OBS_AIR,
    SPRITE_PLAYER, SPRITE_OBS_GROUND, SPRITE_OBS_AIR
)
from .obstacles import ObstacleKind
from .sinks import FrameView

log = logging.getLogger(__name__)


def load_sprite(path: Path, size: Tuple[int, int]) -> Optional[pygame.Surface]:
    """Scaled sprite, or None if the file is missing / unreadable (caller draws a fallback)."""
    try:
        img = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as e:
        log.warning("sprite %s unavailable (%s), using fallback shape", path.name, e)
        return None
    if pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    return pygame.transform.scale(img, size)


def _vertical_gradient(size: Tuple[int, int], top, bottom) -> pygame.Surface:
    w, h = size
    surf = pygame.Surface(size)
    for y in range(h):
        t = y / max(1, h - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
        pygame.draw.line(surf, color, (0, y), (w, y))
    return surf


class PygameRenderer:
    """Render sink drawing a FrameView onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, asset_dir: Optional[Path] = None):
        self.surface = surface
        self.sprites: Dict[str, Optional[pygame.Surface]] = {"player": None, "ground": None, "air": None}
        if asset_dir is not None:
            self.sprites = {
                "player": load_sprite(asset_dir / SPRITE_PLAYER, (PLAYER_W, PLAYER_H)),
                "ground": load_sprite(asset_dir / SPRITE_OBS_GROUND, (OBSTACLE_W, OBSTACLE_H)),
                "air": load_sprite(asset_dir / SPRITE_OBS_AIR, (OBSTACLE_W, OBSTACLE_H)),
            }
        self._sky = _vertical_gradient((WIDTH, HEIGHT), COLOR_SKY_TOP, COLOR_SKY_BOTTOM)
        self.last_frame: Optional[FrameView] = None

    def _blit_or_rect(self, sprite: Optional[pygame.Surface], box, color):
        x, y, w, h = box
        if sprite is not None:
            self.surface.blit(sprite, (int(x), int(y)))
        else:
            pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def draw_frame(self, frame: FrameView) -> None:
        self.last_frame = frame
        surf = self.surface

        # Sky + decorative floor
        surf.blit(self._sky, (0, 0))
        pygame.draw.rect(surf, COLOR_FLOOR, pygame.Rect(0, int(frame.floor_y) - 5, WIDTH, 100))

        # Player shadow (on the floor, whatever the jump height)
        px, py, pw, ph = frame.player
        shadow = pygame.Surface((40, 10), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow, COLOR_SHADOW, shadow.get_rect())
        surf.blit(shadow, (int(px + pw / 2 - 20), int(frame.floor_y)))
        self._blit_or_rect(self.sprites["player"], frame.player, COLOR_PLAYER)

        for box, kind in frame.obstacles:
            if kind is ObstacleKind.GROUND:
                self._blit_or_rect(self.sprites["ground"], box, COLOR_OBS_GROUND)
            else:
                self._blit_or_rect(self.sprites["air"], box, COLOR_OBS_AIR)

        pygame.draw.line(surf, COLOR_GROUND_LINE, (0, int(frame.floor_y)), (WIDTH, int(frame.floor_y)), 1)
