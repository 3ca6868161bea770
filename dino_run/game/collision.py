# dino_run/game/collision.py
from __future__ import annotations
from typing import Iterable, Optional, TypeVar
from .config import HITBOX_PADDING

T = TypeVar("T")


def padded_overlap(a, b, padding: float = HITBOX_PADDING) -> bool:
    """
    AABB overlap after shrinking both boxes by `padding` on every side.
    Works on anything exposing x / y / width / height (floats, not pygame.Rect,
    so sub-unit scroll positions are kept). Touching edges do not count.
    """
    return (a.x + padding < b.x + b.width - padding and
            a.x + a.width - padding > b.x + padding and
            a.y + padding < b.y + b.height - padding and
            a.y + a.height - padding > b.y + padding)


def first_collision(player, obstacles: Iterable[T], padding: float = HITBOX_PADDING) -> Optional[T]:
    """Return the first obstacle hitting the player, or None. Stops scanning at the first hit."""
    for o in obstacles:
        if padded_overlap(player, o, padding):
            return o
    return None
