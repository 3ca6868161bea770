# dino_run/game/sinks.py
"""
Collaborators the session talks to. The session never knows how a frame is
drawn, a cue is played or a score is shown; it only calls these methods.
The Null* classes are the headless defaults (Gymnasium env, tests).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple

from .obstacles import Obstacle, ObstacleKind
from .player import Player


@dataclass(frozen=True)
class FrameView:
    """Read-only picture of one frame handed to the render sink."""
    player: Tuple[float, float, float, float]                        # x, y, w, h
    grounded: bool
    obstacles: Tuple[Tuple[Tuple[float, float, float, float], ObstacleKind], ...]
    floor_y: float
    score: int
    speed: float
    playing: bool

    @classmethod
    def capture(cls, player: Player, obstacles, floor_y: float,
                score: int, speed: float, playing: bool) -> "FrameView":
        return cls(
            player=(player.x, player.y, player.width, player.height),
            grounded=player.grounded,
            obstacles=tuple(((o.x, o.y, o.width, o.height), o.kind) for o in obstacles),
            floor_y=float(floor_y),
            score=int(score),
            speed=float(speed),
            playing=bool(playing),
        )


class RenderSink(Protocol):
    def draw_frame(self, frame: FrameView) -> None: ...


class AudioSink(Protocol):
    def set_ambient(self, kind: ObstacleKind, active: bool) -> None: ...
    def play_collision(self) -> None: ...


class UiSink(Protocol):
    def on_ready(self) -> None: ...
    def on_score_changed(self, score: int) -> None: ...
    def on_game_over(self, score: int) -> None: ...


class NullRender:
    def draw_frame(self, frame: FrameView) -> None:
        pass


class NullAudio:
    def set_ambient(self, kind: ObstacleKind, active: bool) -> None:
        pass

    def play_collision(self) -> None:
        pass


class NullUi:
    def on_ready(self) -> None:
        pass

    def on_score_changed(self, score: int) -> None:
        pass

    def on_game_over(self, score: int) -> None:
        pass
