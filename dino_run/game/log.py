# dino_run/game/log.py
"""Console logging for the game and the experiment scripts."""
from __future__ import annotations
import logging
import sys

LOGGER_NAME = "dino_run"


class HudFormatter(logging.Formatter):
    """Compact one-line format: ``12:03:44 [I] session: started``."""

    def format(self, record: logging.LogRecord) -> str:
        ts = self.formatTime(record, "%H:%M:%S")
        name = record.name.rsplit(".", 1)[-1]
        return f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"


def setup_logging(level: str = "info") -> logging.Logger:
    """Configure the ``dino_run`` logger tree once; later calls only change the level."""
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root.handlers:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(HudFormatter())
        root.addHandler(console)
        root.propagate = False
    return root
