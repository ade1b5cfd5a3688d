import logging

from pixel_octopus.config import HighlightConfig
from pixel_octopus.creature.controller import Controller
from pixel_octopus.creature.creature_state import StateDelta

log = logging.getLogger("pixel-octopus")


class HighlightSweepController(Controller):
    """Every 15-20s a highlight travels down the head rows, then clears."""

    name = "highlight"

    def __init__(self, config: HighlightConfig, rng=None):
        super().__init__(rng)
        self._cfg = config

    def start(self, now: float) -> StateDelta:
        self._schedule_next(now)
        return {"flash_row": None}

    def _schedule_next(self, now: float):
        delay = self._jittered(self._cfg.delay_min, self._cfg.delay_jitter)
        self._timeline.schedule(now + delay, self._sweep)

    def _sweep(self, now: float) -> StateDelta:
        rows = self._cfg.rows
        log.debug("Highlight sweep")
        for i, row in enumerate(rows):
            self._timeline.schedule(now + i * self._cfg.stagger, self._set_row, row)
        self._timeline.schedule(now + len(rows) * self._cfg.stagger, self._set_row, None)
        self._schedule_next(now)
        return {}

    def _set_row(self, now: float, row: int | None) -> StateDelta:
        return {"flash_row": row}
