import logging
from dataclasses import dataclass

from pixel_octopus.config import GazeConfig
from pixel_octopus.creature.controller import Controller
from pixel_octopus.creature.creature_state import (
    CENTERED, LOOK_DIRS, GazeTarget, StateDelta,
)
from pixel_octopus.creature.events import Bounds, PointerMove
from pixel_octopus.utils.math_helpers import axis_step

log = logging.getLogger("pixel-octopus")


@dataclass(frozen=True)
class Tracking:
    pass


@dataclass(frozen=True)
class Wandering:
    direction: GazeTarget


def reference_point(bounds: Bounds, bias: float) -> tuple:
    """Point the eyes measure from: horizontal center, biased toward the top."""
    return (bounds.left + bounds.width / 2, bounds.top + bounds.height * bias)


def target_from_displacement(dx: float, dy: float, dead_zone: float) -> GazeTarget:
    """Each axis independent: inside the dead zone is 0, outside is +/-1."""
    return GazeTarget(axis_step(dx, dead_zone), axis_step(dy, dead_zone))


class GazeController(Controller):
    """Alternates between following the pointer and looking away on its own.

    Cycle: track for track_min..track_min+track_jitter seconds, then wander
    for wander_min..wander_min+wander_jitter seconds toward an octant that is
    not the tracked direction. Wandering is skipped while the pointer has
    moved within the last pointer_recency seconds. Any pointer movement ends
    a wander immediately.
    """

    name = "gaze"

    def __init__(self, config: GazeConfig, rng=None):
        super().__init__(rng)
        self._cfg = config
        self._mode = Tracking()
        self._tracked = CENTERED
        self._last_move = None  # never moved

    @property
    def mode(self):
        return self._mode

    @property
    def tracked(self) -> GazeTarget:
        return self._tracked

    @property
    def effective(self) -> GazeTarget:
        if isinstance(self._mode, Wandering):
            return self._mode.direction
        return self._tracked

    def start(self, now: float) -> StateDelta:
        self._tracked = CENTERED
        self._last_move = None
        return self._begin_tracking(now)

    def on_event(self, event, now: float) -> StateDelta:
        if not isinstance(event, PointerMove):
            return {}

        self._last_move = now
        if isinstance(self._mode, Wandering):
            log.debug("Gaze: pointer moved, back to tracking")
            self._mode = Tracking()

        target = self._track(event)
        if target is not None:
            self._tracked = target
        return {"gaze": self.effective}

    def _track(self, event: PointerMove) -> GazeTarget | None:
        """Tracked target for a pointer position, or None if not measurable."""
        if event.bounds is None or not event.bounds.is_laid_out:
            return None
        cx, cy = reference_point(event.bounds, self._cfg.reference_bias)
        return target_from_displacement(event.x - cx, event.y - cy, self._cfg.dead_zone)

    def _begin_tracking(self, now: float) -> StateDelta:
        self._mode = Tracking()
        duration = self._jittered(self._cfg.track_min, self._cfg.track_jitter)
        self._timeline.schedule(now + duration, self._end_tracking)
        return {"gaze": self.effective}

    def _end_tracking(self, now: float) -> StateDelta:
        if self._last_move is not None and now - self._last_move < self._cfg.pointer_recency:
            # Pointer is active, keep following it
            return self._begin_tracking(now)

        away = [d for d in LOOK_DIRS if d != self._tracked]
        direction = self._rng.choice(away)
        self._mode = Wandering(direction)
        duration = self._jittered(self._cfg.wander_min, self._cfg.wander_jitter)
        self._timeline.schedule(now + duration, self._end_wandering)
        log.debug(f"Gaze: wandering toward ({direction.x}, {direction.y}) for {duration:.2f}s")
        return {"gaze": direction}

    def _end_wandering(self, now: float) -> StateDelta:
        return self._begin_tracking(now)
