"""Random idle behaviors: limb wiggles, a sequential wave, and going cross-eyed.

Bands for one roll (defaults): wiggle 40%, wave 20%, cross-eyed 20%, rest 20%.
"""

import logging
from enum import Enum

from pixel_octopus.config import IdleConfig
from pixel_octopus.creature.controller import Controller
from pixel_octopus.creature.creature_state import StateDelta

log = logging.getLogger("pixel-octopus")

LIMB_COUNT = 4
RESTING = frozenset()


class IdleGesture(Enum):
    WIGGLE = "wiggle"
    WAVE = "wave"
    CROSS_EYED = "cross_eyed"
    REST = "rest"


def choose_gesture(roll: float, config: IdleConfig) -> IdleGesture:
    edge = config.wiggle_chance
    if roll < edge:
        return IdleGesture.WIGGLE
    edge += config.wave_chance
    if roll < edge:
        return IdleGesture.WAVE
    edge += config.cross_eye_chance
    if roll < edge:
        return IdleGesture.CROSS_EYED
    return IdleGesture.REST


class IdleGestureController(Controller):
    """Owns the wiggle set and the cross-eye override."""

    name = "idle"

    def __init__(self, config: IdleConfig, rng=None):
        super().__init__(rng)
        self._cfg = config
        self.last_gesture = None

    def start(self, now: float) -> StateDelta:
        self._schedule_next(now)
        return {"wiggle": RESTING, "cross_eyed": False}

    def _schedule_next(self, now: float):
        delay = self._jittered(self._cfg.delay_min, self._cfg.delay_jitter)
        self._timeline.schedule(now + delay, self._fire)

    def _fire(self, now: float) -> StateDelta:
        gesture = choose_gesture(self._rng.random(), self._cfg)
        self.last_gesture = gesture
        log.debug(f"Idle gesture: {gesture.value}")

        if gesture is IdleGesture.WIGGLE:
            delta = self._wiggle(now)
        elif gesture is IdleGesture.WAVE:
            delta = self._wave(now)
        elif gesture is IdleGesture.CROSS_EYED:
            delta = self._cross_eyes(now)
        else:
            delta = {}

        # Next cycle starts counting now; the shortest delay outlasts any gesture
        self._schedule_next(now)
        return delta

    def _wiggle(self, now: float) -> StateDelta:
        count = 2 if self._rng.random() < self._cfg.pair_chance else 1
        limbs = frozenset(self._rng.sample(range(LIMB_COUNT), count))
        hold = self._jittered(self._cfg.wiggle_hold, self._cfg.wiggle_hold_jitter)
        self._timeline.schedule(now + hold, self._set_wiggle, RESTING)
        return {"wiggle": limbs}

    def _wave(self, now: float) -> StateDelta:
        for i in range(LIMB_COUNT):
            start = now + i * self._cfg.wave_stagger
            self._timeline.schedule(start, self._set_wiggle, frozenset({i}))
            self._timeline.schedule(start + self._cfg.wave_hold, self._set_wiggle, RESTING)
        return {}

    def _cross_eyes(self, now: float) -> StateDelta:
        low, high = self._cfg.cross_eye_heights
        height = low if self._rng.random() < 0.5 else high
        hold = self._jittered(self._cfg.cross_eye_hold, self._cfg.cross_eye_jitter)
        self._timeline.schedule(now + hold, self._blink_out)
        return {"cross_eyed": True, "cross_eye_height": height}

    def _blink_out(self, now: float) -> StateDelta:
        self._timeline.schedule(now + self._cfg.cross_eye_blink, self._uncross)
        return {"blinking": True}

    def _uncross(self, now: float) -> StateDelta:
        return {"cross_eyed": False, "blinking": False}

    def _set_wiggle(self, now: float, limbs: frozenset) -> StateDelta:
        return {"wiggle": limbs}
