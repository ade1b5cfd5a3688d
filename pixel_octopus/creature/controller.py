import random

from pixel_octopus.creature.creature_state import StateDelta
from pixel_octopus.creature.timeline import Timeline


class Controller:
    """Base for the self-rescheduling behavior loops.

    Subclasses schedule steps on their timeline. A step is called as
    step(due, *args) and returns a StateDelta (or None for no change).
    """

    name = "controller"

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self._timeline = Timeline()

    def start(self, now: float) -> StateDelta:
        return {}

    def next_due(self) -> tuple | None:
        return self._timeline.next_due()

    def advance(self, now: float) -> StateDelta:
        """Run every step due at or before now, earliest first."""
        delta = {}
        while True:
            entry = self._timeline.pop_due(now)
            if entry is None:
                break
            due, action, args = entry
            delta.update(action(due, *args) or {})
        return delta

    def on_event(self, event, now: float) -> StateDelta:
        return {}

    def cancel(self):
        self._timeline.cancel_all()

    @property
    def pending(self) -> int:
        return len(self._timeline)

    def _jittered(self, base: float, jitter: float) -> float:
        return base + self._rng.random() * jitter
