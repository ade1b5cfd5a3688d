"""Composition root for the creature's behavior loops.

Five controllers run independent, self-rescheduling loops. The scheduler
owns the merged CreatureState and is the only place that mutates it:

    controller step -> StateDelta -> apply_delta -> resolve_pose -> listeners

Steps are run strictly in (due, seq) order across all controllers, one at a
time, on the caller's thread. Shared fields (blinking, wiggle) follow
last-writer-wins.
"""

import logging
import random
import time

from pixel_octopus.config import Config
from pixel_octopus.creature.blink import BlinkController
from pixel_octopus.creature.creature_state import CreatureState, apply_delta
from pixel_octopus.creature.gaze import GazeController
from pixel_octopus.creature.highlight import HighlightSweepController
from pixel_octopus.creature.idle_gestures import IdleGestureController
from pixel_octopus.creature.interaction import InteractionController
from pixel_octopus.creature.pose import Pose, resolve_pose

log = logging.getLogger("pixel-octopus")


def seeded_streams(seed: int | None):
    """Return an rng factory giving each controller its own stream.

    Streams are keyed by controller name, so they do not depend on the
    order controllers are built in.
    """
    def factory(name: str) -> random.Random:
        if seed is None:
            return random.Random()
        return random.Random(f"{seed}:{name}")

    return factory


class AnimationScheduler:
    """Advances all controllers and keeps the render-ready pose current."""

    def __init__(self, config: Config | None = None, seed: int | None = None,
                 clock=time.monotonic, rng_factory=None):
        self._cfg = config or Config()
        self._clock = clock
        rng_for = rng_factory or seeded_streams(seed)

        self.gaze = GazeController(self._cfg.gaze, rng_for(GazeController.name))
        self.blink = BlinkController(self._cfg.blink, rng_for(BlinkController.name))
        self.idle = IdleGestureController(self._cfg.idle, rng_for(IdleGestureController.name))
        self.highlight = HighlightSweepController(
            self._cfg.highlight, rng_for(HighlightSweepController.name))
        self.interaction = InteractionController(
            self._cfg.interaction, rng_for(InteractionController.name))
        self._controllers = (self.gaze, self.blink, self.idle, self.highlight, self.interaction)

        self._state = CreatureState()
        self._pose = resolve_pose(self._state, self._cfg.creature)
        self._listeners = []
        self._mounted = False
        self._alive = False
        self._now = 0.0

    @property
    def state(self) -> CreatureState:
        return self._state

    @property
    def pose(self) -> Pose:
        return self._pose

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def now(self) -> float:
        """Time of the most recent step or event."""
        return self._now

    def add_listener(self, callback):
        """callback(pose) is invoked after every state change."""
        self._listeners.append(callback)

    def mount(self, now: float | None = None) -> Pose:
        if self._mounted:
            log.warning("AnimationScheduler already mounted")
            return self._pose
        now = self._clock() if now is None else now
        self._mounted = True
        self._alive = True
        self._now = now

        delta = {}
        for controller in self._controllers:
            delta.update(controller.start(now))
            log.debug(f"Started {controller.name} loop, next step at {controller.next_due()}")
        self._merge(delta)
        log.info("Creature mounted")
        return self._pose

    def unmount(self):
        """Cancel every pending step. Safe to call more than once."""
        if not self._alive:
            return
        self._alive = False
        for controller in self._controllers:
            if controller.pending:
                log.debug(f"Cancelling {controller.pending} pending {controller.name} steps")
            controller.cancel()
        log.info("Creature unmounted")

    def advance(self, now: float | None = None) -> Pose:
        """Run every step due up to now, globally ordered by due time."""
        now = self._clock() if now is None else now
        while self._alive:
            controller, key = self._next_due()
            if controller is None or key[0] > now:
                break
            due = key[0]
            self._now = due
            self._merge(controller.advance(due))
        if self._alive:
            self._now = max(self._now, now)
        return self._pose

    def dispatch(self, event, now: float | None = None) -> Pose:
        """Bring timers up to date, then hand the event to every controller."""
        now = self._clock() if now is None else now
        self.advance(now)
        if not self._alive:
            return self._pose

        delta = {}
        for controller in self._controllers:
            delta.update(controller.on_event(event, now))
        self._merge(delta)
        return self._pose

    def _next_due(self):
        best, best_key = None, None
        for controller in self._controllers:
            key = controller.next_due()
            if key is not None and (best_key is None or key < best_key):
                best, best_key = controller, key
        return best, best_key

    def _merge(self, delta: dict):
        new_state = apply_delta(self._state, delta)
        if new_state == self._state:
            return
        self._state = new_state
        self._pose = resolve_pose(new_state, self._cfg.creature)
        for callback in list(self._listeners):
            callback(self._pose)
