import logging

from pixel_octopus.config import InteractionConfig
from pixel_octopus.creature.controller import Controller
from pixel_octopus.creature.creature_state import StateDelta
from pixel_octopus.creature.events import PointerDown, PointerEnter, PointerLeave

log = logging.getLogger("pixel-octopus")


class InteractionController(Controller):
    """Hover reactions: a blink and an inner-to-outer tentacle wave on enter."""

    name = "interaction"

    def __init__(self, config: InteractionConfig, rng=None):
        super().__init__(rng)
        self._cfg = config
        self._hovered = False

    @property
    def hovered(self) -> bool:
        return self._hovered

    def start(self, now: float) -> StateDelta:
        self._hovered = False
        return {"hovered": False}

    def on_event(self, event, now: float) -> StateDelta:
        if isinstance(event, PointerEnter):
            return self._enter(now)
        if isinstance(event, PointerLeave):
            # In-flight wave and blink play out
            self._hovered = False
            return {"hovered": False}
        if isinstance(event, PointerDown):
            log.debug(f"Pointer down (button {event.button}) ignored")
        return {}

    def _enter(self, now: float) -> StateDelta:
        self._hovered = True
        self._timeline.schedule(now + self._cfg.blink_hold, self._set, {"blinking": False})
        for offset, limbs in self._cfg.wave:
            self._timeline.schedule(now + offset, self._set, {"wiggle": frozenset(limbs)})
        return {"hovered": True, "blinking": True}

    def _set(self, now: float, delta: StateDelta) -> StateDelta:
        return delta
