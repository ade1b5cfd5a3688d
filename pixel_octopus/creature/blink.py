import logging
from collections import Counter
from enum import Enum

from pixel_octopus.config import BlinkConfig
from pixel_octopus.creature.controller import Controller
from pixel_octopus.creature.creature_state import StateDelta

log = logging.getLogger("pixel-octopus")


class BlinkEpisode(Enum):
    DOUBLE = "double"
    SLOW = "slow"
    NORMAL = "normal"


def choose_episode(roll: float, config: BlinkConfig) -> BlinkEpisode:
    """Map one uniform draw onto the episode probability bands."""
    if roll < config.double_chance:
        return BlinkEpisode.DOUBLE
    if roll < config.double_chance + config.slow_chance:
        return BlinkEpisode.SLOW
    return BlinkEpisode.NORMAL


def episode_script(episode: BlinkEpisode, config: BlinkConfig) -> list:
    """(offset, blinking) steps for one episode. Always ends with the eyes open."""
    if episode is BlinkEpisode.DOUBLE:
        hold, gap = config.double_hold, config.double_gap
        return [
            (0.0, True),
            (hold, False),
            (hold + gap, True),
            (2 * hold + gap, False),
        ]
    if episode is BlinkEpisode.SLOW:
        return [(0.0, True), (config.slow_hold, False)]
    return [(0.0, True), (config.blink_hold, False)]


class BlinkController(Controller):
    """Spontaneous blinking. One episode in flight at a time; the next delay
    starts only once the current episode has reopened the eyes."""

    name = "blink"

    def __init__(self, config: BlinkConfig, rng=None):
        super().__init__(rng)
        self._cfg = config
        self._episode = None
        self.episode_counts = Counter()

    @property
    def episode(self) -> BlinkEpisode | None:
        """Episode currently playing, None while waiting."""
        return self._episode

    def start(self, now: float) -> StateDelta:
        self._episode = None
        self._schedule_next(now)
        return {"blinking": False}

    def _schedule_next(self, now: float):
        delay = self._jittered(self._cfg.delay_min, self._cfg.delay_jitter)
        self._timeline.schedule(now + delay, self._begin_episode)

    def _begin_episode(self, now: float) -> StateDelta:
        episode = choose_episode(self._rng.random(), self._cfg)
        self._episode = episode
        self.episode_counts[episode] += 1
        log.debug(f"Blink: {episode.value}")

        script = episode_script(episode, self._cfg)
        last = len(script) - 1
        for i, (offset, closed) in enumerate(script[1:], start=1):
            self._timeline.schedule(now + offset, self._set_eyes, closed, i == last)

        _, closed = script[0]
        return {"blinking": closed}

    def _set_eyes(self, now: float, closed: bool, final: bool) -> StateDelta:
        if final:
            self._episode = None
            self._schedule_next(now)
        return {"blinking": closed}
