import random

import pytest

from pixel_octopus.config import Config


class ScriptedRandom(random.Random):
    """random() returns queued values first, then falls back to a seeded stream.

    choice() and sample() draw from the seeded stream (they do not use random()).
    """

    def __init__(self, values=(), seed: int = 0):
        super().__init__(seed)
        self._values = list(values)

    def random(self):
        if self._values:
            return self._values.pop(0)
        return super().random()

    def getrandbits(self, k):
        return super().getrandbits(k)


def drain(controller, until: float, state: dict | None = None) -> list:
    """Advance a lone controller step by step, recording (due, delta) pairs."""
    history = []
    while True:
        key = controller.next_due()
        if key is None or key[0] > until:
            break
        delta = controller.advance(key[0])
        if delta:
            history.append((round(key[0], 6), delta))
            if state is not None:
                state.update(delta)
    return history


@pytest.fixture
def config():
    return Config()
