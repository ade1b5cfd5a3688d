"""Pending timed steps for one controller.

Steps are ordered by (due, seq). seq comes from one process-wide counter, so
steps due at the same instant fire in the order they were scheduled even when
they belong to different controllers.
"""

import heapq
import itertools

_sequence = itertools.count()


class Timeline:
    """Min-heap of (due, seq, action, args) entries."""

    def __init__(self):
        self._heap = []

    def __len__(self) -> int:
        return len(self._heap)

    def schedule(self, due: float, action, *args):
        """Queue action(due, *args) to run once the clock reaches due."""
        heapq.heappush(self._heap, (due, next(_sequence), action, args))

    def next_due(self) -> tuple | None:
        """Return (due, seq) of the earliest pending step, or None."""
        if not self._heap:
            return None
        due, seq, _, _ = self._heap[0]
        return (due, seq)

    def pop_due(self, now: float):
        """Remove and return the earliest step if it is due, else None."""
        if not self._heap or self._heap[0][0] > now:
            return None
        due, _, action, args = heapq.heappop(self._heap)
        return due, action, args

    def cancel_all(self):
        self._heap.clear()
