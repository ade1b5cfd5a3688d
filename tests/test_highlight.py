import pytest

from conftest import ScriptedRandom, drain

from pixel_octopus.config import HighlightConfig
from pixel_octopus.creature.highlight import HighlightSweepController


def test_sweep_visits_rows_in_order_then_clears():
    sweep = HighlightSweepController(HighlightConfig(), ScriptedRandom([0.0, 0.0]))
    assert sweep.start(0.0) == {"flash_row": None}
    assert sweep.next_due()[0] == 15.0

    history = drain(sweep, until=16.0)
    assert [d["flash_row"] for _, d in history] == [1, 2, 3, 4, 5, 6, None]
    assert [t for t, _ in history] == pytest.approx([15.0 + i * 0.07 for i in range(7)])


def test_next_sweep_is_rescheduled():
    sweep = HighlightSweepController(HighlightConfig(), ScriptedRandom([0.0, 1.0]))
    sweep.start(0.0)
    drain(sweep, until=16.0)
    assert sweep.pending == 1
    assert sweep.next_due()[0] == pytest.approx(35.0)
