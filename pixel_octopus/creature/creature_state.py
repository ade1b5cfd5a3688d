from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GazeTarget:
    """Symbolic look direction, each axis in -1..1."""

    x: int = 0
    y: int = 0


CENTERED = GazeTarget(0, 0)

# Octants the eyes may wander toward
LOOK_DIRS = (
    GazeTarget(-1, -1), GazeTarget(1, -1),
    GazeTarget(-1, 1), GazeTarget(1, 1),
    GazeTarget(0, -1), GazeTarget(0, 1),
    GazeTarget(-1, 0), GazeTarget(1, 0),
)


@dataclass(frozen=True)
class CreatureState:
    """Every controller-owned field, merged into one snapshot."""

    # Gaze
    gaze: GazeTarget = CENTERED

    # Eyes
    blinking: bool = False
    cross_eyed: bool = False
    cross_eye_height: int = 4

    # Limb indices currently displaced (0..3)
    wiggle: frozenset = frozenset()

    # Highlighted head row, None when no sweep is running
    flash_row: int | None = None

    hovered: bool = False


# Field name -> new value. Merged with dict.update, so the last writer wins.
StateDelta = dict


def apply_delta(state: CreatureState, delta: StateDelta) -> CreatureState:
    """Return state with delta applied. Unknown keys raise TypeError."""
    if not delta:
        return state
    return replace(state, **delta)
