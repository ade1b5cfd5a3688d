"""Resolve the merged creature state into a render-ready symbolic pose.

Grid coordinates are (column, row) on the 13x14 sprite.
"""

from dataclasses import dataclass

from pixel_octopus.config import CreatureConfig
from pixel_octopus.creature.creature_state import CreatureState

# Top-left pupil cell of each 2x2 eye when looking up-left or centered
LEFT_PUPIL_HOME = (4, 3)
RIGHT_PUPIL_HOME = (7, 3)

# Inner columns used when cross-eyed
LEFT_PUPIL_CROSS_COL = 5
RIGHT_PUPIL_CROSS_COL = 7

LIMB_COUNT = 4
LIMB_OPACITY_REST = 0.45
LIMB_OPACITY_WIGGLE = 0.65


@dataclass(frozen=True)
class EyePose:
    open: bool = True
    pupil: tuple | None = None


@dataclass(frozen=True)
class LimbPose:
    index: int
    offset: int = 0
    opacity: float = LIMB_OPACITY_REST


@dataclass(frozen=True)
class Pose:
    left_eye: EyePose
    right_eye: EyePose
    limbs: tuple
    flash_row: int | None = None
    lift: float = 0.0
    glow: float = 0.0


def _pupil_step(component: int) -> int:
    # 2x2 eye: only two cells per axis, so left/up and center share one
    return 1 if component > 0 else 0


def limb_direction(index: int) -> int:
    """Left limbs swing left, right limbs swing right."""
    return -1 if index < LIMB_COUNT // 2 else 1


def _resolve_eyes(state: CreatureState) -> tuple:
    if state.blinking:
        return EyePose(open=False), EyePose(open=False)

    if state.cross_eyed:
        h = state.cross_eye_height
        return (EyePose(pupil=(LEFT_PUPIL_CROSS_COL, h)),
                EyePose(pupil=(RIGHT_PUPIL_CROSS_COL, h)))

    dx = _pupil_step(state.gaze.x)
    dy = _pupil_step(state.gaze.y)
    left = (LEFT_PUPIL_HOME[0] + dx, LEFT_PUPIL_HOME[1] + dy)
    right = (RIGHT_PUPIL_HOME[0] + dx, RIGHT_PUPIL_HOME[1] + dy)
    return EyePose(pupil=left), EyePose(pupil=right)


def resolve_pose(state: CreatureState, config: CreatureConfig | None = None) -> Pose:
    """Pure function of state: blink hides the eyes, cross-eye beats gaze."""
    cfg = config or CreatureConfig()
    left, right = _resolve_eyes(state)

    limbs = tuple(
        LimbPose(i, limb_direction(i), LIMB_OPACITY_WIGGLE) if i in state.wiggle
        else LimbPose(i)
        for i in range(LIMB_COUNT)
    )

    return Pose(
        left_eye=left,
        right_eye=right,
        limbs=limbs,
        flash_row=state.flash_row,
        lift=cfg.hover_lift if state.hovered else 0.0,
        glow=cfg.glow_hover if state.hovered else cfg.glow_rest,
    )
