#!/usr/bin/env python3
"""Renders named creature poses to PNG files for a quick visual check."""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pixel_octopus.config import CreatureConfig
from pixel_octopus.creature.creature_state import CreatureState, GazeTarget
from pixel_octopus.creature.pose import resolve_pose
from pixel_octopus.render.frame_sink import flatten
from pixel_octopus.render.pixel_renderer import PixelRenderer
from pixel_octopus.theme import derive_colors


def main():
    config = CreatureConfig(size=240)
    renderer = PixelRenderer(config)
    colors = derive_colors(config.default_color)

    previews = {
        "center": CreatureState(),
        "look_right_down": CreatureState(gaze=GazeTarget(1, 1)),
        "look_up_left": CreatureState(gaze=GazeTarget(-1, -1)),
        "blink": CreatureState(blinking=True),
        "cross_eyed_high": CreatureState(cross_eyed=True, cross_eye_height=3),
        "cross_eyed_low": CreatureState(cross_eyed=True, cross_eye_height=4),
        "wiggle_outer": CreatureState(wiggle=frozenset({0, 3})),
        "wiggle_all": CreatureState(wiggle=frozenset({0, 1, 2, 3})),
        "flash_row_3": CreatureState(flash_row=3),
        "hover": CreatureState(hovered=True),
    }

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "preview_output")
    os.makedirs(out_dir, exist_ok=True)

    for name, state in previews.items():
        img = renderer.render(resolve_pose(state, config), colors)
        path = os.path.join(out_dir, f"{name}.png")
        flatten(img).save(path)
        print(f"Saved {path}")

    print(f"\nAll previews saved to {out_dir}/")


if __name__ == "__main__":
    main()
