import numpy as np
from PIL import Image, ImageFilter

from pixel_octopus.config import CreatureConfig
from pixel_octopus.creature.pose import Pose
from pixel_octopus.theme import PUPIL, RoleColors
from pixel_octopus.utils.math_helpers import clamp

GRID_COLS = 13
GRID_ROWS = 14

# (row, col) cells
HEAD_PIXELS = (
    [(1, c) for c in range(4, 9)]
    + [(2, c) for c in range(3, 10)]
    + [(3, c) for c in (2, 3, 6, 9, 10)]
    + [(4, c) for c in (2, 3, 6, 9, 10)]
    + [(5, c) for c in range(2, 11)]
    + [(6, c) for c in range(3, 10)]
)

LEFT_EYE_PIXELS = ((3, 4), (3, 5), (4, 4), (4, 5))
RIGHT_EYE_PIXELS = ((3, 7), (3, 8), (4, 7), (4, 8))

# Vertical tentacle spans, indexed like the pose limbs
TENTACLES = (
    {"col": 3, "row": 8, "height": 3},  # left outer
    {"col": 5, "row": 8, "height": 2},  # left inner
    {"col": 7, "row": 8, "height": 2},  # right inner
    {"col": 9, "row": 8, "height": 3},  # right outer
)


class PixelRenderer:
    """Rasterizes a Pose onto an RGBA image with glow and hover lift."""

    def __init__(self, config: CreatureConfig):
        self._glow_radius = config.glow_radius
        # Room for the glow on every side and for the lift at the top
        self._pad = int(np.ceil(config.glow_radius * 2 + config.hover_lift))
        # The 13x14 grid fits the configured size along its taller side
        self._sprite_h = max(GRID_ROWS, config.size)
        self._sprite_w = max(GRID_COLS, round(self._sprite_h * GRID_COLS / GRID_ROWS))

    @property
    def sprite_size(self) -> tuple:
        return (self._sprite_w, self._sprite_h)

    @property
    def canvas_size(self) -> tuple:
        return (self._sprite_w + 2 * self._pad, self._sprite_h + 2 * self._pad)

    def grid(self, pose: Pose, colors: RoleColors) -> np.ndarray:
        """Pose -> (rows, cols, 4) uint8 array at one pixel per cell."""
        g = np.zeros((GRID_ROWS, GRID_COLS, 4), dtype=np.uint8)

        for r, c in HEAD_PIXELS:
            color = colors.eye if pose.flash_row == r else colors.body
            g[r, c] = (*color, 255)

        for eye, pixels in ((pose.left_eye, LEFT_EYE_PIXELS), (pose.right_eye, RIGHT_EYE_PIXELS)):
            color = colors.eye if eye.open else colors.body
            for r, c in pixels:
                g[r, c] = (*color, 255)
            if eye.open and eye.pupil is not None:
                pc, pr = eye.pupil
                g[pr, pc] = (*PUPIL, 255)

        for limb in pose.limbs:
            t = TENTACLES[limb.index]
            col = t["col"] + limb.offset
            alpha = int(round(limb.opacity * 255))
            g[t["row"]:t["row"] + t["height"], col] = (*colors.body, alpha)

        return g

    def render(self, pose: Pose, colors: RoleColors) -> Image.Image:
        """Render pose to a new RGBA image of canvas_size."""
        cells = self.grid(pose, colors)
        sprite = Image.fromarray(cells).resize(self.sprite_size, Image.NEAREST)

        layer = Image.new("RGBA", self.canvas_size, (0, 0, 0, 0))
        layer.paste(sprite, (self._pad, self._pad - int(round(pose.lift))))

        if pose.glow <= 0 or self._glow_radius <= 0:
            return layer

        # Blurred silhouette in the glow color, underneath the sprite
        alpha = layer.getchannel("A").filter(ImageFilter.GaussianBlur(self._glow_radius))
        strength = clamp(pose.glow, 0.0, 1.0)
        alpha = alpha.point(lambda a: int(a * strength))
        glow = Image.new("RGBA", self.canvas_size, (*colors.glow, 0))
        glow.putalpha(alpha)
        return Image.alpha_composite(glow, layer)
