"""Tests for rasterizing poses and writing frames."""

import numpy as np
from PIL import Image

from pixel_octopus.config import CreatureConfig
from pixel_octopus.creature.creature_state import CreatureState, GazeTarget
from pixel_octopus.creature.pose import resolve_pose
from pixel_octopus.render.frame_sink import FrameSink
from pixel_octopus.render.pixel_renderer import GRID_COLS, GRID_ROWS, PixelRenderer
from pixel_octopus.theme import PUPIL, derive_colors

COLORS = derive_colors("#D4804A")


def _grid(state, config=None):
    config = config or CreatureConfig()
    return PixelRenderer(config).grid(resolve_pose(state, config), COLORS)


def test_grid_shape_and_head():
    g = _grid(CreatureState())
    assert g.shape == (GRID_ROWS, GRID_COLS, 4)
    assert tuple(g[1, 4, :3]) == COLORS.body
    assert g[0, 0, 3] == 0


def test_pupils_follow_gaze():
    g = _grid(CreatureState(gaze=GazeTarget(1, 1)))
    assert tuple(g[4, 5, :3]) == PUPIL
    assert tuple(g[4, 8, :3]) == PUPIL
    assert tuple(g[3, 4, :3]) == COLORS.eye


def test_closed_eyes_have_no_pupils():
    g = _grid(CreatureState(blinking=True))
    eye_cells = [g[r, c, :3] for r in (3, 4) for c in (4, 5, 7, 8)]
    assert all(tuple(cell) == COLORS.body for cell in eye_cells)


def test_flash_row_uses_eye_color():
    g = _grid(CreatureState(flash_row=2))
    assert tuple(g[2, 3, :3]) == COLORS.eye
    assert tuple(g[1, 4, :3]) == COLORS.body


def test_wiggled_tentacle_moves_and_brightens():
    resting = _grid(CreatureState())
    wiggled = _grid(CreatureState(wiggle=frozenset({0})))
    assert resting[8, 3, 3] == round(0.45 * 255)
    assert wiggled[8, 3, 3] == 0
    assert wiggled[8, 2, 3] == round(0.65 * 255)


def test_render_size_and_lift():
    config = CreatureConfig(size=140, glow_radius=0)
    renderer = PixelRenderer(config)
    resting = renderer.render(resolve_pose(CreatureState(), config), COLORS)
    hovered = renderer.render(resolve_pose(CreatureState(hovered=True), config), COLORS)

    assert resting.size == renderer.canvas_size
    assert resting.mode == "RGBA"
    top_rest = resting.getbbox()[1]
    top_hover = hovered.getbbox()[1]
    assert top_rest - top_hover == 8


def test_glow_spreads_past_sprite():
    config = CreatureConfig(size=140)
    renderer = PixelRenderer(config)
    plain = PixelRenderer(CreatureConfig(size=140, glow_radius=0))
    pose = resolve_pose(CreatureState(), config)

    glowing = np.asarray(renderer.render(pose, COLORS))[:, :, 3]
    bare = np.asarray(plain.render(pose, COLORS))[:, :, 3]
    assert (glowing > 0).sum() > (bare > 0).sum()


def test_frame_sink_writes_gif(tmp_path):
    path = tmp_path / "out.gif"
    sink = FrameSink(str(path), fps=10)
    frame = Image.new("RGBA", (20, 20), (255, 0, 0, 255))
    for _ in range(3):
        sink.update(frame)
    assert sink.frame_count == 3
    sink.close()

    with Image.open(path) as gif:
        assert gif.n_frames >= 1


def test_frame_sink_writes_pngs(tmp_path):
    out_dir = tmp_path / "frames"
    sink = FrameSink(str(out_dir), fps=10)
    sink.update(Image.new("RGBA", (8, 8), (0, 0, 0, 0)))
    sink.update(Image.new("RGBA", (8, 8), (0, 255, 0, 255)))
    sink.close()
    assert sorted(p.name for p in out_dir.iterdir()) == ["frame_00000.png", "frame_00001.png"]


def test_sprite_fills_configured_size():
    for size in (120, 100, 133):
        renderer = PixelRenderer(CreatureConfig(size=size, glow_radius=0, hover_lift=0))
        assert renderer.sprite_size[1] == size
        assert renderer.sprite_size[0] == round(size * GRID_COLS / GRID_ROWS)
        assert renderer.canvas_size == renderer.sprite_size

    # Grid row 0 is empty, so the head starts about one cell down
    config = CreatureConfig(size=120, glow_radius=0, hover_lift=0)
    image = PixelRenderer(config).render(resolve_pose(CreatureState(), config), COLORS)
    assert image.size == (111, 120)
    top = image.getbbox()[1]
    assert 8 <= top <= 9


def test_png_frames_written_as_they_arrive(tmp_path):
    out_dir = tmp_path / "frames"
    sink = FrameSink(str(out_dir), fps=10)
    sink.update(Image.new("RGBA", (8, 8), (0, 0, 255, 255)))
    assert [p.name for p in out_dir.iterdir()] == ["frame_00000.png"]
    assert sink.frame_count == 1
    sink.close()
