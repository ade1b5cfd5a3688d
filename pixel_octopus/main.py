#!/usr/bin/env python3
"""Pixel Octopus - render the animated creature to a GIF or PNG frames."""

import argparse
import logging
import signal
import time

from pixel_octopus.config import load_config
from pixel_octopus.state import load_color, save_color
from pixel_octopus.theme import derive_colors, parse_hex, to_hex
from pixel_octopus.creature.events import Bounds, PointerEnter, PointerLeave, PointerMove
from pixel_octopus.creature.gaze import reference_point
from pixel_octopus.creature.scheduler import AnimationScheduler
from pixel_octopus.render.pixel_renderer import PixelRenderer
from pixel_octopus.render.frame_sink import FrameSink

log = logging.getLogger("pixel-octopus")

HOVER_LENGTH = 1.5
POINTER_INTERVAL = 1.0


class OctopusApp:
    def __init__(self, config_path: str = "config.yaml", seed: int | None = None,
                 simulate: bool = False):
        self.config = load_config(config_path)
        self._seed = seed
        self._simulate = simulate
        self._running = False

        # Scripted input
        self.look = None        # (dx, dy) from the reference point
        self.hover_at = None    # seconds after start

    def start(self, duration: float | None = None, output: str | None = None):
        self._running = True

        # Set up logging
        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        out_cfg = self.config.output
        duration = out_cfg.duration if duration is None else duration
        output = output or out_cfg.path

        color = load_color(self.config.creature.default_color, out_cfg.state_file)
        colors = derive_colors(color)
        log.info(f"Body color {to_hex(colors.body)}")

        renderer = PixelRenderer(self.config.creature)
        sink = FrameSink(output, out_cfg.fps_target)
        scheduler = AnimationScheduler(self.config, seed=self._seed)

        size = self.config.creature.size
        bounds = Bounds(0, 0, size, size)

        fps = out_cfg.fps_target
        frame_time = 1.0 / fps
        total_frames = int(duration * fps)
        start = 0.0 if self._simulate else time.monotonic()
        scheduler.mount(start)

        hovering = False
        next_pointer = 0.0

        log.info(f"Rendering {total_frames} frames at {fps} FPS "
                 f"({'simulated' if self._simulate else 'real-time'})")

        try:
            for frame_index in range(total_frames):
                if not self._running:
                    break
                frame_start = time.monotonic()
                now = start + frame_index * frame_time if self._simulate else frame_start
                elapsed = now - start

                if self.look is not None and elapsed >= next_pointer:
                    cx, cy = reference_point(bounds, self.config.gaze.reference_bias)
                    scheduler.dispatch(
                        PointerMove(cx + self.look[0], cy + self.look[1], bounds), now)
                    next_pointer = elapsed + POINTER_INTERVAL

                if self.hover_at is not None:
                    in_hover = self.hover_at <= elapsed < self.hover_at + HOVER_LENGTH
                    if in_hover and not hovering:
                        scheduler.dispatch(PointerEnter(), now)
                    elif hovering and not in_hover:
                        scheduler.dispatch(PointerLeave(), now)
                    hovering = in_hover

                pose = scheduler.advance(now)
                sink.update(renderer.render(pose, colors))

                if not self._simulate:
                    sleep_time = frame_time - (time.monotonic() - frame_start)
                    if sleep_time > 0:
                        time.sleep(sleep_time)

        except KeyboardInterrupt:
            log.info("Interrupted")
        finally:
            self._running = False
            scheduler.unmount()
            sink.close()
            log.info("Done")

    def stop(self):
        self._running = False


def _color_arg(value: str) -> str:
    try:
        return to_hex(parse_hex(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def main():
    parser = argparse.ArgumentParser(description="Pixel Octopus")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--duration", type=float, help="Seconds to render")
    parser.add_argument("--output", help="Output .gif file or PNG directory")
    parser.add_argument("--color", type=_color_arg, help="Set and save body color (#RRGGBB)")
    parser.add_argument("--seed", type=int, help="Seed for repeatable animation")
    parser.add_argument("--simulate", action="store_true",
                        help="Use a virtual clock instead of rendering in real time")
    parser.add_argument("--hover-at", type=float, metavar="SECONDS",
                        help="Hover the pointer over the creature at this time")
    parser.add_argument("--look", type=float, nargs=2, metavar=("X", "Y"),
                        help="Hold the pointer at this offset from the eyes")
    args = parser.parse_args()

    app = OctopusApp(config_path=args.config, seed=args.seed, simulate=args.simulate)
    if args.color:
        save_color(args.color, app.config.output.state_file)
    app.look = args.look
    app.hover_at = args.hover_at

    # Handle SIGTERM gracefully
    signal.signal(signal.SIGTERM, lambda *_: app.stop())

    app.start(duration=args.duration, output=args.output)


if __name__ == "__main__":
    main()
