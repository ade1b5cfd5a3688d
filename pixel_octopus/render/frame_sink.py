import logging
from pathlib import Path

from PIL import Image

log = logging.getLogger("pixel-octopus")

BACKGROUND = (18, 18, 20)


def flatten(image: Image.Image, background: tuple = BACKGROUND) -> Image.Image:
    """Composite an RGBA frame onto an opaque background."""
    base = Image.new("RGBA", image.size, (*background, 255))
    return Image.alpha_composite(base, image).convert("RGB")


class FrameSink:
    """Writes rendered frames as a GIF or a PNG sequence.

    A path ending in .gif produces one looping animation, buffered until
    close(). Anything else is treated as a directory of numbered PNG files,
    each written as soon as it arrives.
    """

    def __init__(self, path: str, fps: int):
        self._path = Path(path)
        self._fps = fps
        self._frames = []
        self._count = 0
        self._as_gif = self._path.suffix.lower() == ".gif"
        if not self._as_gif:
            self._path.mkdir(parents=True, exist_ok=True)

    @property
    def frame_count(self) -> int:
        return self._count

    def update(self, frame: Image.Image):
        """Add one frame. The image is copied; callers may reuse theirs."""
        flat = flatten(frame)
        if self._as_gif:
            self._frames.append(flat)
        else:
            flat.save(self._path / f"frame_{self._count:05d}.png")
        self._count += 1

    def close(self):
        """Finish the output. GIF frames are written here."""
        if not self._count:
            log.warning("No frames to write")
            return

        if self._as_gif:
            first, rest = self._frames[0], self._frames[1:]
            first.save(
                self._path,
                save_all=True,
                append_images=rest,
                duration=int(1000 / self._fps),
                loop=0,
                disposal=2,
            )
            self._frames = []

        log.info(f"Wrote {self._count} frames to {self._path}")
