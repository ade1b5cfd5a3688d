from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """On-screen rectangle of the rendered creature."""

    left: float
    top: float
    width: float
    height: float

    @property
    def is_laid_out(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class PointerMove:
    """Global pointer position in screen coordinates."""

    x: float
    y: float
    bounds: Bounds | None = None


@dataclass(frozen=True)
class PointerEnter:
    pass


@dataclass(frozen=True)
class PointerLeave:
    pass


@dataclass(frozen=True)
class PointerDown:
    button: int = 0
