"""Derive the creature's role colors from a single body color."""

from dataclasses import dataclass

WHITE = (255, 255, 255)
PUPIL = (10, 9, 8)


@dataclass(frozen=True)
class RoleColors:
    body: tuple
    eye: tuple
    glow: tuple


def parse_hex(value: str) -> tuple:
    """'#RRGGBB' (or 'RRGGBB') -> (r, g, b). Raises ValueError on bad input."""
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise ValueError(f"Not a #RRGGBB color: {value!r}")
    try:
        return tuple(int(text[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Not a #RRGGBB color: {value!r}") from None


def to_hex(rgb: tuple) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def _mix(a: tuple, b: tuple, t: float) -> tuple:
    return tuple(int(round(a[i] + (b[i] - a[i]) * t)) for i in range(3))


def derive_colors(base: str) -> RoleColors:
    body = parse_hex(base)
    # Eyes and highlight: pale tint of the body
    eye = _mix(body, WHITE, 0.55)
    # Glow: brighter shade of the body
    glow = tuple(min(255, c + 40) for c in body)
    return RoleColors(body=body, eye=eye, glow=glow)
