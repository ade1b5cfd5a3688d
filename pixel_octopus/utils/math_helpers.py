def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value between min_val and max_val."""
    return max(min_val, min(max_val, value))


def axis_step(delta: float, dead_zone: float) -> int:
    """Quantize a displacement to -1, 0 or 1, treating |delta| <= dead_zone as 0."""
    if abs(delta) <= dead_zone:
        return 0
    return 1 if delta > 0 else -1
