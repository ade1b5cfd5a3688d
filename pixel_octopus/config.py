import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
import yaml

log = logging.getLogger("pixel-octopus")


@dataclass
class CreatureConfig:
    size: int = 120
    default_color: str = "#D4804A"
    hover_lift: float = 8.0
    glow_radius: float = 4.0
    glow_rest: float = 0.6
    glow_hover: float = 1.0


@dataclass
class GazeConfig:
    dead_zone: float = 30.0
    reference_bias: float = 0.35
    track_min: float = 5.0
    track_jitter: float = 3.0
    wander_min: float = 0.8
    wander_jitter: float = 1.2
    pointer_recency: float = 2.0


@dataclass
class BlinkConfig:
    delay_min: float = 2.0
    delay_jitter: float = 6.0
    double_chance: float = 0.25
    slow_chance: float = 0.15
    blink_hold: float = 0.10
    slow_hold: float = 0.25
    double_hold: float = 0.08
    double_gap: float = 0.15


@dataclass
class IdleConfig:
    delay_min: float = 5.0
    delay_jitter: float = 3.0
    wiggle_chance: float = 0.40
    wave_chance: float = 0.20
    cross_eye_chance: float = 0.20
    pair_chance: float = 0.4
    wiggle_hold: float = 0.25
    wiggle_hold_jitter: float = 0.2
    wave_stagger: float = 0.15
    wave_hold: float = 0.2
    cross_eye_hold: float = 1.5
    cross_eye_jitter: float = 0.5
    cross_eye_blink: float = 0.1
    cross_eye_heights: tuple = (3, 4)


@dataclass
class HighlightConfig:
    delay_min: float = 15.0
    delay_jitter: float = 5.0
    stagger: float = 0.07
    rows: tuple = (1, 2, 3, 4, 5, 6)


@dataclass
class InteractionConfig:
    blink_hold: float = 0.12
    # (offset, limbs) pairs played on pointer-enter
    wave: tuple = (
        (0.05, (1, 2)),
        (0.15, (0, 1, 2, 3)),
        (0.30, (0, 3)),
        (0.45, ()),
    )


@dataclass
class OutputConfig:
    fps_target: int = 30
    duration: float = 10.0
    path: str = "octopus.gif"
    state_file: str = "state.json"


@dataclass
class Config:
    creature: CreatureConfig = field(default_factory=CreatureConfig)
    gaze: GazeConfig = field(default_factory=GazeConfig)
    blink: BlinkConfig = field(default_factory=BlinkConfig)
    idle: IdleConfig = field(default_factory=IdleConfig)
    highlight: HighlightConfig = field(default_factory=HighlightConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"


def _override(section, data: dict, name: str):
    """Return a copy of a config section with the known keys from data applied."""
    known = {f.name: f for f in fields(section)}
    values = {}
    for key, value in data.items():
        if key not in known:
            log.warning(f"Ignoring unknown config key {name}.{key}")
            continue
        # YAML has no tuples
        if isinstance(getattr(section, key), tuple) and isinstance(value, list):
            value = tuple(tuple(v) if isinstance(v, list) else v for v in value)
        values[key] = value
    return replace(section, **values)


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if "creature" in data:
        config.creature = _override(config.creature, data["creature"], "creature")

    if "gaze" in data:
        config.gaze = _override(config.gaze, data["gaze"], "gaze")

    if "blink" in data:
        config.blink = _override(config.blink, data["blink"], "blink")

    if "idle" in data:
        config.idle = _override(config.idle, data["idle"], "idle")

    if "highlight" in data:
        config.highlight = _override(config.highlight, data["highlight"], "highlight")

    if "interaction" in data:
        config.interaction = _override(config.interaction, data["interaction"], "interaction")

    if "output" in data:
        config.output = _override(config.output, data["output"], "output")

    if "logging" in data:
        config.log_level = data["logging"].get("level", config.log_level)

    return config
