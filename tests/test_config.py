from pixel_octopus.config import Config, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"))
    assert config == Config()


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()


def test_partial_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "creature:\n"
        "  size: 240\n"
        "gaze:\n"
        "  dead_zone: 12\n"
        "highlight:\n"
        "  rows: [2, 3, 4]\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(str(path))
    assert config.creature.size == 240
    assert config.creature.hover_lift == 8.0
    assert config.gaze.dead_zone == 12
    assert config.gaze.track_min == 5.0
    assert config.highlight.rows == (2, 3, 4)
    assert config.blink == Config().blink
    assert config.log_level == "DEBUG"


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text("blink:\n  delay_min: 1.0\n  sparkle: 3\n")
    config = load_config(str(path))
    assert config.blink.delay_min == 1.0
    assert not hasattr(config.blink, "sparkle")
    assert "blink.sparkle" in caplog.text


def test_wave_script_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("interaction:\n  wave: [[0.1, [0, 3]], [0.2, []]]\n")
    config = load_config(str(path))
    assert [(t, list(limbs)) for t, limbs in config.interaction.wave] == [(0.1, [0, 3]), (0.2, [])]
