from pathlib import Path

import pytest
from pydantic import ValidationError

from pomodoro_cli.core.config import Config, SessionConfig


def test_defaults():
    session = SessionConfig()

    assert (session.work_minutes, session.break_minutes, session.long_break_minutes) == (25, 5, 15)
    assert session.cycles == 4
    assert session.sound_file is None
    assert (session.work_seconds, session.break_seconds, session.long_break_seconds) == (1500, 300, 900)


@pytest.mark.parametrize(
    "field, value",
    [
        ("work_minutes", -1),
        ("break_minutes", -5),
        ("long_break_minutes", -15),
        ("cycles", 0),
        ("work_minutes", "soon"),
    ],
)
def test_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        SessionConfig(**{field: value})


def test_session_config_is_frozen():
    session = SessionConfig()

    with pytest.raises(ValidationError):
        session.cycles = 2


def test_load_missing_file_gives_defaults(tmp_path):
    config = Config.load(tmp_path / "nope.yaml")

    assert config.session == SessionConfig()
    assert config.log_level == "WARNING"
    assert config.display.poll_interval_seconds == 0.5


def test_load_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert Config.load(path).session == SessionConfig()


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "log_level: DEBUG\n"
        "session:\n"
        "  work_minutes: 50\n"
        "  cycles: 2\n"
        "  sound_file: /tmp/gong.wav\n"
        "display:\n"
        "  poll_interval_seconds: 0.25\n"
    )

    config = Config.load(path)

    assert config.log_level == "DEBUG"
    assert config.session.work_minutes == 50
    assert config.session.break_minutes == 5
    assert config.session.cycles == 2
    assert config.session.sound_file == Path("/tmp/gong.wav")
    assert config.display.poll_interval_seconds == 0.25


def test_load_invalid_yaml_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("session:\n  cycles: 0\n")

    with pytest.raises(ValidationError):
        Config.load(path)


def test_overrides_replace_only_given_values():
    config = Config(session=SessionConfig(work_minutes=50, cycles=2))

    session = config.session_with_overrides(work_minutes=None, break_minutes=10, cycles=None)

    assert session.work_minutes == 50
    assert session.break_minutes == 10
    assert session.cycles == 2


def test_overrides_are_validated():
    with pytest.raises(ValidationError):
        Config().session_with_overrides(cycles=0)


def test_load_non_mapping_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ValidationError):
        Config.load(path)
