"""Configuration management with Pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_PATH = Path.home() / ".config/pomodoro-cli/config.yaml"


class SessionConfig(BaseModel):
    """Durations and alert sound for one Pomodoro session.

    Fixed for the lifetime of the process. A cycle count of 0 is rejected:
    with the `>=` comparison every break would become a long break.
    """

    model_config = ConfigDict(frozen=True)

    work_minutes: int = Field(default=25, ge=0, description="Work phase duration")
    break_minutes: int = Field(default=5, ge=0, description="Short break duration")
    long_break_minutes: int = Field(default=15, ge=0, description="Long break duration")
    cycles: int = Field(default=4, ge=1, description="Work/break cycles before a long break")
    sound_file: Path | None = Field(default=None, description="Custom alert sound, built-in beep if unset")

    @property
    def work_seconds(self) -> int:
        return self.work_minutes * 60

    @property
    def break_seconds(self) -> int:
        return self.break_minutes * 60

    @property
    def long_break_seconds(self) -> int:
        return self.long_break_minutes * 60


class DisplayConfig(BaseModel):
    """Countdown display configuration."""

    poll_interval_seconds: float = Field(default=0.5, gt=0, description="Countdown refresh interval")


class Config(BaseModel):
    """Main application configuration."""

    model_config = ConfigDict(extra="ignore")

    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_file: Path | None = Field(default=None, description="Also write logs to this file")

    # Sub-configurations
    session: SessionConfig = Field(default_factory=SessionConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from a YAML file, falling back to defaults.

        A missing or empty file gives the default configuration. Invalid
        values, or a file that is not a mapping, raise pydantic's
        ValidationError.
        """
        config_path = config_path or DEFAULT_CONFIG_PATH

        yaml_config: dict[str, Any] = {}
        if config_path.exists():
            with open(config_path) as f:
                yaml_config = yaml.safe_load(f) or {}

        return cls.model_validate(yaml_config)

    def session_with_overrides(self, **overrides: Any) -> SessionConfig:
        """Return the session config with every non-None override applied."""
        values = self.session.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return SessionConfig(**values)
