"""Core configuration components."""

from pomodoro_cli.core.config import Config, DisplayConfig, SessionConfig

__all__ = ["Config", "DisplayConfig", "SessionConfig"]
