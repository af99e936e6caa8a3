"""Pomodoro session cycle with countdown display and audible alerts."""

from pomodoro_cli.focus.alert import AlertError, AlertPlayer
from pomodoro_cli.focus.countdown import CountdownDisplay, format_remaining, remaining_seconds
from pomodoro_cli.focus.pomodoro import (
    ControllerState,
    Phase,
    SessionController,
    SessionState,
    TimerPhase,
    next_break,
)

__all__ = [
    "AlertError",
    "AlertPlayer",
    "CountdownDisplay",
    "format_remaining",
    "remaining_seconds",
    "ControllerState",
    "Phase",
    "SessionController",
    "SessionState",
    "TimerPhase",
    "next_break",
]
