"""Pomodoro session cycle controller with configurable durations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

from rich.console import Console

from pomodoro_cli.core.config import SessionConfig

logger = logging.getLogger(__name__)

CONTINUE_PROMPT = "Press Enter to continue or Ctrl+C to exit..."


class TimerPhase(Enum):
    """Kind of timed interval."""
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]

    @property
    def completion_message(self) -> str:
        return _COMPLETION_MESSAGES[self]


_PHASE_LABELS = {
    TimerPhase.WORK: "Work",
    TimerPhase.SHORT_BREAK: "Break",
    TimerPhase.LONG_BREAK: "Long Break",
}

_COMPLETION_MESSAGES = {
    TimerPhase.WORK: "Work session completed! Time for a break.",
    TimerPhase.SHORT_BREAK: "Break completed! Back to work.",
    TimerPhase.LONG_BREAK: "Long break completed! Ready for a new set of cycles.",
}


class ControllerState(Enum):
    """Position of the controller in the session cycle.

    Always visited in the order
    WORK -> DECIDE_BREAK_KIND -> (BREAK | LONG_BREAK) -> AWAIT_CONTINUE -> WORK.
    """
    WORK = "work"
    DECIDE_BREAK_KIND = "decide_break_kind"
    BREAK = "break"
    LONG_BREAK = "long_break"
    AWAIT_CONTINUE = "await_continue"


@dataclass(frozen=True)
class Phase:
    """A single timed interval."""
    kind: TimerPhase
    duration_seconds: int

    @property
    def label(self) -> str:
        return self.kind.label


@dataclass
class SessionState:
    """Snapshot of the controller's counters."""
    state: ControllerState = ControllerState.WORK
    cycle_count: int = 1
    pomodoros_completed: int = 0
    breaks_taken: int = 0
    long_breaks_taken: int = 0
    total_work_seconds: int = 0
    total_break_seconds: int = 0


class Display(Protocol):
    """Shows the countdown for a phase."""

    def run(self, label: str, total_seconds: float) -> None: ...


class Alert(Protocol):
    """Plays the end-of-phase alert."""

    def play(self) -> None: ...


def next_break(cycle_count: int, cycles: int) -> TimerPhase:
    """Decide which break follows a work phase."""
    if cycle_count >= cycles:
        return TimerPhase.LONG_BREAK
    return TimerPhase.SHORT_BREAK


class SessionController:
    """Runs work and break phases forever, with a long break every `cycles`.

    Each phase shows a countdown, prints its completion message and then
    plays the alert. Between a break and the next work phase the controller
    waits for a line on standard input. Errors from the display, the alert
    or the confirmation read are never caught here.

    Usage:
        controller = SessionController(config, CountdownDisplay(), AlertPlayer())
        controller.run()  # returns only by exception (e.g. KeyboardInterrupt)
    """

    def __init__(
        self,
        config: SessionConfig,
        display: Display,
        alert: Alert,
        confirm: Callable[[], object] | None = None,
        console: Console | None = None,
    ):
        self.config = config
        self.display = display
        self.alert = alert
        self.console = console or Console()
        self.confirm = confirm or self._read_confirmation
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        """Get current controller state (read-only copy)."""
        return SessionState(**vars(self._state))

    def run(self) -> None:
        """Step through the cycle indefinitely."""
        logger.info(
            f"Session started: work={self.config.work_minutes}m "
            f"break={self.config.break_minutes}m "
            f"long_break={self.config.long_break_minutes}m cycles={self.config.cycles}"
        )
        while True:
            self.step()

    def step(self) -> ControllerState:
        """Perform one transition and return the new state."""
        current = self._state.state

        if current == ControllerState.WORK:
            self._run_phase(Phase(TimerPhase.WORK, self.config.work_seconds))
            self._state.pomodoros_completed += 1
            self._state.state = ControllerState.DECIDE_BREAK_KIND

        elif current == ControllerState.DECIDE_BREAK_KIND:
            if next_break(self._state.cycle_count, self.config.cycles) == TimerPhase.LONG_BREAK:
                self._state.state = ControllerState.LONG_BREAK
            else:
                self._state.state = ControllerState.BREAK

        elif current == ControllerState.BREAK:
            self._run_phase(Phase(TimerPhase.SHORT_BREAK, self.config.break_seconds))
            self._state.breaks_taken += 1
            self._state.cycle_count += 1
            self._state.state = ControllerState.AWAIT_CONTINUE

        elif current == ControllerState.LONG_BREAK:
            self._run_phase(Phase(TimerPhase.LONG_BREAK, self.config.long_break_seconds))
            self._state.long_breaks_taken += 1
            self._state.cycle_count = 1
            self._state.state = ControllerState.AWAIT_CONTINUE

        else:
            self.console.print()
            self.confirm()
            self._state.state = ControllerState.WORK

        logger.debug(f"Transition {current.value} -> {self._state.state.value}")
        return self._state.state

    def _run_phase(self, phase: Phase) -> None:
        """Count down, announce completion, then alert."""
        logger.info(f"Starting {phase.kind.value} phase ({phase.duration_seconds}s)")

        self.display.run(phase.label, phase.duration_seconds)

        if phase.kind == TimerPhase.WORK:
            self._state.total_work_seconds += phase.duration_seconds
        else:
            self._state.total_break_seconds += phase.duration_seconds

        self.console.print(f"\n[green]{phase.kind.completion_message}[/green]")
        self.alert.play()

    def _read_confirmation(self) -> str:
        """Block until a line (possibly empty) is read from standard input."""
        return self.console.input(CONTINUE_PROMPT)

    def get_summary(self) -> dict:
        """Get a summary of the session so far."""
        return {
            "state": self._state.state.value,
            "cycle_count": self._state.cycle_count,
            "pomodoros_completed": self._state.pomodoros_completed,
            "breaks_taken": self._state.breaks_taken,
            "long_breaks_taken": self._state.long_breaks_taken,
            "total_work_minutes": round(self._state.total_work_seconds / 60, 1),
            "total_break_minutes": round(self._state.total_break_seconds / 60, 1),
        }
