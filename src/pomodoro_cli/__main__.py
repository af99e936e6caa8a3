"""Allow running as `python -m pomodoro_cli`."""

from pomodoro_cli.cli.main import app

if __name__ == "__main__":
    app()
