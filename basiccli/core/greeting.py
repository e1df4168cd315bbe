"""Greeting construction for the hello command."""

from __future__ import annotations

from datetime import datetime

APP_NAME = "BasicCli"


def time_of_day_greeting(hour: int) -> str:
    """Map an hour (0-23) to a salutation."""
    if 0 <= hour <= 11:
        return "Good morning"
    if 12 <= hour <= 17:
        return "Good afternoon"
    return "Good evening"


def build_greeting(name: str, now: datetime | None = None) -> str:
    """Build the full greeting line for ``name`` at local time ``now``."""
    current = now or datetime.now()  # noqa: DTZ005
    return f"{time_of_day_greeting(current.hour)}, {name}! Welcome to {APP_NAME}"


def render_greetings(greeting: str, *, repeat: int = 1, uppercase: bool = False) -> list[str]:
    """Return the lines the hello command prints."""
    line = greeting.upper() if uppercase else greeting
    return [line] * max(repeat, 0)
