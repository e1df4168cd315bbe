"""Version metadata and its boxed text rendering."""

from __future__ import annotations

import platform
import sys

from basiccli import __version__
from basiccli.core.greeting import APP_NAME

BUILD_DATE = "2025-01-15"
DESCRIPTION = "Polyglot Reference Implementation"
BOX_INNER_WIDTH = 60
VALUE_WIDTH = 44


def build_version_info() -> dict[str, str]:
    """Collect version, build and runtime details."""
    return {
        "name": APP_NAME,
        "version": __version__,
        "build_date": BUILD_DATE,
        "python_version": platform.python_version(),
        "platform": sys.platform,
        "description": DESCRIPTION,
    }


def render_version_box(info: dict[str, str]) -> str:
    """Render version details inside a box-drawing frame."""
    top = "╔" + "═" * BOX_INNER_WIDTH + "╗"
    divider = "╠" + "═" * BOX_INNER_WIDTH + "╣"
    bottom = "╚" + "═" * BOX_INNER_WIDTH + "╝"

    def row(label: str, value: str) -> str:
        return f"║ {label:<14}{value:<{VALUE_WIDTH}} ║"

    return "\n".join(
        [
            top,
            f"║{info['name'].center(BOX_INNER_WIDTH)}║",
            divider,
            row("Version:", info["version"]),
            row("Build Date:", info["build_date"]),
            row("Python:", info["python_version"]),
            row("Platform:", info["platform"]),
            divider,
            f"║ {info['description'].center(BOX_INNER_WIDTH - 2)} ║",
            bottom,
        ]
    )
