from os import environ
from pathlib import Path

from std2.platform import OS, os

_USER_SNIPPETS = Path("Code") / "User" / "snippets"


def user_snippets_dir() -> Path:
    if os is OS.windows:
        base = Path(environ["APPDATA"])
    elif os is OS.macos:
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"

    return base / _USER_SNIPPETS
