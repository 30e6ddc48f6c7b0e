from os import environ
from pathlib import Path

TOP_LEVEL = Path(__file__).resolve().parent.parent

_CONF_DIR = TOP_LEVEL / "config"
RUST_YML = _CONF_DIR / "rust.yml"

SNIPPETS_EXT = ".code-snippets"

LOGGER_NAME = "vscode_gen"

DEBUG = "VSCODE_GEN_DEBUG" in environ
LOG_LEVEL = environ.get("VSCODE_GEN_LOG_LEVEL", "DEBUG" if DEBUG else "INFO")
