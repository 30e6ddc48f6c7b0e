from difflib import unified_diff
from pathlib import Path

from ..consts import DEBUG
from ..logging import log
from ..shared.types import UTF8
from .load import load


def show(src: Path) -> str:
    return load(src).to_json()


def compile_catalogue(src: Path, dest: Path) -> None:
    snippets = load(src)

    if DEBUG and dest.exists():
        j_snippets = snippets.to_json()
        for line in unified_diff(
            dest.read_text(encoding=UTF8).splitlines(), j_snippets.splitlines()
        ):
            log.debug("%s", line)

    snippets.write_to(dest)
    log.info("%s", f"{src} -> {dest} :: {len(snippets)} snippets")
