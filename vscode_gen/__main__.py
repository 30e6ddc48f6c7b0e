from argparse import ArgumentParser, Namespace
from contextlib import nullcontext
from pathlib import Path
from sys import exit

from .ci.main import compile_catalogue, show
from .consts import SNIPPETS_EXT
from .logging import log, setup
from .paths import user_snippets_dir
from .snippets.types import SnippetError


def _parse_args() -> Namespace:
    parser = ArgumentParser(prog="vscode_gen")
    parser.add_argument("--log-level")

    sub_parsers = parser.add_subparsers(dest="command", required=True)

    with nullcontext(sub_parsers.add_parser("compile")) as p:
        p.add_argument("src", type=Path)
        dest = p.add_mutually_exclusive_group()
        dest.add_argument("-o", "--output", type=Path)
        dest.add_argument("--user", action="store_true", default=False)

    with nullcontext(sub_parsers.add_parser("show")) as p:
        p.add_argument("src", type=Path)

    return parser.parse_args()


def _dest(args: Namespace) -> Path:
    src: Path = args.src
    if args.output:
        return args.output
    elif args.user:
        return user_snippets_dir() / src.with_suffix(SNIPPETS_EXT).name
    else:
        return src.with_suffix(SNIPPETS_EXT)


def main() -> int:
    args = _parse_args()
    if args.log_level:
        setup(args.log_level)
    else:
        setup()

    try:
        if args.command == "compile":
            compile_catalogue(args.src, dest=_dest(args))
        elif args.command == "show":
            print(show(args.src))
        else:
            assert False
    except SnippetError as e:
        log.error("%s", e)
        return 1
    else:
        return 0


if __name__ == "__main__":
    exit(main())
