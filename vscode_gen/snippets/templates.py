from typing import Sequence, Tuple

from .builder import SnippetBuilder

_RUST = "rust"


def text(prefix: str, content: str) -> SnippetBuilder:
    return SnippetBuilder.new().set_prefix(prefix).set_body((content,))


def todo_comment(prefix: str, name: str, comment: str = "//") -> SnippetBuilder:
    """
    TODO, NOTE, FIXME, etc.
    """

    line = f"{comment} {name}: ${{1:...}}"
    return SnippetBuilder.new().set_prefix(prefix).set_body((line,))


def fn_alias(prefix: str, fn_name: str) -> SnippetBuilder:
    return SnippetBuilder.new().set_prefix(prefix).set_body((f"{fn_name}()",))


def rust_text(prefix: str, content: str) -> SnippetBuilder:
    return text(prefix, content=content).set_scope(_RUST)


def rust_todo_comment(prefix: str, name: str, comment: str = "//") -> SnippetBuilder:
    return todo_comment(prefix, name=name, comment=comment).set_scope(_RUST)


def rust_fn_alias(prefix: str, fn_name: str) -> SnippetBuilder:
    return fn_alias(prefix, fn_name=fn_name).set_scope(_RUST)


def rust_macro_alias(
    prefix: str, name: str, braces: Tuple[str, str] = ("(", ")")
) -> SnippetBuilder:
    lhs, rhs = braces
    line = f'{name}!{lhs}"${{1:args}}"{rhs}'
    return SnippetBuilder.new().set_prefix(prefix).set_body((line,)).set_scope(_RUST)


def rust_attr(prefix: str, name: str, args: Sequence[str]) -> SnippetBuilder:
    choices = "|".join(args)
    line = f"#[{name}(${{1:{choices}}})]"
    return SnippetBuilder.new().set_prefix(prefix).set_body((line,)).set_scope(_RUST)
