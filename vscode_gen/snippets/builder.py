from dataclasses import dataclass, field, replace
from random import choice
from string import ascii_lowercase
from time import time_ns
from typing import Callable, Iterable, List, Optional, Sequence

from .types import (
    BodyIsEmpty,
    IndexOutOfBounds,
    KeyGen,
    KeyIsRequired,
    PrefixIsRequired,
    Snippet,
)

_SUFFIX_LEN = 6


def gen_key() -> str:
    """
    snippet_<unix ms>_<6 lowercase letters>
    """

    millis = time_ns() // 1_000_000
    suffix = "".join(choice(ascii_lowercase) for _ in range(_SUFFIX_LEN))
    return f"snippet_{millis}_{suffix}"


@dataclass(frozen=True)
class SnippetBuilder:
    """
    Staging value for a `Snippet`

    Every setter returns a new builder, so partial chains can be kept around
    and branched from.

    ```python
    snippet = (
        SnippetBuilder.new()
        .set_prefix("fn")
        .add_line("fn ${1:name}() {")
        .add_line("    $0")
        .add_line("}")
        .set_scope("rust")
        .build()
    )
    ```
    """

    key: str = field(default_factory=gen_key)
    prefix: str = ""
    body: Sequence[str] = ()
    description: Optional[str] = None
    scope: Optional[str] = None
    is_file_template: Optional[bool] = None
    priority: Optional[int] = None

    @classmethod
    def new(cls, key_gen: KeyGen = gen_key) -> "SnippetBuilder":
        return cls(key=key_gen())

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.body):
            raise IndexOutOfBounds(index)

    def set_key(self, key: str) -> "SnippetBuilder":
        return replace(self, key=key)

    def set_prefix(self, prefix: str) -> "SnippetBuilder":
        return replace(self, prefix=prefix)

    def set_description(self, description: str) -> "SnippetBuilder":
        return replace(self, description=description)

    def set_scope(self, scope: str) -> "SnippetBuilder":
        return replace(self, scope=scope)

    def set_is_file_template(self, is_file_template: bool) -> "SnippetBuilder":
        return replace(self, is_file_template=is_file_template)

    def set_priority(self, priority: int) -> "SnippetBuilder":
        return replace(self, priority=priority)

    def set_body(self, lines: Iterable[str]) -> "SnippetBuilder":
        return replace(self, body=tuple(lines))

    def add_line(self, line: str) -> "SnippetBuilder":
        return replace(self, body=(*self.body, line))

    def add_lines(self, lines: Iterable[str]) -> "SnippetBuilder":
        return replace(self, body=(*self.body, *lines))

    def set_line(self, index: int, line: str) -> "SnippetBuilder":
        self._check(index)
        body = [*self.body]
        body[index] = line
        return replace(self, body=tuple(body))

    def map_body(self, f: Callable[[List[str]], None]) -> "SnippetBuilder":
        """
        `f` edits a copy of the body in place
        """

        body = [*self.body]
        f(body)
        return replace(self, body=tuple(body))

    def map_line(self, index: int, f: Callable[[str], str]) -> "SnippetBuilder":
        self._check(index)
        body = [*self.body]
        body[index] = f(body[index])
        return replace(self, body=tuple(body))

    def validate(self) -> None:
        if not self.key:
            raise KeyIsRequired()
        elif not self.prefix:
            raise PrefixIsRequired()
        elif not self.body:
            raise BodyIsEmpty()

    def build(self) -> Snippet:
        self.validate()
        return Snippet(
            key=self.key,
            prefix=self.prefix,
            body=tuple(self.body),
            description=self.description,
            scope=self.scope,
            is_file_template=self.is_file_template,
            priority=self.priority,
        )
