from pathlib import PurePath
from typing import Dict, Iterable, Iterator, Mapping, Union

from ..logging import log
from ..shared.fs import LOCAL_FS, Filesystem
from ..shared.types import UTF8
from .builder import SnippetBuilder
from .types import FilesystemFailure, Snippet, encode, jsonify

SnippetLike = Union[Snippet, SnippetBuilder]


def _finalize(snippet: SnippetLike) -> Snippet:
    if isinstance(snippet, SnippetBuilder):
        return snippet.build()
    else:
        return snippet


class SnippetsFile(Mapping[str, Snippet]):
    """
    `key -> Snippet`, serialized as a `.code-snippets` document

    Builders are finalized on insert, an invalid one raises its validation
    error and nothing from that call is inserted.
    """

    def __init__(self, snippets: Iterable[SnippetLike] = ()) -> None:
        self._snippets: Dict[str, Snippet] = {}
        self.add_snippets(snippets)

    @classmethod
    def new(cls, snippets: Iterable[SnippetLike] = ()) -> "SnippetsFile":
        return cls(snippets)

    def __getitem__(self, key: str) -> Snippet:
        return self._snippets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._snippets)

    def __len__(self) -> int:
        return len(self._snippets)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[*self._snippets.values()]!r})"

    def _insert(self, snippet: Snippet) -> None:
        if snippet.key in self._snippets:
            log.debug("%s", f"overwriting snippet :: {snippet.key}")
        self._snippets[snippet.key] = snippet

    def add_snippet(self, snippet: SnippetLike) -> None:
        self._insert(_finalize(snippet))

    def add_snippets(self, snippets: Iterable[SnippetLike]) -> None:
        finalized = tuple(map(_finalize, snippets))
        for snippet in finalized:
            self._insert(snippet)

    def to_json(self) -> str:
        encoded: Mapping[str, Mapping] = {
            key: encode(snippet) for key, snippet in self._snippets.items()
        }
        return jsonify(encoded)

    def write_to(
        self, path: Union[str, PurePath], fs: Filesystem = LOCAL_FS
    ) -> None:
        path = PurePath(path)
        try:
            fs.create_directories(path.parent)
        except OSError as e:
            raise FilesystemFailure(path.parent, reason=str(e)) from e

        json = self.to_json()

        try:
            fs.write_bytes(path, json.encode(UTF8))
        except OSError as e:
            raise FilesystemFailure(path, reason=str(e)) from e
        else:
            log.debug("%s", f"wrote {len(self)} snippets :: {path}")
