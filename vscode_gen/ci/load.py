from pathlib import PurePath
from typing import Any, Iterator, Sequence, Union

from std2.pickle.decoder import new_decoder
from std2.pickle.types import DecodeError
from yaml import YAMLError, safe_load

from ..shared.types import UTF8
from ..snippets.builder import SnippetBuilder
from ..snippets.file import SnippetsFile
from .types import Catalogue, CatalogueError, Entry

_GLOBAL = "global"

_DECODER = new_decoder[Catalogue](Catalogue)


def _body(body: Union[str, Sequence[str]]) -> Sequence[str]:
    if isinstance(body, str):
        return body.splitlines()
    else:
        return body


def _builders(catalogue: Catalogue) -> Iterator[SnippetBuilder]:
    for entry in catalogue.snippets:
        scope = entry.scope if entry.scope is not None else catalogue.scope
        key = entry.key or f"{scope or _GLOBAL}.{entry.prefix}"
        builder = (
            SnippetBuilder(key=key)
            .set_prefix(entry.prefix)
            .set_body(_body(entry.body))
        )
        if entry.description is not None:
            builder = builder.set_description(entry.description)
        if scope is not None:
            builder = builder.set_scope(scope)
        if entry.is_file_template is not None:
            builder = builder.set_is_file_template(entry.is_file_template)
        if entry.priority is not None:
            if entry.priority < 0:
                raise CatalogueError(f"{key} :: negative priority {entry.priority}")
            builder = builder.set_priority(entry.priority)
        yield builder


def parse(yml: Any) -> SnippetsFile:
    try:
        catalogue: Catalogue = _DECODER(yml)
    except DecodeError as e:
        raise CatalogueError(e) from e
    else:
        return SnippetsFile(_builders(catalogue))


def load(path: PurePath) -> SnippetsFile:
    try:
        with open(path, encoding=UTF8) as fd:
            yml = safe_load(fd)
    except (OSError, YAMLError) as e:
        raise CatalogueError(f"{path} :: {e}") from e
    else:
        return parse(yml)
