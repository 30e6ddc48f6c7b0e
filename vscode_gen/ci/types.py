from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..snippets.types import SnippetError


class CatalogueError(SnippetError):
    ...


@dataclass(frozen=True)
class Entry:
    prefix: str
    body: Union[str, Sequence[str]]
    key: Optional[str] = None
    description: Optional[str] = None
    scope: Optional[str] = None
    is_file_template: Optional[bool] = None
    priority: Optional[int] = None


@dataclass(frozen=True)
class Catalogue:
    snippets: Sequence[Entry]
    scope: Optional[str] = None
