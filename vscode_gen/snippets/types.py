from dataclasses import dataclass
from json import dumps
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    Mapping,
    Optional,
    Sequence,
)

if TYPE_CHECKING:
    from .builder import SnippetBuilder


KeyGen = Callable[[], str]


class SnippetError(Exception):
    ...


class KeyIsRequired(SnippetError):
    def __init__(self) -> None:
        super().__init__("Key is required")


class PrefixIsRequired(SnippetError):
    def __init__(self) -> None:
        super().__init__("Prefix is required")


class BodyIsEmpty(SnippetError):
    def __init__(self) -> None:
        super().__init__("Body cannot be empty")


class IndexOutOfBounds(SnippetError, IndexError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Index '{index}' out of bounds")
        self.index = index


class SerializationFailure(SnippetError):
    ...


class FilesystemFailure(SnippetError):
    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(f"{path} :: {reason}")
        self.path = path


@dataclass(frozen=True)
class Snippet:
    """
    A finalized snippet, `key` is only ever used as the enclosing property name
    """

    key: str
    prefix: str
    body: Sequence[str]
    description: Optional[str] = None
    scope: Optional[str] = None
    is_file_template: Optional[bool] = None
    priority: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))
        if not self.key:
            raise KeyIsRequired()
        elif not self.prefix:
            raise PrefixIsRequired()
        elif not self.body:
            raise BodyIsEmpty()

    @classmethod
    def new(cls, prefix: str, body: Iterable[str]) -> "Snippet":
        from .builder import SnippetBuilder

        return SnippetBuilder.new().set_prefix(prefix).set_body(body).build()

    @staticmethod
    def builder() -> "SnippetBuilder":
        from .builder import SnippetBuilder

        return SnippetBuilder.new()

    def to_dict(self) -> Mapping[str, Any]:
        return encode(self)

    def to_json(self) -> str:
        return jsonify(encode(self))


_OPTIONAL = (
    ("description", "description"),
    ("scope", "scope"),
    ("is_file_template", "isFileTemplate"),
    ("priority", "priority"),
)


def encode(snippet: Snippet) -> Mapping[str, Any]:
    encoded: Dict[str, Any] = {"prefix": snippet.prefix, "body": [*snippet.body]}
    for attr, name in _OPTIONAL:
        if (value := getattr(snippet, attr)) is not None:
            encoded[name] = value
    return encoded


def jsonify(o: Any) -> str:
    try:
        return dumps(
            o, check_circular=False, ensure_ascii=False, allow_nan=False, indent=2
        )
    except (TypeError, ValueError) as e:
        raise SerializationFailure(str(e)) from e
