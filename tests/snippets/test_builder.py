from re import fullmatch
from typing import List
from unittest import TestCase

from vscode_gen.snippets.builder import SnippetBuilder, gen_key
from vscode_gen.snippets.types import (
    BodyIsEmpty,
    IndexOutOfBounds,
    KeyIsRequired,
    PrefixIsRequired,
    Snippet,
)

_KEY = "snippet_0_abcdef"


def _builder() -> SnippetBuilder:
    return SnippetBuilder.new(key_gen=lambda: _KEY)


class GenKey(TestCase):
    def test_1(self) -> None:
        key = gen_key()
        self.assertTrue(fullmatch(r"snippet_\d+_[a-z]{6}", key), key)

    def test_2(self) -> None:
        keys = {gen_key() for _ in range(100)}
        self.assertEqual(len(keys), 100)

    def test_3(self) -> None:
        lhs, rhs = SnippetBuilder(), SnippetBuilder.new()
        self.assertNotEqual(lhs.key, rhs.key)
        self.assertTrue(lhs.key.startswith("snippet_"))


class Build(TestCase):
    def test_1(self) -> None:
        snippet = (
            _builder()
            .set_prefix("fn")
            .set_body(("fn ${1:name}(${2:args}) {", "    ${0}", "}"))
            .set_description("Create a new function")
            .set_scope("rust")
            .set_is_file_template(False)
            .set_priority(3)
            .build()
        )
        expected = Snippet(
            key=_KEY,
            prefix="fn",
            body=("fn ${1:name}(${2:args}) {", "    ${0}", "}"),
            description="Create a new function",
            scope="rust",
            is_file_template=False,
            priority=3,
        )
        self.assertEqual(snippet, expected)

    def test_2(self) -> None:
        snippet = (
            _builder()
            .set_prefix("a")
            .set_prefix("b")
            .set_description("x")
            .set_description("y")
            .set_key("k1")
            .set_key("k2")
            .add_line("1")
            .build()
        )
        self.assertEqual(
            (snippet.key, snippet.prefix, snippet.description), ("k2", "b", "y")
        )

    def test_3(self) -> None:
        snippet = _builder().set_prefix("p").add_line("x").build()
        self.assertIsNone(snippet.description)
        self.assertIsNone(snippet.scope)
        self.assertIsNone(snippet.is_file_template)
        self.assertIsNone(snippet.priority)

    def test_4(self) -> None:
        base = _builder().set_prefix("p").add_line("1")
        branch = base.add_line("2")
        self.assertEqual(base.body, ("1",))
        self.assertEqual(branch.body, ("1", "2"))

    def test_5(self) -> None:
        snippet = Snippet.new("fn main", ("fn main() {", "}"))
        self.assertEqual(snippet.prefix, "fn main")
        self.assertEqual(snippet.body, ("fn main() {", "}"))
        self.assertTrue(snippet.key.startswith("snippet_"))

    def test_6(self) -> None:
        builder = Snippet.builder()
        self.assertIsInstance(builder, SnippetBuilder)
        self.assertEqual((builder.prefix, builder.body), ("", ()))


class Validate(TestCase):
    def test_1(self) -> None:
        with self.assertRaises(PrefixIsRequired):
            _builder().add_line("x").build()

    def test_2(self) -> None:
        with self.assertRaises(BodyIsEmpty):
            _builder().set_prefix("p").build()

    def test_3(self) -> None:
        with self.assertRaises(KeyIsRequired):
            _builder().set_key("").set_prefix("p").add_line("x").build()

    def test_4(self) -> None:
        with self.assertRaises(KeyIsRequired):
            _builder().set_key("").validate()

    def test_5(self) -> None:
        with self.assertRaises(PrefixIsRequired):
            _builder().validate()

    def test_6(self) -> None:
        builder = _builder().set_prefix("p").add_line("x")
        self.assertIsNone(builder.validate())
        self.assertEqual(builder.build().body, ("x",))

    def test_7(self) -> None:
        with self.assertRaises(BodyIsEmpty):
            _builder().set_prefix("p").add_line("x").set_body(()).build()

    def test_8(self) -> None:
        with self.assertRaises(PrefixIsRequired):
            Snippet.new("", ("x",))

    def test_9(self) -> None:
        with self.assertRaises(KeyIsRequired):
            Snippet(key="", prefix="p", body=("x",))
        with self.assertRaises(PrefixIsRequired):
            Snippet(key="k", prefix="", body=("x",))
        with self.assertRaises(BodyIsEmpty):
            Snippet(key="k", prefix="p", body=())


class Frozen(TestCase):
    def test_1(self) -> None:
        lines = ["a"]
        snippet = SnippetBuilder(key="k", prefix="p", body=lines).build()
        lines.append("b")
        self.assertEqual(snippet.body, ("a",))

    def test_2(self) -> None:
        lines = ["a"]
        snippet = Snippet(key="k", prefix="p", body=lines)
        lines.append("b")
        self.assertEqual(snippet.body, ("a",))
        self.assertIsInstance(snippet.body, tuple)


class Body(TestCase):
    def test_1(self) -> None:
        builder = _builder().add_line("a").add_lines(("b", "c")).add_lines(iter(("d",)))
        self.assertEqual(builder.body, ("a", "b", "c", "d"))

    def test_2(self) -> None:
        builder = _builder().add_line("a").set_body(["x", "y"])
        self.assertEqual(builder.body, ("x", "y"))

    def test_3(self) -> None:
        builder = _builder().set_body(("a", "b", "c")).set_line(1, "B")
        self.assertEqual(builder.body, ("a", "B", "c"))

    def test_4(self) -> None:
        builder = _builder().set_body(("a", "b"))
        for idx in (2, 3, 100):
            with self.assertRaises(IndexOutOfBounds) as ctx:
                builder.set_line(idx, "x")
            self.assertEqual(ctx.exception.index, idx)

    def test_5(self) -> None:
        with self.assertRaises(IndexOutOfBounds) as ctx:
            _builder().set_line(0, "x")
        self.assertEqual(ctx.exception.index, 0)

    def test_6(self) -> None:
        builder = _builder().set_body(("print!(1);", "print!(2);"))
        mapped = builder.map_line(1, lambda line: line.replace("print!", "println!"))
        self.assertEqual(mapped.body, ("print!(1);", "println!(2);"))
        self.assertEqual(builder.body, ("print!(1);", "print!(2);"))

    def test_7(self) -> None:
        builder = _builder().set_body(("a",))
        for idx in (1, 5):
            with self.assertRaises(IndexOutOfBounds) as ctx:
                builder.map_line(idx, str.upper)
            self.assertEqual(ctx.exception.index, idx)

    def test_8(self) -> None:
        def insert(lines: List[str]) -> None:
            lines.insert(0, "// Hello world")
            lines.reverse()

        builder = _builder().add_line("print!(0);").map_body(insert)
        self.assertEqual(builder.body, ("print!(0);", "// Hello world"))

    def test_9(self) -> None:
        builder = _builder().map_body(lambda lines: None)
        self.assertEqual(builder.body, ())

    def test_10(self) -> None:
        with self.assertRaises(IndexError):
            _builder().add_line("a").set_line(-1, "b")
