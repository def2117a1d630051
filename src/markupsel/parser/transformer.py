"""Lark grammar and Transformer that split a selector into raw level parts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedEOF, UnexpectedInput, UnexpectedToken

from markupsel.errors import SelectorSyntaxError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

SYNTAX_HINT = "(/|//)(name)([@attrib='value' (and @attrib2='value')*])*([index])?"

# Built once; parsing keeps no state on the Lark instance between calls.
_PARSER = Lark(
    GRAMMAR_PATH.read_text(),
    parser="lalr",
    start=["selector", "level", "modifiers"],
)


@dataclass(frozen=True)
class RawLevel:
    """Uninterpreted text of one level: root slashes, name and bracket bodies."""

    root: str
    name: str = ""
    groups: tuple[str, ...] = ()


class LevelTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into RawLevel objects."""

    def group(self, items: list[Token]) -> str:
        return str(items[0])

    def modifiers(self, items: list[str]) -> tuple[str, ...]:
        return tuple(items)

    def level(self, items: list[object]) -> RawLevel:
        root = ""
        name = ""
        groups: tuple[str, ...] = ()
        for item in items:
            if isinstance(item, Token) and item.type == "ROOT":
                root = str(item)
            elif isinstance(item, Token) and item.type == "NAME":
                name = str(item)
            elif isinstance(item, tuple):
                groups = item
        return RawLevel(root=root, name=name, groups=groups)

    def selector(self, items: list[RawLevel]) -> list[RawLevel]:
        return list(items)


def tokenize(selector: str, text: str, start: str, offset: int = 0) -> object:
    """Parse *text* from the grammar rule *start* and transform the tree.

    *selector* is the original string reported in errors. *offset* is added to
    lark's column to point into *selector* instead of *text* (negative when a
    prefix was added to *text*).
    """
    try:
        tree = _PARSER.parse(text, start=start)
    except UnexpectedInput as exc:
        reason, column = _describe(exc, text)
        if column is not None:
            column = max(column + offset, 1)
        raise SelectorSyntaxError(selector, reason, column=column) from exc
    return LevelTransformer().transform(tree)


def _describe(exc: UnexpectedInput, text: str) -> tuple[str, int | None]:
    at_end = isinstance(exc, UnexpectedEOF) or (
        isinstance(exc, UnexpectedToken) and exc.token.type == "$END"
    )
    pos = getattr(exc, "pos_in_stream", None)
    if at_end or not isinstance(pos, int) or not 0 <= pos < len(text):
        return f"unexpected end of selector, expected {SYNTAX_HINT}", None
    return (
        f"unexpected {text[pos]!r}, expected {SYNTAX_HINT}",
        pos + 1,
    )
