from markupsel.parser.level import build_level, parse_level
from markupsel.parser.modifiers import (
    build_modifiers,
    parse_attributes,
    parse_index,
    parse_modifiers,
)
from markupsel.parser.transformer import RawLevel, tokenize

__all__ = [
    "RawLevel",
    "build_level",
    "build_modifiers",
    "parse_attributes",
    "parse_index",
    "parse_level",
    "parse_modifiers",
    "tokenize",
]
