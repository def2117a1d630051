"""Selector compiler: a selector string into an ordered chain of SelectorLevels.

A selector is one or more levels, root-most first::

    //div[@id='x']/span[2]      ->  //div[@id='x'] , /span[2]

A selector that does not start with ``/`` searches from any level, so ``x``
compiles exactly like ``//x``. Compilation is a pure function of its inputs:
nothing is cached and the returned chain is immutable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from markupsel.model.level import SelectorLevel
from markupsel.parser.level import build_level
from markupsel.parser.transformer import RawLevel, tokenize

__all__ = ["compile_selector", "format_selector"]

logger = logging.getLogger(__name__)

ANY_LEVEL_PREFIX = "//"


def compile_selector(case_sensitive: bool, selector: str) -> tuple[SelectorLevel, ...]:
    """Compile *selector* into its levels, root-most first.

    Raises :class:`~markupsel.errors.SelectorSyntaxError` naming the whole
    original *selector* on any syntax violation; no partial result is ever
    returned.
    """
    text = selector.strip()
    # Columns reported by the tokenizer are relative to ``text``.
    offset = len(selector) - len(selector.lstrip())
    if not text.startswith("/"):
        text = ANY_LEVEL_PREFIX + text
        offset -= len(ANY_LEVEL_PREFIX)

    raw_levels: list[RawLevel] = tokenize(selector, text, "selector", offset)  # type: ignore[assignment]
    levels = tuple(build_level(case_sensitive, selector, raw) for raw in raw_levels)

    logger.debug(
        "Compiled selector %r (case_sensitive=%s) into %d level(s)",
        selector,
        case_sensitive,
        len(levels),
    )
    return levels


def format_selector(levels: Iterable[SelectorLevel]) -> str:
    """Render a compiled chain back into canonical selector syntax."""
    return "".join(str(level) for level in levels)
