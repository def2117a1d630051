from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from markupsel.compiler import compile_selector
from markupsel.model.level import SelectorLevel


class MarkupMode(Enum):
    """Kind of markup the selectors will be matched against."""

    HTML = "html"  # tag and attribute names are case-insensitive
    XML = "xml"


@dataclass(frozen=True)
class SelectorConfig:
    case_sensitive: bool = False
    markup_mode: MarkupMode = MarkupMode.HTML

    @classmethod
    def for_mode(cls, mode: MarkupMode | str) -> SelectorConfig:
        """Build the config matching a markup mode (XML compares names literally)."""
        if isinstance(mode, str):
            mode = MarkupMode(mode.lower())
        return cls(case_sensitive=mode is MarkupMode.XML, markup_mode=mode)

    def compile(self, selector: str) -> tuple[SelectorLevel, ...]:
        return compile_selector(self.case_sensitive, selector)


def resolve_config(
    mode: MarkupMode | str = MarkupMode.HTML, case_sensitive: bool | None = None
) -> SelectorConfig:
    """Config for *mode*, with an explicit *case_sensitive* taking precedence."""
    config = SelectorConfig.for_mode(mode)
    if case_sensitive is not None:
        config = replace(config, case_sensitive=case_sensitive)
    return config
