"""SelectorLevel: the compiled form of one path step."""

from __future__ import annotations

from dataclasses import dataclass, field

from markupsel.model.conditions import AttributeCondition, IndexCondition

TEXT_SELECTOR = "text()"
WILDCARD = "*"


@dataclass(frozen=True)
class SelectorLevel:
    """One level of a compiled selector chain.

    Attributes:
        case_sensitive: Whether names are compared literally or lowercased.
        any_level: True for ``//`` (descendant search), False for ``/`` (child).
        is_text_selector: Selects text nodes instead of elements.
        element_name: Tag name to match, or None for any element.
        reference_name: Fragment reference from ``%ref`` shorthand.
        index: Positional filter among sibling matches, if any.
        attribute_conditions: Conditions that must all hold, in source order.
        requires_attributes_in_element: True when at least one condition can
            only hold on an element that has attributes.
    """

    case_sensitive: bool
    any_level: bool
    is_text_selector: bool = False
    element_name: str | None = None
    reference_name: str | None = None
    index: IndexCondition | None = None
    attribute_conditions: tuple[AttributeCondition, ...] = ()
    requires_attributes_in_element: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.is_text_selector and self.element_name is not None:
            raise ValueError("A text selector level cannot also name an element")
        # Accept any iterable but always store an immutable tuple.
        object.__setattr__(self, "attribute_conditions", tuple(self.attribute_conditions))
        object.__setattr__(
            self,
            "requires_attributes_in_element",
            any(c.operator.requires_attribute for c in self.attribute_conditions),
        )

    @property
    def is_wildcard(self) -> bool:
        """True when the level matches any element name."""
        return self.element_name is None and not self.is_text_selector

    def __str__(self) -> str:
        parts = ["//" if self.any_level else "/"]
        if self.element_name is not None:
            parts.append(self.element_name)
        elif self.is_text_selector:
            parts.append(TEXT_SELECTOR)
        else:
            parts.append(WILDCARD)
        if self.reference_name is not None:
            parts.append(f"%{self.reference_name}")
        if self.attribute_conditions:
            parts.append("[" + " and ".join(str(c) for c in self.attribute_conditions) + "]")
        if self.index is not None:
            parts.append(str(self.index))
        return "".join(parts)
