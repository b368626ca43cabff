"""Selector variants accepted by the element commands."""

from collections.abc import Mapping
from typing import Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict

from ..core.errors import InvalidSelectorError


class SimpleSelector(BaseModel):
    """A single CSS or jQuery expression resolved under the document."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["simple"] = "simple"
    selector: str

    def to_script_arg(self) -> str:
        return self.selector

    def describe(self) -> str:
        return self.selector


class ScopedSelector(BaseModel):
    """A target expression searched for inside the first section match."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["scoped"] = "scoped"
    section: str
    target: str

    def to_script_arg(self) -> List[str]:
        return [self.section, self.target]

    def describe(self) -> str:
        return f"{self.section} >> {self.target}"


Selector = Union[SimpleSelector, ScopedSelector]


def _selector_string(item: Any, pair: Any) -> str:
    """Unwrap a section/element descriptor down to its raw selector string."""
    if isinstance(item, str):
        value = item
    elif isinstance(item, Mapping) and "selector" in item:
        value = item["selector"]
    elif hasattr(item, "selector"):
        value = item.selector
    else:
        raise InvalidSelectorError(pair, "pair items must be strings or carry a 'selector'")

    if not isinstance(value, str) or not value:
        raise InvalidSelectorError(pair, "selector strings must be non-empty")
    return value


def normalize_selector(selector: Any) -> Selector:
    """
    Turn whatever the caller passed into a ``Selector``.

    Page-object sections hand their commands a ``[section, element]`` pair of
    descriptor objects. Those objects reference their parents and cannot be
    serialized into the page, so only their ``selector`` strings are kept.

    Args:
        selector: A string, a ``Selector``, or a two-item sequence of
            strings, mappings or descriptor objects

    Returns:
        SimpleSelector or ScopedSelector

    Raises:
        InvalidSelectorError: If the value has any other shape
    """
    if isinstance(selector, (SimpleSelector, ScopedSelector)):
        return selector

    if isinstance(selector, str):
        if not selector:
            raise InvalidSelectorError(selector, "selector must be non-empty")
        return SimpleSelector(selector=selector)

    if isinstance(selector, (list, tuple)):
        if len(selector) != 2:
            raise InvalidSelectorError(selector, "expected a [section, target] pair")
        section, target = (_selector_string(item, selector) for item in selector)
        return ScopedSelector(section=section, target=target)

    raise InvalidSelectorError(selector, f"unsupported type {type(selector).__name__}")
