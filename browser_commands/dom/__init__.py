"""DOM helpers for browser commands."""

from .scripts import RESOLVE_AND_CLICK_SCRIPT
from .selectors import ScopedSelector, Selector, SimpleSelector, normalize_selector

__all__ = [
    "RESOLVE_AND_CLICK_SCRIPT",
    "ScopedSelector",
    "Selector",
    "SimpleSelector",
    "normalize_selector",
]
