"""Custom commands shipped with browser commands."""

from .base import BaseCommand
from .jquery_click import JqueryClick
from .wait_for_title import WaitForTitle

DEFAULT_COMMANDS = (JqueryClick, WaitForTitle)

__all__ = ["BaseCommand", "DEFAULT_COMMANDS", "JqueryClick", "WaitForTitle"]
