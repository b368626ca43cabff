"""Utilities for browser commands."""

from .logger import CommandLogger, configure_logging, get_logger

__all__ = ["CommandLogger", "configure_logging", "get_logger"]
