from __future__ import annotations

from rich.console import Console
from rich.logging import RichHandler
import logging

ROOT_LOGGER = "powerstate"

_console = Console()
# Logs go to stderr so stdout carries only command output.
_log_console = Console(stderr=True)

def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = RichHandler(console=_log_console, show_time=True, show_level=True, show_path=False)
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
    return root

def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    # Children propagate to the package root, which owns the only handler.
    root = _root()
    if name == ROOT_LOGGER:
        return root
    return logging.getLogger(name)

def set_level(level: int) -> None:
    _root().setLevel(level)

def console() -> Console:
    return _console
