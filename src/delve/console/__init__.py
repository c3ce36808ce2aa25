"""Console implementations."""

from .terminal_console import TerminalConsole

__all__ = ["TerminalConsole"]
