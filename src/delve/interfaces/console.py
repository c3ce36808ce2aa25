"""Abstract interface for user interaction."""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract interface for reading commands and showing output."""

    @abstractmethod
    def read_line(self, prompt: str = "") -> str | None:
        """Show `prompt` and read one line, or None at end of input."""
        pass

    @abstractmethod
    def print(self, text: str) -> None:
        """Show regular output."""
        pass

    @abstractmethod
    def info(self, text: str) -> None:
        """Show an informational message."""
        pass

    @abstractmethod
    def error(self, text: str) -> None:
        """Show an error message."""
        pass

    @abstractmethod
    def page(self, pages: list[str]) -> None:
        """Show a document page by page."""
        pass
