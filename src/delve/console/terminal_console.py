"""Console reading from stdin and writing to stdout."""

import sys
from typing import TextIO

from ..interfaces import Console


class TerminalConsole(Console):
    """Plain terminal console.

    Errors are prefixed with `error:`; pages after the first wait for
    ENTER, and `q` stops paging.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_line(self, prompt: str = "") -> str | None:
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n").lstrip(" \v\t")

    def print(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def info(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def error(self, text: str) -> None:
        self.stdout.write(f"error: {text}\n")

    def page(self, pages: list[str]) -> None:
        total = len(pages)
        for number, page in enumerate(pages, start=1):
            self.print(page)
            if number == total:
                break
            answer = self.read_line(f"-- page {number}/{total}, ENTER to continue, q to stop -- ")
            if answer is None or answer.strip().lower() == "q":
                break
