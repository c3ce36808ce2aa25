"""Pytest configuration and fixtures."""

import pytest

from delve.errors import GopherConnectionError
from delve.interfaces import Console, Transport


class FakeConsole(Console):
    """Console that replays scripted input and records output."""

    def __init__(self, inputs=None):
        self.inputs = list(inputs or [])
        self.prompts = []
        self.output = []
        self.infos = []
        self.errors = []
        self.pages = []

    def read_line(self, prompt: str = "") -> str | None:
        self.prompts.append(prompt)
        if not self.inputs:
            return None
        return self.inputs.pop(0)

    def print(self, text: str) -> None:
        self.output.append(text)

    def info(self, text: str) -> None:
        self.infos.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)

    def page(self, pages: list[str]) -> None:
        self.pages.append(list(pages))

    def text(self) -> str:
        """All regular output joined by newlines."""
        return "\n".join(self.output)


class StubTransport(Transport):
    """Transport serving canned responses keyed by (host, port, path)."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.requests = []
        self.refuse = False

    def fetch(self, selector, query=None) -> bytes:
        self.requests.append((selector.host, selector.port, selector.path, query))
        if self.refuse:
            raise GopherConnectionError(selector.host, selector.port)
        key = (selector.host, selector.port, selector.path)
        if key not in self.responses:
            raise GopherConnectionError(selector.host, selector.port)
        return self.responses[key]


@pytest.fixture
def console():
    """A fake console with no scripted input."""
    return FakeConsole()


@pytest.fixture
def demo_menu():
    """Response body of a small menu."""
    return (
        b"iWelcome to the demo\t\terror.host\t1\r\n"
        b"1Demo Menu\t/demo\texample.org\t70\r\n"
        b"0About\t/about.txt\texample.org\t70\r\n"
        b"7Search\t/search\texample.org\t70\r\n"
        b"9Archive\t/files/archive.zip\texample.org\t70\r\n"
        b"gPicture\t/pics/cat.gif\texample.org\t70\r\n"
        b"3Oops\t\terror.host\t1\r\n"
        b".\r\n"
    )


@pytest.fixture
def transport(demo_menu):
    """A stub transport serving a small site on example.org."""
    return StubTransport({
        ("example.org", "70", "/"): demo_menu,
        ("example.org", "70", "/demo"): b"1Deeper\t/demo/deeper\texample.org\t70\r\n.\r\n",
        ("example.org", "70", "/demo/deeper"): b"iNothing here\t\terror.host\t1\r\n.\r\n",
        ("example.org", "70", "/search"): b"0Result\t/result.txt\texample.org\t70\r\n.\r\n",
        ("example.org", "70", "/about.txt"): b"About this server.\r\nSecond line.\r\n",
        ("example.org", "70", "/files/archive.zip"): b"PK\x03\x04binary",
        ("example.org", "70", "/pics/cat.gif"): b"GIF89a",
    })
