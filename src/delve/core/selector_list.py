"""Ordered, 1-indexed selector collections and the Gopher menu codec."""

import re
from typing import Iterator

from .selector import Selector

LINE_BREAK = re.compile(r"\r?\n")
TERMINATOR = "."


class SelectorList:
    """An ordered list of selectors with 1-based, insertion-assigned indices.

    `append` continues after the tail's index, `prepend` numbers the new
    head one above the old head, so the history list counts downwards.
    """

    def __init__(self, selectors: list[Selector] | None = None):
        self._items: list[Selector] = []
        for selector in selectors or []:
            self.append(selector)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Selector]:
        return iter(self._items)

    def __getitem__(self, position: int) -> Selector:
        return self._items[position]

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def head(self) -> Selector | None:
        """The first selector, or None if the list is empty."""
        return self._items[0] if self._items else None

    def append(self, selector: Selector) -> Selector:
        """Add a selector at the end and number it after the current tail."""
        selector.index = self._items[-1].index + 1 if self._items else 1
        self._items.append(selector)
        return selector

    def prepend(self, selector: Selector) -> Selector:
        """Add a selector at the front and number it above the current head."""
        selector.index = self._items[0].index + 1 if self._items else 1
        self._items.insert(0, selector)
        return selector

    def pop_head(self) -> Selector | None:
        """Remove and return the head selector."""
        if not self._items:
            return None
        return self._items.pop(0)

    def find(self, index: int | None) -> Selector | None:
        """
        Get the selector carrying the given 1-based index.

        Returns None for a missing or non-positive index.
        """
        if index is None or index <= 0:
            return None
        for selector in self._items:
            if selector.index == index:
                return selector
        return None

    def filter(self, text: str | None) -> list[Selector]:
        """Selectors whose name or path contains `text` (case-insensitive)."""
        if not text:
            return list(self._items)
        needle = text.lower()
        return [
            s for s in self._items
            if needle in s.name.lower() or needle in s.path.lower()
        ]


def decode_menu(data: bytes) -> SelectorList:
    """
    Decode a Gopher menu response.

    Each line is `<type><name>\\t<path>\\t<host>\\t<port>`. Decoding stops at
    an empty line or a line holding only `.`; missing fields become empty
    strings, so a malformed line never fails the whole menu.

    Args:
        data: Raw response bytes.

    Returns:
        SelectorList numbered 1..N in response order.
    """
    menu = SelectorList()
    text = data.decode("utf-8", errors="replace")

    for line in LINE_BREAK.split(text):
        if not line or line == TERMINATOR:
            break
        fields = line[1:].split("\t")
        fields += [""] * (4 - len(fields))
        name, path, host, port = fields[:4]
        menu.append(Selector(type=line[0], name=name, path=path, host=host, port=port))

    return menu


def encode_menu(selectors) -> bytes:
    """Encode selectors as a Gopher menu body, terminator included."""
    lines = [selector.to_menu_line() for selector in selectors]
    lines.append(TERMINATOR)
    return ("\r\n".join(lines) + "\r\n").encode("utf-8")
