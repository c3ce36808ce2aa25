"""Selector model: one addressable Gopher resource."""

from dataclasses import dataclass, field, replace

DEFAULT_PORT = "70"
URL_PREFIX = "gopher://"

TEXT = "0"
MENU = "1"
ERROR = "3"
SEARCH = "7"
INFO = "i"
BINARY_TYPES = frozenset("4569")


@dataclass
class Selector:
    """A typed reference to a Gopher resource.

    Every field is a string; the empty string means "no value".
    `index` is the 1-based position inside the owning list and does not
    take part in equality.
    """

    type: str = MENU
    name: str = ""
    host: str = ""
    port: str = DEFAULT_PORT
    path: str = ""
    index: int = field(default=0, compare=False)

    def copy(self) -> "Selector":
        """Return a detached copy, as stored on the history."""
        return replace(self, index=1)

    def to_menu_line(self) -> str:
        """Render as one line of a Gopher menu (without line terminator)."""
        return f"{self.type}{self.name}\t{self.path}\t{self.host}\t{self.port}"


def print_selector(selector: Selector | None, with_prefix: bool = True) -> str:
    """Render a selector as `[gopher://]host:port/<type><path>`."""
    if selector is None:
        return ""
    prefix = URL_PREFIX if with_prefix else ""
    return f"{prefix}{selector.host}:{selector.port}/{selector.type}{selector.path}"


def parse_selector(locator: str | None) -> Selector | None:
    """
    Parse a locator of the form `[gopher://]host[:port][/<type><path>]`.

    The display name is always re-derived from the parsed fields.

    Args:
        locator: The locator string typed by the user or read from a file.

    Returns:
        The parsed Selector, or None if the locator is empty.
    """
    if not locator:
        return None

    text = locator
    if text[: len(URL_PREFIX)].lower() == URL_PREFIX:
        text = text[len(URL_PREFIX):]

    selector = Selector(type=MENU)
    colon = text.find(":")
    slash = text.find("/")

    if colon == -1 and slash == -1:
        selector.host = text
    else:
        if colon != -1 and (slash == -1 or colon < slash):
            selector.host, rest = text.split(":", 1)
            port, _, rest = rest.partition("/")
            selector.port = port or DEFAULT_PORT
        else:
            selector.host, rest = text.split("/", 1)
        if rest:
            selector.type = rest[0]
            selector.path = rest[1:]

    selector.name = print_selector(selector, with_prefix=True)
    return selector
