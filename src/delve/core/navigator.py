"""Navigation controller: decides what opening a selector means."""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Callable

from ..errors import HandlerMissingError, HistoryEmptyError, TransferError
from ..interfaces import Console, Transport
from .menu_renderer import MenuRenderer
from .pager import TextPager
from .selector import BINARY_TYPES, ERROR, INFO, MENU, SEARCH, TEXT, Selector
from .selector_list import SelectorList, decode_menu
from .session import Session

logger = logging.getLogger(__name__)

CommandRunner = Callable[[str], None]

TEMP_PREFIX = "delve."


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)


def run_shell_command(command: str) -> None:
    """Run a fully substituted handler command through the system shell."""
    subprocess.run(command, shell=True, check=False)


def expand_handler(template: str, selector: Selector, temp_file: Callable[[], str]) -> str:
    """
    Substitute the `%` placeholders of a type handler command.

    `%h` host, `%p` port, `%s` path, `%n` name, `%%` a literal percent sign,
    `%f` the name of a temporary file holding the downloaded resource. Any
    other placeholder expands to nothing; a trailing `%` is kept.

    Args:
        template: The handler command as configured by the user.
        selector: The selector being opened.
        temp_file: Called for `%f`; returns the temporary file name.

    Returns:
        The command string to run.
    """
    values = {
        "%": lambda: "%",
        "h": lambda: selector.host,
        "p": lambda: selector.port,
        "s": lambda: selector.path,
        "n": lambda: selector.name,
        "f": temp_file,
    }

    parts = []
    i = 0
    while i < len(template):
        char = template[i]
        if char == "%" and i + 1 < len(template):
            value = values.get(template[i + 1])
            if value is not None:
                parts.append(value())
            i += 2
        else:
            parts.append(char)
            i += 1
    return "".join(parts)


class Navigator:
    """Opens selectors and applies the result to the session.

    Menus replace the current menu and are recorded on the history, binary
    items are saved to disk, text is paged, and any other type goes to the
    configured type handler. A failure aborts only the current navigation;
    menu and history are left as they were.
    """

    def __init__(
        self,
        session: Session,
        transport: Transport,
        console: Console,
        renderer: MenuRenderer | None = None,
        pager: TextPager | None = None,
        runner: CommandRunner = run_shell_command,
    ):
        self.session = session
        self.transport = transport
        self.console = console
        self.renderer = renderer or MenuRenderer()
        self.pager = pager or TextPager()
        self.runner = runner

    def navigate(self, selector: Selector) -> None:
        """
        Open a selector according to its type.

        Raises:
            DelveError: If fetching, saving or running a handler fails.
        """
        logger.info(f"Navigating to {selector.type} {selector.host}:{selector.port} {selector.path!r}")
        selector_type = selector.type

        if selector_type == SEARCH:
            query = self._ask_query()
            if query is not None:
                self.open_menu(selector, query)
        elif selector_type == MENU:
            self.open_menu(selector)
        elif selector_type in BINARY_TYPES:
            self.download_to_file(selector)
        elif selector_type in (INFO, ERROR):
            logger.debug(f"Ignoring non-navigable selector type {selector_type!r}")
        elif selector_type == TEXT and self.session.find_handler(TEXT) is None:
            self.show_text(selector)
        else:
            handler = self.session.find_handler(selector_type)
            if handler is None:
                raise HandlerMissingError(selector_type)
            self.execute_handler(handler, selector)

    def open_menu(self, selector: Selector, query: str | None = None, record: bool = True) -> SelectorList:
        """
        Fetch a menu and make it the current one.

        The selector is copied onto the history unless it already is the
        history head or `record` is False.
        """
        menu = decode_menu(self.transport.fetch(selector, query))
        logger.info(f"Loaded menu with {len(menu)} entries")

        if record and self.session.history.head is not selector:
            self.session.history.prepend(selector.copy())
        self.session.menu = menu
        self.console.print(self.renderer.render(menu, handlers=self.session.handlers))
        return menu

    def go_back(self) -> None:
        """
        Reopen the previous history entry and drop the current one.

        Raises:
            HistoryEmptyError: If there is no previous entry.
        """
        history = self.session.history
        if len(history) < 2:
            raise HistoryEmptyError()

        previous = history[1]
        query = None
        if previous.type == SEARCH:
            query = self._ask_query()
            if query is None:
                return
        self.open_menu(previous, query, record=False)
        history.pop_head()

    def _ask_query(self) -> str | None:
        query = self.console.read_line("enter gopher search string: ")
        if query is None:
            logger.debug("Search cancelled")
        return query

    def show_text(self, selector: Selector) -> None:
        """Fetch a text document and show it through the pager."""
        data = self.transport.fetch(selector)
        text = data.decode("utf-8", errors="replace")
        self.console.page(self.pager.paginate(text))

    def download_to_file(self, selector: Selector) -> Path | None:
        """
        Fetch a resource and save it under a name asked from the user.

        Returns:
            The written path, or None if the user cancelled.

        Raises:
            TransferError: If the file cannot be written.
        """
        default = selector.path.rsplit("/", 1)[-1]
        data = self.transport.fetch(selector)

        filename = self.console.read_line(f"enter filename (press ENTER for `{default}`): ")
        if filename is None:
            logger.debug("Download cancelled")
            return None
        filename = filename.strip() or default

        path = Path(filename)
        try:
            with open(path, "wb") as f:
                f.write(data)
        except (OSError, ValueError) as e:
            raise TransferError(f"cannot create file `{filename}`: {_reason(e)}") from e

        logger.info(f"Saved {len(data)} bytes to {path}")
        self.console.info(f"saved {len(data)} bytes to `{filename}`")
        return path

    def download_to_temp(self, selector: Selector) -> str:
        """
        Fetch a resource into a new temporary file.

        The caller owns the file and must remove it.
        """
        data = self.transport.fetch(selector)
        try:
            fd, filename = tempfile.mkstemp(prefix=TEMP_PREFIX)
        except OSError as e:
            raise TransferError(f"cannot create temporary file: {_reason(e)}") from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            Path(filename).unlink(missing_ok=True)
            raise TransferError(f"cannot write temporary file: {_reason(e)}") from e

        logger.debug(f"Downloaded {len(data)} bytes to {filename}")
        return filename

    def execute_handler(self, handler: str, selector: Selector) -> None:
        """
        Run a type handler command for a selector.

        The resource is downloaded at most once, on the first `%f`, and the
        temporary file is removed when the command returns or fails.
        """
        temp_path = None

        def temp_file() -> str:
            nonlocal temp_path
            if temp_path is None:
                temp_path = self.download_to_temp(selector)
            return temp_path

        try:
            command = expand_handler(handler, selector, temp_file)
            logger.info(f"Running handler: {command}")
            try:
                self.runner(command)
            except (OSError, ValueError) as e:
                raise TransferError(f"cannot run handler `{command}`: {_reason(e)}") from e
        finally:
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)
