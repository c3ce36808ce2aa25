"""GopherShell - Main orchestrator for the Gopher client."""

import logging
from pathlib import Path

from . import __version__
from .config import Config
from .core import (
    Interpreter,
    MenuRenderer,
    Navigator,
    Session,
    TextPager,
    parse_index,
    parse_selector,
)
from .core.navigator import CommandRunner, run_shell_command
from .errors import DelveError, SessionExit, UsageError
from .interfaces import Console, Transport

logger = logging.getLogger(__name__)


class GopherShell:
    """Interactive shell wiring session, navigator and interpreter together.

    Reads one line at a time: a menu number opens that item, anything else
    is evaluated as a command. Errors are reported and the loop continues.
    """

    BANNER = f"""delve - {__version__}  Copyright (C) 2019  Sebastian Steinhauer
This program comes with ABSOLUTELY NO WARRANTY; for details type `help license`.
This is free software, and you are welcome to redistribute it
under certain conditions; type `help license` for details.

Type `help` for help."""

    def __init__(
        self,
        transport: Transport,
        console: Console,
        config: Config | None = None,
        runner: CommandRunner = run_shell_command,
    ):
        """
        Initialize the shell.

        Args:
            transport: Transport used to fetch resources.
            console: Console for input and output.
            config: Client configuration (uses defaults if None).
            runner: Sink for fully substituted type handler commands.
        """
        self.transport = transport
        self.console = console
        self.config = config or Config()

        self.session = Session()
        self.renderer = MenuRenderer()
        self.navigator = Navigator(
            self.session,
            transport,
            console,
            renderer=self.renderer,
            pager=TextPager(page_lines=self.config.page_lines, width=self.config.page_width),
            runner=runner,
        )
        self.interpreter = Interpreter(
            self.session,
            self.navigator,
            console,
            renderer=self.renderer,
            max_nesting=self.config.max_nesting,
        )

    def prompt(self) -> str:
        """Prompt text showing the current history head."""
        return self.renderer.prompt(self.session.history.head)

    def handle_line(self, line: str) -> None:
        """
        Handle one line of user input.

        Raises:
            SessionExit: If the line asked to quit.
        """
        selector = self.session.menu.find(parse_index(line))
        if selector is None:
            self.interpreter.execute(line)
            return

        logger.debug(f"Selected [{selector.index}]: {selector.name}")
        try:
            self.navigator.navigate(selector)
        except DelveError as e:
            logger.debug(f"Navigation failed: {e!r}")
            self.console.error(str(e))

    def open(self, locator: str) -> None:
        """Open a start locator, reporting failures."""
        try:
            selector = parse_selector(locator)
            if selector is None:
                raise UsageError("usage: open <url>")
            self.navigator.navigate(selector)
        except DelveError as e:
            logger.debug(f"Opening {locator!r} failed: {e!r}")
            self.console.error(str(e))

    def load_rc_files(self, paths: list[Path]) -> int:
        """
        Evaluate each existing command file, in order.

        Missing files are skipped silently; unreadable ones are logged.

        Returns:
            Number of files evaluated.

        Raises:
            SessionExit: If a file asked to quit.
        """
        loaded = 0
        for path in paths:
            if not path.is_file():
                continue
            try:
                text = path.read_text(errors="replace")
            except OSError as e:
                logger.warning(f"Cannot read {path}: {e}")
                continue
            logger.info(f"Loading {path}")
            self.interpreter.execute(text, str(path))
            loaded += 1
        return loaded

    def run(self) -> None:
        """Read and handle lines until end of input or `quit`."""
        while True:
            line = self.console.read_line(self.prompt())
            if line is None:
                logger.debug("End of input")
                break
            try:
                self.handle_line(line)
            except SessionExit:
                logger.debug("Quit requested")
                break
