"""Command interpreter: built-in commands, aliases and variable substitution."""

import logging

from ..errors import DelveError, NestingLimitError, SessionExit, UnknownCommandError, UsageError
from ..interfaces import Console
from .command_parser import CommandLine, parse_index, split_lines
from .help import HELP_TOPICS, format_columns
from .menu_renderer import MenuRenderer
from .navigator import Navigator
from .selector import ERROR, INFO, parse_selector, print_selector
from .session import Session

logger = logging.getLogger(__name__)


class Interpreter:
    """Evaluates command text line by line.

    The first token of a line names a built-in command or an alias. Alias
    text is evaluated recursively, one level deeper; evaluation refuses to
    start once `max_nesting` levels are active, which stops alias cycles
    such as `alias a a`.
    """

    COMMANDS = (
        "quit", "open", "show", "save", "back", "help",
        "history", "bookmarks", "set", "see", "alias", "type",
    )

    def __init__(
        self,
        session: Session,
        navigator: Navigator,
        console: Console,
        renderer: MenuRenderer | None = None,
        max_nesting: int = 10,
    ):
        self.session = session
        self.navigator = navigator
        self.console = console
        self.renderer = renderer or MenuRenderer()
        self.max_nesting = max_nesting

    def execute(self, text: str, source: str | None = None) -> None:
        """
        Evaluate text, reporting errors per line and carrying on.

        This is the boundary used for interactive input and rc files.

        Args:
            text: One or more command lines.
            source: File name the text came from, None for interactive input.

        Raises:
            SessionExit: If a `quit` command was evaluated.
        """
        for line_no, line in enumerate(split_lines(text), start=1):
            try:
                self._evaluate_line(line, source, line_no, depth=0)
            except DelveError as e:
                logger.debug(f"Command failed: {e!r}")
                self.console.error(str(e))

    def evaluate(self, text: str, source: str | None = None, depth: int = 0) -> None:
        """
        Evaluate text, stopping at the first error.

        Args:
            text: One or more command lines.
            source: Label used in error messages (file or alias name).
            depth: Current alias nesting level.

        Raises:
            NestingLimitError: If `depth` has reached `max_nesting`.
            DelveError: If any line fails.
        """
        if depth >= self.max_nesting:
            raise NestingLimitError(depth)

        for line_no, line in enumerate(split_lines(text), start=1):
            self._evaluate_line(line, source, line_no, depth)

    def _evaluate_line(self, line: str, source: str | None, line_no: int, depth: int) -> None:
        args = CommandLine(line, self.session.variables)
        token = args.next_token()
        if token is None:
            return

        name = token.lower()
        if name in self.COMMANDS:
            logger.debug(f"Running command {name!r}")
            getattr(self, f"cmd_{name}")(args)
            return

        alias = self.session.aliases.get(token)
        if alias is not None:
            logger.debug(f"Expanding alias {token!r} at depth {depth + 1}")
            self.evaluate(alias, token, depth + 1)
            return

        raise UnknownCommandError(token, source, line_no)

    # Built-in commands

    def cmd_quit(self, args: CommandLine) -> None:
        raise SessionExit()

    def cmd_open(self, args: CommandLine) -> None:
        selector = parse_selector(args.next_token())
        if selector is None:
            raise UsageError("usage: open <url>")
        self.navigator.navigate(selector)

    def cmd_show(self, args: CommandLine) -> None:
        self.console.print(
            self.renderer.render(self.session.menu, args.next_token(), self.session.handlers)
        )

    def cmd_save(self, args: CommandLine) -> None:
        selector = self.session.menu.find(parse_index(args.rest))
        if selector is not None:
            self.navigator.download_to_file(selector)

    def cmd_back(self, args: CommandLine) -> None:
        self.navigator.go_back()

    def cmd_help(self, args: CommandLine) -> None:
        topic = args.next_token()
        if topic:
            key = topic.lower()
            if key == "commands":
                self.console.print("available commands\n" + format_columns(sorted(self.COMMANDS)))
                return
            if key in HELP_TOPICS:
                self.console.print(HELP_TOPICS[key])
                return

        self.console.print(
            "available topics, type `help <topic>` to get more information\n"
            + format_columns(sorted(HELP_TOPICS))
        )

    def cmd_history(self, args: CommandLine) -> None:
        history = self.session.history
        selector = history.find(parse_index(args.rest))
        if selector is not None:
            self.navigator.navigate(selector)
        else:
            self.console.print(self.renderer.render(history, args.next_token()))

    def cmd_bookmarks(self, args: CommandLine) -> None:
        bookmarks = self.session.bookmarks
        selector = bookmarks.find(parse_index(args.rest))
        if selector is not None:
            self.navigator.navigate(selector)
            return

        name = args.next_token()
        url = args.next_token()
        if url:
            selector = parse_selector(url)
            selector.name = name
            bookmarks.append(selector)
            logger.info(f"Added bookmark {name!r} -> {print_selector(selector)}")
        else:
            self.console.print(self.renderer.render(bookmarks, name))

    def cmd_set(self, args: CommandLine) -> None:
        self._show_or_assign(self.session.variables, args.next_token(), args.next_token(), "variable")

    def cmd_see(self, args: CommandLine) -> None:
        selector = self.session.menu.find(parse_index(args.rest))
        if selector is not None and selector.type not in (ERROR, INFO):
            self.console.print(print_selector(selector, with_prefix=True))

    def cmd_alias(self, args: CommandLine) -> None:
        self._show_or_assign(self.session.aliases, args.next_token(), args.next_token(), "alias")

    def cmd_type(self, args: CommandLine) -> None:
        selector_type = args.next_token()
        if selector_type is not None and len(selector_type) != 1:
            raise UsageError("usage: type [<type>] [<command>]; <type> is a single character")
        self._show_or_assign(self.session.handlers, selector_type, args.next_token(), "type handler")

    def _show_or_assign(self, store, name: str | None, value: str | None, kind: str) -> None:
        if name is None:
            for key, data in store.items():
                self.console.print(f'{key} = "{data}"')
        elif value is not None:
            store.set(name, value)
        else:
            data = store.get(name)
            if data is None:
                self.console.info(f"{kind} `{name}` is not set")
            else:
                self.console.print(data)
