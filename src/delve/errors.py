"""Exceptions raised by the Gopher client."""


class DelveError(Exception):
    """Base class for errors reported to the user without ending the session."""

    pass


class TransportError(DelveError):
    """A fetch could not be completed."""

    pass


class ResolutionError(TransportError):
    """Host/port could not be resolved."""

    def __init__(self, host: str, port: str):
        super().__init__(f"cannot resolve hostname `{host}`")
        self.host = host
        self.port = port


class GopherConnectionError(TransportError):
    """No resolved address accepted a connection."""

    def __init__(self, host: str, port: str):
        super().__init__(f"cannot connect to `{host}`:`{port}`")
        self.host = host
        self.port = port


class TransferError(TransportError):
    """Reading, writing or file handling failed."""

    pass


class UnknownCommandError(DelveError):
    """A token is neither a built-in command nor an alias."""

    def __init__(self, token: str, source: str | None = None, line_no: int | None = None):
        if source:
            message = f"unknown command `{token}` in `{source}` at line {line_no}"
        else:
            message = f"unknown command `{token}`"
        super().__init__(message)
        self.token = token
        self.source = source
        self.line_no = line_no


class NestingLimitError(DelveError):
    """Alias expansion went deeper than the configured ceiling."""

    def __init__(self, depth: int):
        super().__init__("eval() nested too deeply")
        self.depth = depth


class HandlerMissingError(DelveError):
    """No type handler is defined for a selector type."""

    def __init__(self, selector_type: str):
        super().__init__(f"no handler for type `{selector_type}`")
        self.selector_type = selector_type


class HistoryEmptyError(DelveError):
    """There is nothing to go back to."""

    def __init__(self):
        super().__init__("history empty")


class UsageError(DelveError):
    """A command was called with missing or invalid arguments."""

    pass


class SessionExit(Exception):
    """Raised by the `quit` command to end the shell."""

    pass
