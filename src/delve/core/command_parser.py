"""Tokenizer for command lines typed at the prompt or read from rc files."""

import re

from .variables import VariableStore

BLANKS = " \v\t"
COMMENT = "#"
QUOTE = '"'
VARIABLE_SIGIL = "$"

LINE_BREAK = re.compile(r"\r\n|\r|\n")
LEADING_NUMBER = re.compile(r"[ \v\t]*\+?(\d+)")


def split_lines(text: str) -> list[str]:
    """Split text on CRLF, CR or LF."""
    return LINE_BREAK.split(text)


def parse_index(text: str | None) -> int | None:
    """
    Read the leading number of `text` as a 1-based item index.

    Args:
        text: Raw input such as "3" or " 12 extra".

    Returns:
        The number, or None if the text does not start with one.
    """
    if not text:
        return None
    match = LEADING_NUMBER.match(text)
    if match is None:
        return None
    return int(match.group(1))


class CommandLine:
    """A cursor over one line of input that yields shell-like tokens.

    Leading blanks are skipped, `#` ends the line, a `"`-quoted token runs to
    the next quote (or the end of the line), and a `$name` token is replaced
    once by the value of the session variable `name`.
    """

    def __init__(self, text: str, variables: VariableStore | None = None):
        self.rest = text
        self.variables = variables

    def next_token(self) -> str | None:
        """
        Consume and return the next token.

        Returns:
            The token text, or None at end of line or at a comment.
        """
        text = self.rest.lstrip(BLANKS)

        if not text or text[0] == COMMENT:
            self.rest = ""
            return None

        if text[0] == QUOTE:
            body = text[1:]
            if not body:
                self.rest = ""
                return None
            token, _, self.rest = body.partition(QUOTE)
            return token

        end = 0
        while end < len(text) and text[end] not in BLANKS:
            end += 1
        token = text[:end]
        self.rest = text[end + 1:]

        if token.startswith(VARIABLE_SIGIL):
            value = self.variables.get(token[1:]) if self.variables else None
            return value or ""
        return token

    def tokens(self) -> list[str]:
        """Consume and return all remaining tokens."""
        result = []
        token = self.next_token()
        while token is not None:
            result.append(token)
            token = self.next_token()
        return result
