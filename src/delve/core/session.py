"""Session state for one interactive client."""

from dataclasses import dataclass, field

from .selector_list import SelectorList
from .variables import VariableStore


@dataclass
class Session:
    """All mutable client state, owned by the shell loop.

    Attributes:
        menu: The menu currently shown, replaced on each successful descent.
        history: Visited menus, newest first.
        bookmarks: Bookmarked selectors in the order they were added.
        variables: Session variables, substituted for `$name` tokens.
        aliases: Command aliases.
        handlers: External commands keyed by selector type character.
    """

    menu: SelectorList = field(default_factory=SelectorList)
    history: SelectorList = field(default_factory=SelectorList)
    bookmarks: SelectorList = field(default_factory=SelectorList)
    variables: VariableStore = field(default_factory=VariableStore)
    aliases: VariableStore = field(default_factory=VariableStore)
    handlers: VariableStore = field(default_factory=VariableStore)

    def find_handler(self, selector_type: str) -> str | None:
        """Get the handler command for a selector type, if any."""
        if not selector_type:
            return None
        return self.handlers.get(selector_type)
