"""Menu renderer for selector lists."""

from .selector import BINARY_TYPES, ERROR, INFO, MENU, SEARCH, TEXT, Selector, print_selector
from .selector_list import SelectorList
from .variables import VariableStore

BUILTIN_TYPES = frozenset({TEXT, MENU, SEARCH}) | BINARY_TYPES


class MenuRenderer:
    """Renders selector lists as numbered menus."""

    MAX_NAME = 76

    def render(
        self,
        selectors: SelectorList,
        filter_text: str | None = None,
        handlers: VariableStore | None = None,
    ) -> str:
        """
        Render a selector list as a numbered menu.

        Informational and error lines are shown without a number. Items that
        cannot be opened (no built-in action and no type handler) use `:`
        instead of `|` as separator.

        Args:
            selectors: The list to render.
            filter_text: Only show items whose name or path contains this text.
            handlers: Type handlers, used to mark openable custom types.

        Returns:
            Formatted menu string.
        """
        entries = selectors.filter(filter_text)
        if not entries:
            return "(empty)"

        lines = []
        for selector in entries:
            name = selector.name[: self.MAX_NAME]
            if selector.type in (INFO, ERROR):
                lines.append(f"     | {name}")
            elif self._can_open(selector, handlers):
                lines.append(f"{selector.index:4d} | {name}")
            else:
                lines.append(f"{selector.index:4d} : {name}")

        return "\n".join(lines)

    def prompt(self, current: Selector | None) -> str:
        """Build the prompt shown while waiting for a command."""
        return f"({print_selector(current, with_prefix=False)})> "

    def _can_open(self, selector: Selector, handlers: VariableStore | None) -> bool:
        if selector.type in BUILTIN_TYPES:
            return True
        return handlers is not None and selector.type in handlers
